from __future__ import annotations

from .base import Token, Tokenizer, with_offsets
from .words import WordTokenizer

__all__ = ["Token", "Tokenizer", "WordTokenizer", "with_offsets"]
