from __future__ import annotations

from .provider import (
    Analysis,
    CombiningDictionary,
    Dictionary,
    MemoryDictionary,
)
from .loader import dictionary_path, load_language_dictionary, load_tsv

__all__ = [
    "Analysis",
    "CombiningDictionary",
    "Dictionary",
    "MemoryDictionary",
    "dictionary_path",
    "load_language_dictionary",
    "load_tsv",
]
