from __future__ import annotations

from .assembler import DictionaryTagger
from .base import TYPEWRITER_APOSTROPHE, DerivationalRule, Reading, ReadingSet, Tagger
from .case import case_facts, is_mixed_case
from .derivation import PrefixedVerbRule, SuffixAdverbRule
from .pt import portuguese_tagger

__all__ = [
    "DerivationalRule",
    "DictionaryTagger",
    "PrefixedVerbRule",
    "Reading",
    "ReadingSet",
    "SuffixAdverbRule",
    "TYPEWRITER_APOSTROPHE",
    "Tagger",
    "case_facts",
    "is_mixed_case",
    "portuguese_tagger",
]
