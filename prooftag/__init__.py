from __future__ import annotations

from .language import LANGUAGES, Language, get_language
from .rules import dutch_priority
from .tagging import DictionaryTagger, Reading, ReadingSet, portuguese_tagger
from .tagging.dicts import MemoryDictionary, load_language_dictionary

__all__ = [
    "DictionaryTagger",
    "LANGUAGES",
    "Language",
    "MemoryDictionary",
    "Reading",
    "ReadingSet",
    "dutch_priority",
    "get_language",
    "load_language_dictionary",
    "portuguese_tagger",
]
