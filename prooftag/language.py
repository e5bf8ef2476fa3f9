from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from .exceptions import UnknownLanguageError
from .rules.nl import DUTCH_PRIORITIES
from .rules.priority import DefaultPriority, PriorityTable, default_priority
from .tagging.assembler import DictionaryTagger
from .tagging.base import Tagger
from .tagging.dicts.loader import load_language_dictionary
from .tagging.dicts.provider import Dictionary
from .tagging.pt import portuguese_tagger


@dataclass(frozen=True)
class Language:
    short_code: str
    name: str
    countries: Tuple[str, ...]
    tagger_factory: Callable[[Dictionary], Tagger] = DictionaryTagger
    priority_table: Optional[PriorityTable] = None
    opening_double_quote: str = '"'
    closing_double_quote: str = '"'
    opening_single_quote: str = "'"
    closing_single_quote: str = "'"
    advanced_typography: bool = False
    # Manual additions replace the dictionary's analyses instead of joining them
    overwrite_manual: bool = False

    def load_dictionary(self, root: Optional[Path] = None) -> Dictionary:
        return load_language_dictionary(self.short_code, root, overwrite=self.overwrite_manual)

    def create_tagger(self, dictionary: Dictionary) -> Tagger:
        return self.tagger_factory(dictionary)

    def priority_for_id(self, rule_id: str, default: DefaultPriority = default_priority) -> int:
        if self.priority_table is None:
            return default(rule_id)
        return self.priority_table.resolve(rule_id, default)


PORTUGUESE = Language(
    short_code="pt",
    name="Portuguese",
    countries=("PT", "BR", "AO", "MZ", "CV", "GW", "ST", "TL"),
    tagger_factory=portuguese_tagger,
)

DUTCH = Language(
    short_code="nl",
    name="Dutch",
    countries=("NL", "BE"),
    priority_table=DUTCH_PRIORITIES,
    opening_double_quote="“",
    closing_double_quote="”",
    opening_single_quote="‘",
    closing_single_quote="’",
    advanced_typography=True,
)


LANGUAGES: Dict[str, Language] = {
    "pt": PORTUGUESE,
    "nl": DUTCH,
}


def get_language(code: str) -> Language:
    # pt-BR, nl-BE, ... share the base language
    lang = LANGUAGES.get(code) or LANGUAGES.get(code.split("-", 1)[0])
    if lang is None:
        raise UnknownLanguageError(code)
    return lang
