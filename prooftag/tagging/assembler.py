from __future__ import annotations

from typing import List, Sequence

from ..tokenize.base import Token, with_offsets
from .base import TYPEWRITER_APOSTROPHE, DerivationalRule, Reading, ReadingSet
from .case import case_facts
from .dicts.provider import Dictionary


TYPEWRITER = "'"
CURLY = "’"


class DictionaryTagger:
    """Tag tokens from a dictionary, with derivational fallbacks.

    For each token, in order:

    1. analyses of the form as written;
    2. analyses of the lowercased form, for uppercase and capitalized words
       (never for mixed-case ones like 'iPhone');
    3. if nothing so far and the word is not mixed case, the derivational
       rules in order, stopping at the first one that applies;
    4. if still nothing, a single unknown reading.

    The tagger keeps no state between calls and can be shared across threads.
    """

    def __init__(self, dictionary: Dictionary, rules: Sequence[DerivationalRule] = ()) -> None:
        self.dictionary = dictionary
        self.rules = tuple(rules)

    def tag(self, tokens: Sequence[str]) -> List[ReadingSet]:
        return [self.tag_word(t.text, t.start) for t in with_offsets(tokens)]

    def tag_word(self, word: str, start: int = 0) -> ReadingSet:
        flags = set()
        form = word
        # Rules and dictionary entries are written with the typewriter apostrophe
        if len(word) > 1:
            if TYPEWRITER in word:
                flags.add(TYPEWRITER_APOSTROPHE)
            form = word.replace(CURLY, TYPEWRITER)

        facts = case_facts(form)
        readings = self._lookup(form, form)
        if facts.wants_lowercase_lookup:
            readings.extend(self._lookup(form, facts.lower))

        if not readings and not facts.is_mixed_case:
            readings.extend(self._derive(form))

        if not readings:
            readings.append(Reading(form))

        return ReadingSet(token=Token(word, start), readings=tuple(readings), flags=frozenset(flags))

    def _lookup(self, surface: str, key: str) -> List[Reading]:
        return [Reading(surface, tag, lemma) for tag, lemma in self.dictionary.lookup(key)]

    def _derive(self, word: str) -> List[Reading]:
        for rule in self.rules:
            derived = rule.derive(word, self.dictionary)
            if derived is not None:
                return derived
        return []
