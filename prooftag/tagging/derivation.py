from __future__ import annotations

import regex as re
from typing import List, Optional

from .base import Reading
from .dicts.provider import Dictionary


class SuffixAdverbRule:
    """Tag ``<adjective>+suffix`` words as manner adverbs.

    The stem is the lowercased word minus the suffix. The first stem analysis
    whose tag matches ``stem_tag`` yields a single reading; a word gets one
    adverb reading no matter how many stem analyses match.
    """

    def __init__(self, suffix: str, stem_tag: str, adverb_tag: str) -> None:
        self.suffix = suffix
        self.stem_tag = re.compile(stem_tag)
        self.adverb_tag = adverb_tag
        self._strip = re.compile(r"^(.+)" + re.escape(suffix) + r"$")

    def derive(self, word: str, dictionary: Dictionary) -> Optional[List[Reading]]:
        if not word.endswith(self.suffix):
            return None
        lower = word.lower()
        stem = self._strip.sub(r"\1", lower)
        for tag, _lemma in dictionary.lookup(stem):
            if tag is not None and self.stem_tag.fullmatch(tag):
                return [Reading(word, self.adverb_tag, lower)]
        return None


class PrefixedVerbRule:
    """Tag ``<prefix>+<verb form>`` words with the verb's own tags.

    ``pattern`` must have two groups, prefix and remainder, and is matched
    against the whole word. Every verb analysis of the lowercased remainder
    gives one reading whose lemma is the lowercased prefix plus the verb
    lemma. A matching word ends derivation even when no reading comes out.
    """

    def __init__(self, pattern: str, verb_tag: str) -> None:
        self.pattern = re.compile(pattern, re.IGNORECASE | re.UNICODE)
        self.verb_tag = re.compile(verb_tag)

    def derive(self, word: str, dictionary: Dictionary) -> Optional[List[Reading]]:
        m = self.pattern.fullmatch(word)
        if not m:
            return None
        prefix = m.group(1).lower()
        remainder = m.group(2).lower()
        out: List[Reading] = []
        for tag, lemma in dictionary.lookup(remainder):
            if tag is not None and self.verb_tag.fullmatch(tag):
                out.append(Reading(word, tag, prefix + lemma))
        return out
