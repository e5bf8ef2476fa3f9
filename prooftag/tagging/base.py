from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Protocol, Sequence, Tuple

from ..tokenize.base import Token
from .dicts.provider import Dictionary


# Chunk flag set on tokens that were written with a typewriter apostrophe
TYPEWRITER_APOSTROPHE = "containsTypewriterApostrophe"


@dataclass(frozen=True)
class Reading:
    """One candidate (tag, lemma) interpretation of a surface form.

    A reading with neither tag nor lemma marks an unanalyzed word.
    """

    surface: str
    tag: Optional[str] = None
    lemma: Optional[str] = None

    @property
    def is_unknown(self) -> bool:
        return self.tag is None and self.lemma is None


@dataclass(frozen=True)
class ReadingSet:
    token: Token
    readings: Tuple[Reading, ...]
    flags: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def start(self) -> int:
        return self.token.start

    @property
    def end(self) -> int:
        return self.token.end

    @property
    def is_unknown(self) -> bool:
        return len(self.readings) == 1 and self.readings[0].is_unknown

    @property
    def tags(self) -> List[str]:
        return [r.tag for r in self.readings if r.tag is not None]

    @property
    def lemmas(self) -> List[str]:
        return [r.lemma for r in self.readings if r.lemma is not None]

    def has_tag(self, tag: str) -> bool:
        return any(r.tag == tag for r in self.readings)

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags


class Tagger(Protocol):
    def tag(self, tokens: Sequence[str]) -> List[ReadingSet]:
        ...


class DerivationalRule(Protocol):
    """Fallback analysis for a word the dictionary does not know.

    ``derive`` returns None when the rule does not apply, so the next rule is
    tried. Any list, even an empty one, ends derivation for the word.
    """

    def derive(self, word: str, dictionary: Dictionary) -> Optional[List[Reading]]:
        ...
