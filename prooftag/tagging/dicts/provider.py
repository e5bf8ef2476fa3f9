from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple


# (tag, lemma)
Analysis = Tuple[str, str]


class Dictionary(Protocol):
    """Read-only morphological lookup.

    Lookups are case-sensitive, side-effect free and total: a form the
    dictionary does not know yields an empty list.
    """

    def lookup(self, word: str) -> List[Analysis]:
        ...


class MemoryDictionary:
    """Immutable in-memory dictionary keyed by surface form."""

    def __init__(self, entries: Optional[Mapping[str, Sequence[Analysis]]] = None) -> None:
        frozen: Dict[str, Tuple[Analysis, ...]] = {}
        for form, analyses in (entries or {}).items():
            frozen[form] = tuple((tag, lemma) for tag, lemma in analyses)
        self._entries = MappingProxyType(frozen)

    @classmethod
    def from_rows(cls, rows: Iterable[Tuple[str, str, str]]) -> "MemoryDictionary":
        """Build from (form, lemma, tag) rows, the column order of dictionary exports."""
        idx: Dict[str, List[Analysis]] = {}
        for form, lemma, tag in rows:
            lst = idx.setdefault(form, [])
            if (tag, lemma) not in lst:
                lst.append((tag, lemma))
        return cls(idx)

    def lookup(self, word: str) -> List[Analysis]:
        return list(self._entries.get(word, ()))

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class CombiningDictionary:
    """Main dictionary plus manual additions and removals.

    By default added analyses are appended to the main ones. With
    ``overwrite`` a word listed in ``added`` gets only the added analyses.
    Removed analyses are filtered out of the result in both cases.
    """

    def __init__(
        self,
        primary: Dictionary,
        added: Optional[Dictionary] = None,
        removed: Optional[Dictionary] = None,
        overwrite: bool = False,
    ) -> None:
        self.primary = primary
        self.added = added
        self.removed = removed
        self.overwrite = overwrite

    def lookup(self, word: str) -> List[Analysis]:
        extra = self.added.lookup(word) if self.added is not None else []
        if self.overwrite and extra:
            results = extra
        else:
            results = self.primary.lookup(word)
            for a in extra:
                if a not in results:
                    results.append(a)
        if self.removed is not None:
            dropped = set(self.removed.lookup(word))
            if dropped:
                results = [a for a in results if a not in dropped]
        return results
