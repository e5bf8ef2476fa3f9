"""Rule priorities.

When several rules match overlapping text the one with the higher priority
wins. A priority table is an ordered tuple of (matcher, value) entries; the
first entry whose matcher accepts the rule id decides, otherwise the caller's
default applies. Tables hold no state and can be read from any thread.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Protocol, Tuple, Union

from ..config import get_settings


DefaultPriority = Callable[[str], int]


def default_priority(rule_id: str) -> int:
    return get_settings().DEFAULT_PRIORITY


class Matcher(Protocol):
    def matches(self, rule_id: str) -> bool:
        ...


@dataclass(frozen=True)
class Exact:
    rule_id: str

    def matches(self, rule_id: str) -> bool:
        return rule_id == self.rule_id


@dataclass(frozen=True)
class Prefix:
    prefix: str

    def matches(self, rule_id: str) -> bool:
        return rule_id.startswith(self.prefix)


@dataclass(frozen=True)
class PriorityEntry:
    matcher: Matcher
    value: int


class PriorityTable:
    def __init__(self, entries: Iterable[Union[PriorityEntry, Tuple[Matcher, int]]]) -> None:
        out = []
        for e in entries:
            if not isinstance(e, PriorityEntry):
                e = PriorityEntry(*e)
            out.append(e)
        self.entries: Tuple[PriorityEntry, ...] = tuple(out)

    def resolve(self, rule_id: str, default: DefaultPriority = default_priority) -> int:
        for entry in self.entries:
            if entry.matcher.matches(rule_id):
                return entry.value
        return default(rule_id)

    def __call__(self, rule_id: str) -> int:
        return self.resolve(rule_id)

    def __len__(self) -> int:
        return len(self.entries)


def exact(values: dict) -> Tuple[PriorityEntry, ...]:
    """Entries for a {rule_id: priority} mapping, in mapping order."""
    return tuple(PriorityEntry(Exact(k), v) for k, v in values.items())
