from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List


@dataclass(frozen=True)
class RuleMatch:
    rule_id: str
    start: int
    end: int

    def overlaps(self, other: "RuleMatch") -> bool:
        return self.start < other.end and other.start < self.end


def resolve_overlaps(matches: Iterable[RuleMatch], priority: Callable[[str], int]) -> List[RuleMatch]:
    """Keep the highest-priority match wherever matches overlap.

    Equal priorities keep the input order, so the caller decides ties.
    Returns the surviving matches sorted by position.
    """
    ranked = sorted(matches, key=lambda m: -priority(m.rule_id))
    kept: List[RuleMatch] = []
    for m in ranked:
        if not any(m.overlaps(k) for k in kept):
            kept.append(m)
    kept.sort(key=lambda m: (m.start, m.end))
    return kept
