from __future__ import annotations

from .nl import DUTCH_PRIORITIES, dutch_priority
from .overlap import RuleMatch, resolve_overlaps
from .priority import Exact, Prefix, PriorityEntry, PriorityTable, default_priority

__all__ = [
    "DUTCH_PRIORITIES",
    "Exact",
    "Prefix",
    "PriorityEntry",
    "PriorityTable",
    "RuleMatch",
    "default_priority",
    "dutch_priority",
    "resolve_overlaps",
]
