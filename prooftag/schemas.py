from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .tagging.base import ReadingSet


class ReadingOut(BaseModel):
    surface: str
    tag: Optional[str] = Field(None, description="Morphological tag; None for unknown words")
    lemma: Optional[str] = Field(None, description="Dictionary form")


class ReadingSetOut(BaseModel):
    """One tagged token."""
    token: str = Field(..., min_length=1)
    start: int = Field(..., ge=0, description="Offset of the token in the sentence")
    readings: List[ReadingOut] = Field(..., min_length=1)
    flags: List[str] = Field(default_factory=list)

    @classmethod
    def from_reading_set(cls, rs: ReadingSet) -> "ReadingSetOut":
        return cls(
            token=rs.token.text,
            start=rs.start,
            readings=[ReadingOut(surface=r.surface, tag=r.tag, lemma=r.lemma) for r in rs.readings],
            flags=sorted(rs.flags),
        )


class TaggedSentenceOut(BaseModel):
    lang: str
    tokens: List[ReadingSetOut] = Field(default_factory=list)


class PriorityOut(BaseModel):
    rule_id: str
    priority: int
