from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Protocol


@dataclass(frozen=True)
class Token:
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> List[str]:
        ...


def with_offsets(words: Iterable[str]) -> List[Token]:
    """Attach running character offsets to already segmented words.

    Offsets are cumulative token lengths; whitespace between tokens is not
    counted.
    """
    out: List[Token] = []
    pos = 0
    for w in words:
        out.append(Token(text=w, start=pos))
        pos += len(w)
    return out
