from __future__ import annotations

from dataclasses import dataclass


def is_all_uppercase(word: str) -> bool:
    """True if no letter in ``word`` is lowercase (non-letters are ignored)."""
    return not any(c.isalpha() and c.islower() for c in word)


def is_capitalized(word: str) -> bool:
    """True for 'Casa': uppercase first character and an all-lowercase tail."""
    if not word or not word[0].isupper():
        return False
    tail = word[1:]
    return tail == tail.lower()


def is_not_all_lowercase(word: str) -> bool:
    return any(c.isalpha() and not c.islower() for c in word)


def is_mixed_case(word: str) -> bool:
    """True for forms like 'iPhone' or 'McDonald'.

    All-uppercase, capitalized and all-lowercase words are not mixed case.
    """
    return not is_all_uppercase(word) and not is_capitalized(word) and is_not_all_lowercase(word)


@dataclass(frozen=True)
class CaseFacts:
    lower: str
    is_lowercase: bool
    is_mixed_case: bool

    @property
    def wants_lowercase_lookup(self) -> bool:
        # uppercase or capitalized words borrow the tags of their lowercase form
        return not self.is_lowercase and not self.is_mixed_case


def case_facts(word: str) -> CaseFacts:
    lower = word.lower()
    return CaseFacts(lower=lower, is_lowercase=word == lower, is_mixed_case=is_mixed_case(word))
