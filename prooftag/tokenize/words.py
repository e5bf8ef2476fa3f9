from __future__ import annotations

import regex as re  # use the 'regex' module for Unicode \p{L}/\p{M}
from typing import List


# Letters, marks and digits joined by inner apostrophes or hyphens stay one word
# (d'água, guarda-chuva); any other non-space character is its own token.
_WORD_RE = re.compile(
    r"[\p{L}\p{M}\p{N}]+(?:['’\-][\p{L}\p{M}\p{N}]+)*|[^\s\p{L}\p{M}\p{N}]",
    re.UNICODE,
)


class WordTokenizer:
    """Baseline word tokenizer for Latin-script languages.

    Whitespace is dropped; taggers only ever see word and punctuation tokens.
    """

    def tokenize(self, text: str) -> List[str]:
        return [m.group(0) for m in _WORD_RE.finditer(text)]
