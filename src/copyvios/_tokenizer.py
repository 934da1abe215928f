"""Word tokenizer producing positioned, hashed tokens."""

from __future__ import annotations

import re

from ._common_words import is_common_hash
from ._hash import fnv1a_u32
from ._types import Token

MIN_GRAM: int = 3
MAX_GRAM: int = 5

_WORD_RE = re.compile(r"\w+")

GUARD_WORD_HASH: int = fnv1a_u32("a")


def tokenize(text: str) -> list[Token]:
    """Split text into word tokens, followed by end-of-text guard tokens.

    Offsets refer to the original text; only the hash is computed from the
    lowercased word. The ``MAX_GRAM - MIN_GRAM`` guards sit at ``len(text)``
    with zero length and the hash of ``"a"``, so fixed-width windows near the
    end of the list never run past it.
    """
    tokens: list[Token] = []
    for m in _WORD_RE.finditer(text):
        h = fnv1a_u32(m.group().lower())
        tokens.append(Token(
            start=m.start(), length=m.end() - m.start(),
            hash=h, is_common=is_common_hash(h),
        ))

    guard = Token(
        start=len(text), length=0,
        hash=GUARD_WORD_HASH, is_common=is_common_hash(GUARD_WORD_HASH),
    )
    tokens.extend([guard] * (MAX_GRAM - MIN_GRAM))
    return tokens
