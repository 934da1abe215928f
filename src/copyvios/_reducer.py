"""Reduce a token stream to positioned n-gram fingerprints."""

from __future__ import annotations

from bisect import bisect_left

from ._tokenizer import MAX_GRAM, MIN_GRAM, tokenize
from ._types import Fingerprint, Token

DENSE_WINDOW: int = 4
GUARD_HASH: int = 0

_MASK32: int = 0xFFFFFFFF
_MASK64: int = 0xFFFFFFFFFFFFFFFF


def _fold(h: int, token_hash: int) -> int:
    # Order-sensitive. DENSE_WINDOW 32-bit words at 8 bits apart fit in 64.
    return ((h << 8) ^ (token_hash & _MASK32)) & _MASK64


def fingerprint_tokens(tokens: list[Token], text_length: int) -> list[Fingerprint]:
    """Generate fingerprints for a tokenized document.

    Two fingerprints may be rooted at each token:

    * dense window: the next ``DENSE_WINDOW`` tokens in order, kept only
      when at least one of them is not a common word;
    * skip-gram: the next ``MIN_GRAM`` non-common tokens, however many
      common words lie between them.

    A folded hash of 0 is dropped, so 0 stays reserved for the guard
    fingerprint appended at ``text_length``.
    """
    result: list[Fingerprint] = []
    significant = [j for j, tok in enumerate(tokens) if not tok.is_common]

    for i in range(len(tokens) - MAX_GRAM + 1):
        start = tokens[i].start

        # Dense window
        h = 0
        any_significant = False
        window = tokens[i:i + DENSE_WINDOW]
        for tok in window:
            h = _fold(h, tok.hash)
            if not tok.is_common:
                any_significant = True
        if any_significant and h != GUARD_HASH:
            result.append(Fingerprint(start, window[-1].end - start, h))

        # Skip-gram over significant words
        k = bisect_left(significant, i)
        picked = significant[k:k + MIN_GRAM]
        h = 0
        for j in picked:
            h = _fold(h, tokens[j].hash)
        if h != GUARD_HASH:
            last = tokens[picked[-1]]
            result.append(Fingerprint(start, last.end - start, h))

    result.append(Fingerprint(text_length, 0, GUARD_HASH))
    return result


def tokenize_and_fingerprint(text: str) -> list[Fingerprint]:
    """Tokenize ``text`` and return its fingerprint list, guard included."""
    return fingerprint_tokens(tokenize(text), len(text))
