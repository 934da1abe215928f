"""Copyvios: highlight passages shared verbatim between two plain-text documents."""

from __future__ import annotations

import logging

from ._common_words import COMMON_WORDS
from ._compare import compare
from ._errors import BitmapLengthError, CopyviosError, FingerprintRangeError
from ._mapper import build_bitmap, mark_bitmap
from ._markup import segment
from ._matcher import cross_match, default_workers
from ._reducer import fingerprint_tokens, tokenize_and_fingerprint
from ._tokenizer import tokenize
from ._types import (
    Comparison,
    Fingerprint,
    Highlight,
    PhaseTimings,
    Segment,
    Token,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BitmapLengthError",
    "COMMON_WORDS",
    "Comparison",
    "CopyviosError",
    "Fingerprint",
    "FingerprintRangeError",
    "Highlight",
    "PhaseTimings",
    "Segment",
    "Token",
    "build_bitmap",
    "compare",
    "cross_match",
    "default_workers",
    "fingerprint_tokens",
    "mark_bitmap",
    "segment",
    "tokenize",
    "tokenize_and_fingerprint",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
