"""Turn a text and its match bitmap into highlighted segments."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ._errors import BitmapLengthError
from ._types import Highlight, Segment

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

_WORD_CHAR_RE = re.compile(r"\w")
_LONE_WORD_RE = re.compile(r"\s*\w+\s*")


def _classify(run: str, marked: bool, first: bool, last: bool) -> Highlight:
    if marked:
        # A lone matched word is weaker evidence than a matched phrase
        if _LONE_WORD_RE.fullmatch(run):
            return Highlight.MEDIUM
        return Highlight.FULL
    # Punctuation between two matched runs joins the highlighted band
    if not first and not last and _WORD_CHAR_RE.search(run) is None:
        return Highlight.FULL
    return Highlight.NONE


def _runs(text: str, bitmap: Sequence[bool]) -> Iterator[Segment]:
    n = len(text)
    pos = 0
    while pos < n:
        marked = bool(bitmap[pos])
        try:
            end = bitmap.index(not marked, pos)
        except ValueError:
            end = n
        run = text[pos:end]
        yield Segment(run, _classify(run, marked, pos == 0, end == n))
        pos = end


def segment(text: str, bitmap: Sequence[bool]) -> Iterator[Segment]:
    """Lazily split ``text`` into maximal runs of equal bitmap value.

    The segments, joined in order, reproduce ``text`` exactly. Each call
    returns a fresh iterator; empty text yields no segments.

    Raises:
        BitmapLengthError: If ``bitmap`` and ``text`` differ in length.
    """
    if len(bitmap) != len(text):
        raise BitmapLengthError(
            f"Bitmap length {len(bitmap)} does not match text length {len(text)}"
        )
    return _runs(text, bitmap)
