"""Project matched fingerprints onto a per-character bitmap."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._errors import FingerprintRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableSequence

    from ._types import Fingerprint


def mark_bitmap(
    fingerprints: Iterable[Fingerprint], bitmap: MutableSequence[bool]
) -> None:
    """Set ``bitmap`` True over the span of every matched fingerprint.

    Overlapping spans are OR'd, so re-marking is a no-op.

    Raises:
        FingerprintRangeError: If a matched span falls outside the bitmap.
    """
    size = len(bitmap)
    for fp in fingerprints:
        if not fp.is_matched:
            continue
        if fp.start < 0 or fp.length < 0 or fp.end > size:
            raise FingerprintRangeError(
                f"Fingerprint span [{fp.start}, {fp.end}) outside bitmap "
                f"of length {size}"
            )
        if fp.length:
            bitmap[fp.start:fp.end] = [True] * fp.length


def build_bitmap(fingerprints: Iterable[Fingerprint], text_length: int) -> list[bool]:
    """Return a new bitmap of ``text_length`` marked from ``fingerprints``."""
    bitmap = [False] * text_length
    mark_bitmap(fingerprints, bitmap)
    return bitmap
