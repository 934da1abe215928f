"""Side-by-side comparison of two plain-text documents."""

from __future__ import annotations

import logging
import time

from ._mapper import build_bitmap
from ._markup import segment
from ._matcher import cross_match
from ._reducer import tokenize_and_fingerprint
from ._types import Comparison, PhaseTimings

logger = logging.getLogger(__name__)


def _elapsed_ms(since: float) -> float:
    return (time.perf_counter() - since) * 1000.0


def compare(
    text_a: str,
    text_b: str,
    *,
    workers: int | None = None,
    method: str = "scan",
) -> Comparison:
    """Highlight the passages two documents share.

    Args:
        text_a: First document, markup already stripped.
        text_b: Second document, markup already stripped.
        workers: Matching partitions; see ``cross_match``.
        method: Matching method; see ``cross_match``.
    """
    if not text_a or not text_b:
        logger.info(
            "nothing to compare (lengths %d and %d)", len(text_a), len(text_b)
        )

    # Step 1: Fingerprints per document
    t0 = time.perf_counter()
    fps_a = tokenize_and_fingerprint(text_a)
    fps_b = tokenize_and_fingerprint(text_b)
    reduce_ms = _elapsed_ms(t0)

    # Step 2: Flag fingerprints shared by both
    t0 = time.perf_counter()
    cross_match(fps_a, fps_b, workers=workers, method=method)
    mark_ms = _elapsed_ms(t0)

    # Step 3: Matched spans to per-character bitmaps
    t0 = time.perf_counter()
    map_a = build_bitmap(fps_a, len(text_a))
    map_b = build_bitmap(fps_b, len(text_b))
    map_ms = _elapsed_ms(t0)

    # Step 4: Bitmaps to highlighted segments
    t0 = time.perf_counter()
    segments_a = list(segment(text_a, map_a))
    segments_b = list(segment(text_b, map_b))
    markup_ms = _elapsed_ms(t0)

    timings = PhaseTimings(
        reduce_ms=reduce_ms, mark_ms=mark_ms, map_ms=map_ms, markup_ms=markup_ms,
    )
    logger.debug(
        "compared %d and %d fingerprints: reduce=%.1fms mark=%.1fms "
        "map=%.1fms markup=%.1fms",
        len(fps_a), len(fps_b),
        timings.reduce_ms, timings.mark_ms, timings.map_ms, timings.markup_ms,
    )
    return Comparison(segments_a=segments_a, segments_b=segments_b, timings=timings)
