"""Cross-document fingerprint matching."""

from __future__ import annotations

import logging
import os
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._types import Fingerprint

logger = logging.getLogger(__name__)

_METHODS = ("scan", "index")


def default_workers() -> int:
    """Half the available CPUs, at least one."""
    return max(1, (os.cpu_count() or 1) // 2)


def _scan_range(
    fps_a: Sequence[Fingerprint], fps_b: Sequence[Fingerprint], lo: int, hi: int,
) -> None:
    for i in range(lo, hi):
        fa = fps_a[i]
        for fb in fps_b:
            if fa.hash == fb.hash:
                fa.is_matched = fb.is_matched = True


def _index_range(
    fps_a: Sequence[Fingerprint], index: dict[int, list[Fingerprint]], lo: int, hi: int,
) -> None:
    for i in range(lo, hi):
        fa = fps_a[i]
        hits = index.get(fa.hash)
        if hits:
            fa.is_matched = True
            for fb in hits:
                fb.is_matched = True


def _partition(n: int, slices: int) -> list[tuple[int, int]]:
    """Split ``range(n)`` into contiguous ranges; the last takes the remainder."""
    size = n // slices
    return [
        (size * k, n if k == slices - 1 else size * (k + 1))
        for k in range(slices)
    ]


def cross_match(
    fingerprints_a: Sequence[Fingerprint],
    fingerprints_b: Sequence[Fingerprint],
    *,
    workers: int | None = None,
    method: str = "scan",
) -> None:
    """Flag every fingerprint whose hash occurs in the other document.

    Args:
        fingerprints_a: Fingerprints of the first document. Partitioned
            across workers.
        fingerprints_b: Fingerprints of the second document. Read in full by
            every worker.
        workers: Number of partitions matched concurrently. None uses
            ``default_workers()``; 1 runs on the calling thread.
        method: "scan" compares every pair (O(n*m)). "index" looks hashes up
            in a dict built from ``fingerprints_b``; it flags the same
            fingerprints.

    Workers only ever store True into ``is_matched``, and attribute stores
    are atomic in CPython, so the flags need no lock. Returns after every
    partition has finished; a worker's exception is re-raised here.

    Raises:
        ValueError: If ``workers`` is below 1 or ``method`` is unknown.
    """
    if workers is None:
        workers = default_workers()
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if method not in _METHODS:
        raise ValueError(f"method must be one of {_METHODS}, got {method!r}")

    if method == "index":
        index: dict[int, list[Fingerprint]] = defaultdict(list)
        for fb in fingerprints_b:
            index[fb.hash].append(fb)
        run = partial(_index_range, fingerprints_a, index)
    else:
        run = partial(_scan_range, fingerprints_a, fingerprints_b)

    ranges = _partition(len(fingerprints_a), workers)
    logger.debug(
        "matching %d x %d fingerprints (%s, %d partitions)",
        len(fingerprints_a), len(fingerprints_b), method, len(ranges),
    )

    if workers == 1:
        run(0, len(fingerprints_a))
        return

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(run, lo, hi) for lo, hi in ranges]
        for future in futures:
            future.result()
