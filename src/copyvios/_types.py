"""Data structures for copyvios."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Token:
    start: int       # offset into the original text
    length: int
    hash: int        # u32 FNV-1a of the lowercased word
    is_common: bool

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(slots=True)
class Fingerprint:
    start: int       # offset into its own document's text
    length: int
    hash: int        # u64 folded token hashes, 0 only for the guard
    is_matched: bool = False

    @property
    def end(self) -> int:
        return self.start + self.length


class Highlight(enum.Enum):
    NONE = "none"
    MEDIUM = "medium"
    FULL = "full"


@dataclass(slots=True, frozen=True)
class Segment:
    text: str
    highlight: Highlight = Highlight.NONE


@dataclass(slots=True, frozen=True)
class PhaseTimings:
    reduce_ms: float
    mark_ms: float
    map_ms: float
    markup_ms: float

    @property
    def total_ms(self) -> float:
        return self.reduce_ms + self.mark_ms + self.map_ms + self.markup_ms


@dataclass(slots=True, frozen=True)
class Comparison:
    segments_a: list[Segment]
    segments_b: list[Segment]
    timings: PhaseTimings
