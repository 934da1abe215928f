"""Tests for bitmap mapping."""

import pytest

from copyvios._errors import FingerprintRangeError
from copyvios._mapper import build_bitmap, mark_bitmap
from copyvios._types import Fingerprint


def test_empty():
    assert build_bitmap([], 0) == []
    assert build_bitmap([Fingerprint(0, 0, 0, True)], 0) == []


def test_only_matched_spans_marked():
    fps = [
        Fingerprint(0, 2, 1, is_matched=True),
        Fingerprint(3, 2, 2, is_matched=False),
        Fingerprint(6, 1, 3, is_matched=True),
    ]
    assert build_bitmap(fps, 8) == [
        True, True, False, False, False, False, True, False,
    ]


def test_overlaps_are_ored():
    fps = [
        Fingerprint(1, 4, 1, is_matched=True),
        Fingerprint(3, 4, 2, is_matched=True),
    ]
    assert build_bitmap(fps, 8) == [
        False, True, True, True, True, True, True, False,
    ]


def test_idempotent():
    fps = [Fingerprint(2, 3, 1, is_matched=True)]
    once = build_bitmap(fps, 6)
    twice = list(once)
    mark_bitmap(fps, twice)
    assert once == twice


def test_covered_iff_inside_matched_span():
    fps = [
        Fingerprint(0, 3, 1, is_matched=True),
        Fingerprint(2, 5, 2, is_matched=False),
        Fingerprint(8, 2, 3, is_matched=True),
    ]
    bitmap = build_bitmap(fps, 12)
    for pos, flag in enumerate(bitmap):
        covered = any(fp.is_matched and fp.start <= pos < fp.end for fp in fps)
        assert flag == covered


def test_guard_at_end_is_harmless():
    fps = [Fingerprint(5, 0, 0, is_matched=True)]
    assert build_bitmap(fps, 5) == [False] * 5


def test_marks_in_place_on_bytearray():
    bitmap = bytearray(4)
    mark_bitmap([Fingerprint(1, 2, 9, is_matched=True)], bitmap)
    assert list(bitmap) == [0, 1, 1, 0]


def test_matched_span_out_of_range():
    with pytest.raises(FingerprintRangeError):
        build_bitmap([Fingerprint(3, 4, 1, is_matched=True)], 5)


def test_unmatched_span_out_of_range_ignored():
    assert build_bitmap([Fingerprint(3, 4, 1)], 5) == [False] * 5
