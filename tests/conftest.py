"""Shared fixtures for copyvios tests."""

import pytest

FOX_A = "The quick brown fox jumps over the lazy dog."
FOX_B = "A quick brown fox jumped over a sleepy dog."


@pytest.fixture
def fox_texts():
    """Two sentences sharing only the phrase "quick brown fox"."""
    return FOX_A, FOX_B


def bitmap_for(text, *spans):
    """Bitmap for ``text`` with each (start, end) span set True."""
    bitmap = [False] * len(text)
    for start, end in spans:
        bitmap[start:end] = [True] * (end - start)
    return bitmap
