"""Tests for FNV-1a hash implementation."""

from copyvios._hash import fnv1a_u32


def test_empty_string():
    """Empty string should return the offset basis."""
    assert fnv1a_u32("") == 2166136261


def test_known_values():
    """Published FNV-1a 32-bit test vectors."""
    assert fnv1a_u32("a") == 0xE40C292C
    assert fnv1a_u32("foobar") == 0xBF9CF968


def test_range():
    h = fnv1a_u32("copyvio")
    assert 0 <= h < 2**32
    assert fnv1a_u32("copyvio") == h


def test_different_strings_differ():
    assert fnv1a_u32("cat") != fnv1a_u32("dog")


def test_case_sensitive():
    """Case folding is the tokenizer's job, not the hash's."""
    assert fnv1a_u32("Hello") != fnv1a_u32("hello")


def test_unicode():
    """UTF-8 multi-byte characters should hash over their bytes."""
    assert fnv1a_u32("café") != fnv1a_u32("cafe")
    assert fnv1a_u32("café") == fnv1a_u32("café")
