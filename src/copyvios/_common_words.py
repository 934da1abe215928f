"""Common words that never make a fingerprint significant on their own."""

from ._hash import fnv1a_u32

COMMON_WORDS: frozenset[str] = frozenset({
    # Articles
    "a", "an", "the",
    # Prepositions and conjunctions
    "in", "on", "at", "to", "of", "by", "for", "as", "or", "and",
    # Pronouns
    "it", "he", "she",
    # Be forms
    "is", "was", "are",
    # Left over from a possessive 's after \w+ splitting
    "s",
})

# Hash collisions with other words are accepted: such words read as common.
COMMON_HASHES: frozenset[int] = frozenset(fnv1a_u32(w) for w in COMMON_WORDS)


def is_common_hash(h: int) -> bool:
    return h in COMMON_HASHES
