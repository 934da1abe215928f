"""FNV-1a 32-bit hash implementation."""

FNV1A_OFFSET: int = 2166136261
FNV1A_PRIME: int = 16777619
_MASK32: int = 0xFFFFFFFF


def fnv1a_u32(s: str) -> int:
    """Compute FNV-1a 32-bit hash of a string (UTF-8 bytes)."""
    h = FNV1A_OFFSET
    for byte in s.encode("utf-8"):
        h ^= byte
        h = (h * FNV1A_PRIME) & _MASK32
    return h
