"""Copyvios error types."""


class CopyviosError(Exception):
    """Base error for all copyvios failures."""


class BitmapLengthError(CopyviosError):
    """Match bitmap length differs from the text it describes."""


class FingerprintRangeError(CopyviosError):
    """Matched fingerprint span falls outside the bitmap."""
