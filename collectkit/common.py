"""Shared errors, limits and helpers used by the collection types."""

from __future__ import annotations

__all__ = [
    "MAX_POW_TWO",
    "MAX_ELEMENTS",
    "CollectionError",
    "OutOfRangeError",
    "InvalidRangeError",
    "ValueNotFoundError",
    "KeyNotFoundError",
    "InvalidCapacityError",
    "MaxCapacityError",
    "compare_str",
    "round_pow_two",
]

#: Largest power of two a power-of-two sized container may grow to.
MAX_POW_TWO = 1 << 63

#: Largest number of elements any container may hold.
MAX_ELEMENTS = (1 << 64) - 1


class CollectionError(Exception):
    """Base class of every error raised by the collections."""


class OutOfRangeError(CollectionError, IndexError):
    """An index lies outside the bounds of the container, or it is empty."""


class InvalidRangeError(CollectionError, ValueError):
    """A range of indices is malformed or does not fit the container."""


class ValueNotFoundError(CollectionError, ValueError):
    """The requested element is not in the container."""


class KeyNotFoundError(CollectionError, KeyError):
    """The requested key is not in the table."""


class InvalidCapacityError(CollectionError, ValueError):
    """A requested capacity or growth factor cannot be used."""


class MaxCapacityError(CollectionError, OverflowError):
    """The container has already reached its largest possible capacity."""


def _as_text_bytes(value: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(value, str):
        data = value.encode("utf-8")
    else:
        data = bytes(value)
    nul = data.find(b"\0")
    return data if nul < 0 else data[:nul]


def compare_str(first, second) -> int:
    """Compare two strings byte by byte, returning -1, 0 or 1.

    Strings are compared as their UTF-8 encodings and end at the first NUL,
    so the ordering is that of a plain byte-string comparison.
    """
    a = _as_text_bytes(first)
    b = _as_text_bytes(second)
    return (a > b) - (a < b)


def round_pow_two(n: int) -> int:
    """Round ``n`` up to the nearest power of two.

    Zero rounds to 2, and anything at or above :data:`MAX_POW_TWO` is capped
    at :data:`MAX_POW_TWO`.
    """
    if n < 0:
        raise ValueError("cannot round a negative number to a power of two")
    if n >= MAX_POW_TWO:
        return MAX_POW_TWO
    if n == 0:
        return 2
    return 1 << (n - 1).bit_length()