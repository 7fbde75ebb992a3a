"""Hash functions used by the hash table: a djb2 string hash and MurmurHash3."""

from __future__ import annotations

import struct

__all__ = ["KEY_LENGTH_VARIABLE", "POINTER_LENGTH", "hash_string", "hash_bytes", "hash_identity"]

#: Key length marking keys of variable length, such as strings.
KEY_LENGTH_VARIABLE = -1

#: Width in bytes of an object identity, as hashed by :func:`hash_identity`.
POINTER_LENGTH = 8

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1

_C1 = 0x87C37B91114253D5
_C2 = 0x4CF5AD432745937F


def _rotl64(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _MASK64


def _fmix64(k: int) -> int:
    k ^= k >> 33
    k = (k * 0xFF51AFD7ED558CCD) & _MASK64
    k ^= k >> 33
    k = (k * 0xC4CEB9FE1A85EC53) & _MASK64
    k ^= k >> 33
    return k


def _mix_k1(k1: int) -> int:
    k1 = (k1 * _C1) & _MASK64
    k1 = _rotl64(k1, 31)
    return (k1 * _C2) & _MASK64


def _mix_k2(k2: int) -> int:
    k2 = (k2 * _C2) & _MASK64
    k2 = _rotl64(k2, 33)
    return (k2 * _C1) & _MASK64


def _round(h1: int, h2: int, k1: int, k2: int) -> tuple[int, int]:
    h1 ^= _mix_k1(k1)
    h1 = _rotl64(h1, 27)
    h1 = (h1 + h2) & _MASK64
    h1 = (h1 * 5 + 0x52DCE729) & _MASK64

    h2 ^= _mix_k2(k2)
    h2 = _rotl64(h2, 31)
    h2 = (h2 + h1) & _MASK64
    h2 = (h2 * 5 + 0x38495AB5) & _MASK64
    return h1, h2


def _finish(h1: int, h2: int, length: int) -> int:
    h1 ^= length & _MASK64
    h2 ^= length & _MASK64
    h1 = (h1 + h2) & _MASK64
    h2 = (h2 + h1) & _MASK64
    h1 = _fmix64(h1)
    h2 = _fmix64(h2)
    h1 = (h1 + h2) & _MASK64
    return h1


def _to_bytes(key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


def hash_string(key, length: int = KEY_LENGTH_VARIABLE, seed: int = 0) -> int:
    """Hash a NUL-terminated string with the table's djb2 variant.

    The first character only takes part through the loop count, and the
    terminating NUL is mixed in last; ``length`` and ``seed`` only offset the
    starting value.
    """
    data = _to_bytes(key)
    nul = data.find(b"\0")
    if nul >= 0:
        data = data[:nul]

    h = ((seed & _MASK32) + 5381 + length + 1) & _MASK64
    if not data:
        return h
    for byte in data[1:] + b"\0":
        signed = byte - 256 if byte >= 128 else byte
        h = (((h << 5) + h) ^ (signed & _MASK64)) & _MASK64
    return h


def hash_bytes(key, length: int | None = None, seed: int = 0) -> int:
    """Return the first 64 bits of MurmurHash3 x64-128 over ``length`` bytes of ``key``.

    A ``length`` of ``None`` or below zero hashes the whole key.
    """
    data = _to_bytes(key)
    if length is None or length < 0:
        length = len(data)
    if length > len(data):
        raise ValueError(f"key holds {len(data)} bytes, fewer than the length {length}")
    data = data[:length]

    h1 = h2 = seed & _MASK32
    nblocks = length // 16
    for k1, k2 in struct.iter_unpack("<QQ", data[: nblocks * 16]):
        h1, h2 = _round(h1, h2, k1, k2)

    tail = data[nblocks * 16 :]
    rem = length & 15
    if rem > 8:
        k2 = int.from_bytes(tail[8:rem], "little")
        h2 ^= _mix_k2(k2)
    if rem > 0:
        k1 = int.from_bytes(tail[: min(rem, 8)], "little")
        h1 ^= _mix_k1(k1)

    return _finish(h1, h2, length)


def hash_identity(key, length: int = POINTER_LENGTH, seed: int = 0) -> int:
    """Hash an object's identity rather than its contents.

    Integers are taken as the identity itself; any other object is hashed by
    its ``id``.
    """
    if isinstance(key, int) and not isinstance(key, bool):
        ident = key & _MASK64
    else:
        ident = id(key) & _MASK64

    h1 = h2 = seed & _MASK32
    for i in range(length // 4):
        k1 = (ident >> (2 * i)) & 0xFF
        k2 = _rotl64(k1, 13)
        h1, h2 = _round(h1, h2, k1, k2)

    return _finish(h1, h2, length)