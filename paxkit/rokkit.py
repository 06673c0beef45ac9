"""A fast 32-bit string hash (SuperFastHash variant) used for salting MACs."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF


def _signed_byte(value: int) -> int:
    return value - 256 if value >= 128 else value


def rokkit(data: bytes | bytearray | memoryview) -> int:
    """Hash ``data`` into an unsigned 32-bit integer; empty input hashes to 0.

    Two-byte words are read little endian and trailing single bytes are
    treated as signed, matching the reference implementation.
    """
    if isinstance(data, str):
        raise TypeError("rokkit() needs bytes, not str")
    data = bytes(data)
    length = len(data)
    if length == 0:
        return 0

    h = length
    rem = length & 3
    body = length - rem

    for lo, hi in struct.iter_unpack("<HH", data[:body]):
        h = (h + lo) & _MASK
        tmp = ((hi << 11) ^ h) & _MASK
        h = ((h << 16) ^ tmp) & _MASK
        h = (h + (h >> 11)) & _MASK

    tail = data[body:]
    if rem == 3:
        (word,) = struct.unpack_from("<H", tail)
        h = (h + word) & _MASK
        h ^= (h << 16) & _MASK
        h ^= (_signed_byte(tail[2]) << 18) & _MASK
        h = (h + (h >> 11)) & _MASK
    elif rem == 2:
        (word,) = struct.unpack_from("<H", tail)
        h = (h + word) & _MASK
        h ^= (h << 11) & _MASK
        h = (h + (h >> 17)) & _MASK
    elif rem == 1:
        h = (h + _signed_byte(tail[0])) & _MASK
        h ^= (h << 10) & _MASK
        h = (h + (h >> 1)) & _MASK

    # force avalanching of the final bits
    h ^= (h << 3) & _MASK
    h = (h + (h >> 5)) & _MASK
    h ^= (h << 4) & _MASK
    h = (h + (h >> 17)) & _MASK
    h ^= (h << 25) & _MASK
    h = (h + (h >> 6)) & _MASK
    return h