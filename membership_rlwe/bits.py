"""Bit-level truncation of big-endian byte strings."""

from __future__ import annotations


def truncate(data: bytes, bit_length: int) -> bytes:
    """Return the leftmost ``bit_length`` bits of ``data``.

    The result is rounded up to whole bytes; the unused low bits of the last
    byte are zero. Raises ValueError if ``bit_length`` is out of range.
    """
    data = bytes(data)
    if bit_length < 0 or bit_length > len(data) * 8:
        raise ValueError("Truncation bit length out of bounds.")
    if bit_length == 0:
        return b""
    byte_length = (bit_length - 1) // 8 + 1
    result = bytearray(data[:byte_length])
    remainder = bit_length % 8
    if remainder:
        mask = ((1 << remainder) - 1) << (8 - remainder)
        result[-1] &= mask
    return bytes(result)


def truncate_as_uint32(data: bytes, bit_length: int) -> int:
    """Return the leftmost ``bit_length`` bits of ``data`` as an unsigned int.

    Raises ValueError if ``bit_length`` is not positive, exceeds the input, or
    exceeds 32.
    """
    data = bytes(data)
    if bit_length <= 0 or bit_length > len(data) * 8:
        raise ValueError("Truncation bit length out of bounds.")
    if bit_length > 32:
        raise ValueError("Input bit length larger than 32 bits.")
    word = data[:4].ljust(4, b"\x00")
    return int.from_bytes(word, "big") >> (32 - bit_length)


def is_valid(data: bytes, bit_length: int) -> bool:
    """Whether ``data`` is exactly the truncation of itself to ``bit_length``."""
    try:
        return truncate(data, bit_length) == bytes(data)
    except ValueError:
        return False