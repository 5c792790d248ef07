"""Helpers for fixed-length identifiers."""

from __future__ import annotations


def pad_or_truncate(data: bytes, length: int) -> bytes:
    """Pad ``data`` with ASCII ``'0'`` up to ``length``, or cut it to ``length``."""
    data = bytes(data)
    if length <= len(data):
        return data[:length]
    return data.ljust(length, b"0")