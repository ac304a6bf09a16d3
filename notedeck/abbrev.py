"""Byte-index helpers for truncating UTF-8 text."""

from __future__ import annotations


def _is_char_boundary(byte: int) -> bool:
    return byte < 0x80 or byte >= 0xC0


def floor_char_boundary(data: bytes | str, index: int) -> int:
    """Largest UTF-8 character boundary at or below ``index``."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    if index >= len(data):
        return len(data)
    lower = max(index - 3, 0)
    for pos in range(index, lower - 1, -1):
        if _is_char_boundary(data[pos]):
            return pos
    raise ValueError("no character boundary within four bytes; data is not UTF-8")