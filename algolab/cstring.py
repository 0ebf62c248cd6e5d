"""NUL-terminated string operations on byte buffers."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]


def _content(data: BytesLike) -> bytes:
    raw = data.encode() if isinstance(data, str) else bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _write(dest: bytearray, offset: int, text: bytes) -> None:
    needed = offset + len(text) + 1
    if needed > len(dest):
        raise ValueError(f"buffer of {len(dest)} bytes too small, {needed} needed")
    dest[offset : offset + len(text)] = text
    dest[offset + len(text)] = 0


def strcpy(dest: bytearray, src: BytesLike) -> bytearray:
    """Copy the string ``src`` with its terminator to the start of ``dest``."""
    _write(dest, 0, _content(src))
    return dest


def strcat(dest: bytearray, src: BytesLike) -> bytearray:
    """Append the string ``src`` after the string already in ``dest``."""
    end = dest.find(0)
    if end < 0:
        raise ValueError("destination buffer holds no terminating NUL")
    _write(dest, end, _content(src))
    return dest


def strcmp(s1: BytesLike, s2: BytesLike) -> int:
    """Compare two strings byte by byte: ``-1``, ``0`` or ``1``."""
    a, b = _content(s1), _content(s2)
    return (a > b) - (a < b)


def strstr(haystack: BytesLike, needle: BytesLike) -> int | None:
    """Offset of the first occurrence of ``needle`` in ``haystack``, or ``None``."""
    text, pattern = _content(haystack), _content(needle)
    if not text:
        raise ValueError("strstr() haystack is empty")
    if not pattern:
        raise ValueError("strstr() needle is empty")
    found = text.find(pattern)
    return None if found < 0 else found


def memcpy(dest: bytearray, src: BytesLike, num: int) -> bytearray:
    """Copy exactly ``num`` bytes from ``src`` to the start of ``dest``."""
    data = src.encode() if isinstance(src, str) else bytes(src)
    if num < 0:
        raise ValueError(f"byte count must not be negative, got {num}")
    if num > len(data) or num > len(dest):
        raise ValueError(
            f"cannot copy {num} bytes from {len(data)} into {len(dest)}"
        )
    dest[:num] = data[:num]
    return dest