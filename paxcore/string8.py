"""Byte-string helpers for UTF-8 text: ranges, searching, trimming and splitting."""

from __future__ import annotations

from .unicode import (
    is_ascii_cntrl,
    utf8_encode,
    utf8_read_back,
    utf8_read_forw,
)

BytesLike = bytes | bytearray | memoryview


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def from_memory(memory: BytesLike) -> bytes:
    """Return the bytes of memory up to, not including, the first zero byte."""
    data = bytes(memory)
    end = data.find(0)
    return data if end < 0 else data[:end]


def from_unicode(value: int) -> bytes:
    """Return the UTF-8 encoding of one code point."""
    return utf8_encode(value)


def substring_length(text: BytesLike, index: int, length: int) -> bytes:
    """Return up to length bytes starting at index, both clamped to the text."""
    size = len(text)
    if size == 0:
        return b""
    index = _clamp(index, 0, size - 1)
    length = _clamp(length, 0, size - index)
    return bytes(text[index:index + length])


def substring(text: BytesLike, start: int, stop: int) -> bytes:
    """Return the bytes between start and stop, clamped to the text."""
    return substring_length(text, start, stop - start)


def substring_head(text: BytesLike, head: int) -> bytes:
    """Return the text from head to its end."""
    return substring(text, head, len(text))


def substring_tail(text: BytesLike, tail: int) -> bytes:
    """Return the text from its start up to tail."""
    return substring(text, 0, tail)


def peek(text: BytesLike, index: int, length: int) -> bytes:
    """Return a copy of up to length bytes at index, clamped to the text."""
    return substring_length(text, index, length)


def peek_or_none(text: BytesLike, index: int) -> int:
    """Return the byte at index, or 0 when index is out of range."""
    if 0 <= index < len(text):
        return text[index]
    return 0


def begins_with(text: BytesLike, value: BytesLike) -> bool:
    return len(value) <= len(text) and bytes(text[:len(value)]) == bytes(value)


def ends_with(text: BytesLike, value: BytesLike) -> bool:
    if len(value) > len(text):
        return False
    return bytes(text[len(text) - len(value):]) == bytes(value)


def contains(text: BytesLike, value: BytesLike) -> int:
    """Count the non-overlapping occurrences of value in text."""
    if len(value) == 0:
        raise ValueError("cannot count occurrences of an empty value")
    return bytes(text).count(bytes(value))


def _skip_head(text: BytesLike) -> int:
    start = 0
    while start < len(text):
        value, units = utf8_read_forw(text, start)
        if not is_ascii_cntrl(value):
            break
        start += units
    return start


def _skip_tail(text: BytesLike, start: int) -> int:
    stop = len(text)
    while start < stop:
        value, units = utf8_read_back(text, stop - 1)
        if not is_ascii_cntrl(value):
            break
        stop -= units
    return stop


def trim_spaces(text: BytesLike) -> bytes:
    """Strip control characters and spaces (0x01-0x20) from both ends."""
    start = _skip_head(text)
    return substring(text, start, _skip_tail(text, start))


def trim_spaces_head(text: BytesLike) -> bytes:
    """Strip control characters and spaces from the start."""
    return substring(text, _skip_head(text), len(text))


def trim_spaces_tail(text: BytesLike) -> bytes:
    """Strip control characters and spaces from the end."""
    return substring(text, 0, _skip_tail(text, 0))


def trim_prefix(text: BytesLike, prefix: BytesLike) -> bytes:
    if begins_with(text, prefix):
        return substring(text, len(prefix), len(text))
    return bytes(text)


def trim_suffix(text: BytesLike, suffix: BytesLike) -> bytes:
    if ends_with(text, suffix):
        return substring(text, 0, len(text) - len(suffix))
    return bytes(text)


def find_first(text: BytesLike, start: int, value: BytesLike) -> int | None:
    """Return the first index at or after start where value occurs, or None."""
    data = bytes(text)
    start = _clamp(start, 0, len(data))
    index = data.find(bytes(value), start)
    if index < 0 or index >= len(data):
        return None
    return index


def find_last(text: BytesLike, start: int, value: BytesLike) -> int | None:
    """Return the last index where value occurs ending at or before start, or None."""
    data = bytes(text)
    start = _clamp(start, 0, len(data))
    if start == 0:
        return None
    index = data.rfind(bytes(value), 0, start)
    return None if index < 0 else index


def split(text: BytesLike, pivot: BytesLike) -> tuple[bytes, bytes, bool]:
    """Split text around the first pivot; return (left, right, found)."""
    index = find_first(text, 0, pivot)
    found = index is not None
    if index is None:
        index = len(text)
    left = substring(text, 0, index)
    right = substring(text, index + len(pivot), len(text))
    return left, right, found


def next_unicode(text: BytesLike, index: int) -> tuple[int, int]:
    """Decode the code point starting at index; return (value, units)."""
    if not 0 <= index < len(text):
        raise IndexError(f"index {index} out of range")
    return utf8_read_forw(text, index)


def prev_unicode(text: BytesLike, index: int) -> tuple[int, int]:
    """Decode the code point whose last byte is at index; return (value, units)."""
    if not 0 <= index < len(text):
        raise IndexError(f"index {index} out of range")
    return utf8_read_back(text, index)