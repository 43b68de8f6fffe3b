"""Unicode code point checks and UTF-8, UTF-16 and UTF-32 unit coding."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence

UTF8_UNITS = 4
UTF16_UNITS = 2
UTF32_UNITS = 1


class UnicodeCodecError(ValueError):
    """Raised when a code point or a run of code units cannot be coded."""


# Code points


def is_valid(value: int) -> bool:
    """Return whether value is a Unicode scalar value."""
    return 0x0 <= value <= 0xD7FF or 0xE000 <= value <= 0x10FFFF


def is_surrogate(value: int) -> bool:
    return 0xD800 <= value <= 0xDFFF


def is_surrogate_low(value: int) -> bool:
    return 0xDC00 <= value <= 0xDFFF


def is_surrogate_high(value: int) -> bool:
    return 0xD800 <= value <= 0xDBFF


def is_ascii(value: int) -> bool:
    return 0x00 <= value <= 0x7F


def is_ascii_cntrl(value: int) -> bool:
    """Return whether value is an ASCII control character or a space (0x01-0x20)."""
    return 0x01 <= value <= 0x20


# Shared helpers


def _write_forw(
    memory: MutableSequence[int],
    index: int,
    encoded: Sequence[int],
) -> int:
    size = len(encoded)
    if index < 0 or index + size > len(memory):
        raise UnicodeCodecError(f"no room for {size} units at index {index}")
    memory[index:index + size] = encoded
    return size


def _write_back(
    memory: MutableSequence[int],
    index: int,
    encoded: Sequence[int],
) -> int:
    size = len(encoded)
    if index - size < 0 or index >= len(memory):
        raise UnicodeCodecError(f"no room for {size} units before index {index}")
    memory[index - size:index] = encoded
    return size


def _read_forw(
    memory: Sequence[int],
    index: int,
    units_to_read: Callable[[int], int],
    decode: Callable[[Sequence[int]], int],
) -> tuple[int, int]:
    if not 0 <= index < len(memory):
        raise UnicodeCodecError(f"index {index} out of range")
    size = units_to_read(memory[index])
    if size <= 0 or index + size > len(memory):
        raise UnicodeCodecError(f"invalid or truncated sequence at index {index}")
    return decode(memory[index:index + size]), size


def _read_back(
    memory: Sequence[int],
    index: int,
    is_continuation: Callable[[int], bool],
    units_to_read: Callable[[int], int],
    decode: Callable[[Sequence[int]], int],
) -> tuple[int, int]:
    if not 0 <= index < len(memory):
        raise UnicodeCodecError(f"index {index} out of range")
    start = index
    while is_continuation(memory[index]):
        index -= 1
        if index < 0:
            raise UnicodeCodecError("sequence has no leading unit")
    size = start - index + 1
    if size != units_to_read(memory[index]):
        raise UnicodeCodecError(f"invalid sequence ending at index {start}")
    return decode(memory[index:index + size]), size


def _count_units(
    memory: Sequence[int],
    reader: Callable[[Sequence[int], int], tuple[int, int]],
    units_to_write: Callable[[int], int],
) -> int:
    total = 0
    index = 0
    while index < len(memory):
        value, read = reader(memory, index)
        write = units_to_write(value)
        if write <= 0:
            raise UnicodeCodecError(f"code point {value:#x} cannot be written")
        index += read
        total += write
    return total


# UTF-8


def utf8_units_to_write(value: int) -> int:
    """Return how many UTF-8 units encode value, or 0 if it cannot be encoded."""
    if 0x0 <= value <= 0x7F:
        return 1
    if 0x80 <= value <= 0x7FF:
        return 2
    if 0x800 <= value <= 0xD7FF:
        return 3
    if 0xE000 <= value <= 0xFFFF:
        return 3
    if 0x10000 <= value <= 0x10FFFF:
        return 4
    return 0


def utf8_units_to_read(value: int) -> int:
    """Return the sequence length announced by a leading byte, or 0."""
    if 0x0 <= value <= 0x7F:
        return 1
    if 0xC0 <= value <= 0xDF:
        return 2
    if 0xE0 <= value <= 0xEF:
        return 3
    if 0xF0 <= value <= 0xF7:
        return 4
    return 0


def utf8_is_trailing(value: int) -> bool:
    return (value & 0xC0) == 0x80


def utf8_is_overlong(value: int, units: int) -> bool:
    if 0xC080 <= value <= 0xC1FF and units == 2:
        return True
    if 0xE08080 <= value <= 0xE09FFF and units == 3:
        return True
    if 0xF0808080 <= value <= 0xF0BFFFFF and units == 4:
        return True
    return False


def utf8_encode(value: int) -> bytes:
    """Encode a code point as UTF-8."""
    units = utf8_units_to_write(value)
    if units == 1:
        return bytes((value,))
    if units == 2:
        return bytes((
            ((value >> 6) & 0xFF) | 0xC0,
            (value & 0x3F) | 0x80,
        ))
    if units == 3:
        return bytes((
            ((value >> 12) & 0xFF) | 0xE0,
            ((value >> 6) & 0x3F) | 0x80,
            (value & 0x3F) | 0x80,
        ))
    if units == 4:
        return bytes((
            ((value >> 18) & 0xFF) | 0xF0,
            ((value >> 12) & 0x3F) | 0x80,
            ((value >> 6) & 0x3F) | 0x80,
            (value & 0x3F) | 0x80,
        ))
    raise UnicodeCodecError(f"code point {value:#x} cannot be encoded")


_UTF8_LEAD_MASK = {1: 0x7F, 2: 0x1F, 3: 0x0F, 4: 0x07}


def utf8_decode(units: Sequence[int]) -> int:
    """Decode one complete UTF-8 sequence into a code point."""
    if not units:
        raise UnicodeCodecError("empty sequence")
    count = utf8_units_to_read(units[0])
    if count == 0 or len(units) != count:
        raise UnicodeCodecError("sequence length does not match its leading byte")
    value = units[0] & _UTF8_LEAD_MASK[count]
    for unit in units[1:]:
        if not utf8_is_trailing(unit):
            raise UnicodeCodecError(f"byte {unit:#x} is not a trailing byte")
        value = (value << 6) | (unit & 0x3F)
    if utf8_is_overlong(value, count):
        raise UnicodeCodecError("overlong sequence")
    if not is_valid(value):
        raise UnicodeCodecError(f"code point {value:#x} is not valid")
    return value


def utf8_write_forw(memory: MutableSequence[int], index: int, value: int) -> int:
    """Write value starting at index; return the units written."""
    return _write_forw(memory, index, utf8_encode(value))


def utf8_write_back(memory: MutableSequence[int], index: int, value: int) -> int:
    """Write value so that it ends just before index; return the units written."""
    return _write_back(memory, index, utf8_encode(value))


def utf8_read_forw(memory: Sequence[int], index: int) -> tuple[int, int]:
    """Read the code point starting at index; return (value, units)."""
    return _read_forw(memory, index, utf8_units_to_read, utf8_decode)


def utf8_read_back(memory: Sequence[int], index: int) -> tuple[int, int]:
    """Read the code point whose last unit is at index; return (value, units)."""
    return _read_back(memory, index, utf8_is_trailing, utf8_units_to_read, utf8_decode)


def utf8_units_from_utf16(memory: Sequence[int]) -> int:
    """Return how many UTF-8 units the UTF-16 text in memory needs."""
    return _count_units(memory, utf16_read_forw, utf8_units_to_write)


def utf8_units_from_utf32(memory: Sequence[int]) -> int:
    """Return how many UTF-8 units the UTF-32 text in memory needs."""
    return _count_units(memory, utf32_read_forw, utf8_units_to_write)


# UTF-16


def utf16_units_to_write(value: int) -> int:
    if 0x0 <= value <= 0xD7FF:
        return 1
    if 0xE000 <= value <= 0xFFFF:
        return 1
    if 0x10000 <= value <= 0x10FFFF:
        return 2
    return 0


def utf16_units_to_read(value: int) -> int:
    if 0x0 <= value <= 0xD7FF:
        return 1
    if 0xD800 <= value <= 0xDBFF:
        return 2
    if 0xE000 <= value <= 0xFFFF:
        return 1
    return 0


def utf16_encode(value: int) -> tuple[int, ...]:
    """Encode a code point as UTF-16 units."""
    units = utf16_units_to_write(value)
    if units == 1:
        return (value,)
    if units == 2:
        offset = value - 0x10000
        return (
            ((offset >> 10) & 0xFFFF) | 0xD800,
            (offset & 0x03FF) | 0xDC00,
        )
    raise UnicodeCodecError(f"code point {value:#x} cannot be encoded")


def utf16_decode(units: Sequence[int]) -> int:
    """Decode one complete UTF-16 sequence into a code point."""
    if not units:
        raise UnicodeCodecError("empty sequence")
    count = utf16_units_to_read(units[0])
    if count == 0 or len(units) != count:
        raise UnicodeCodecError("sequence length does not match its leading unit")
    if count == 1:
        value = units[0]
    else:
        high, low = units
        if not is_surrogate_low(low):
            raise UnicodeCodecError(f"unit {low:#x} is not a low surrogate")
        value = ((high - 0xD800) << 10) + (low - 0xDC00) + 0x10000
    if not is_valid(value):
        raise UnicodeCodecError(f"code point {value:#x} is not valid")
    return value


def utf16_write_forw(memory: MutableSequence[int], index: int, value: int) -> int:
    return _write_forw(memory, index, utf16_encode(value))


def utf16_write_back(memory: MutableSequence[int], index: int, value: int) -> int:
    return _write_back(memory, index, utf16_encode(value))


def utf16_read_forw(memory: Sequence[int], index: int) -> tuple[int, int]:
    return _read_forw(memory, index, utf16_units_to_read, utf16_decode)


def utf16_read_back(memory: Sequence[int], index: int) -> tuple[int, int]:
    return _read_back(memory, index, is_surrogate_low, utf16_units_to_read, utf16_decode)


def utf16_units_from_utf8(memory: Sequence[int]) -> int:
    """Return how many UTF-16 units the UTF-8 text in memory needs."""
    return _count_units(memory, utf8_read_forw, utf16_units_to_write)


def utf16_units_from_utf32(memory: Sequence[int]) -> int:
    """Return how many UTF-16 units the UTF-32 text in memory needs."""
    return _count_units(memory, utf32_read_forw, utf16_units_to_write)


# UTF-32


def utf32_units_to_write(value: int) -> int:
    """Return 1 if value can be written as a UTF-32 unit, else 0."""
    if 0x0 <= value <= 0xD7FF:
        return 1
    if 0xE000 <= value <= 0x10FFFF:
        return 1
    return 0


def utf32_units_to_read(value: int) -> int:
    """Return 1 if the UTF-32 unit holds a valid code point, else 0."""
    if 0x0 <= value <= 0xD7FF:
        return 1
    if 0xE000 <= value <= 0x10FFFF:
        return 1
    return 0


def utf32_encode(value: int) -> tuple[int, ...]:
    """Encode a code point as a single UTF-32 unit."""
    if utf32_units_to_write(value) != 1:
        raise UnicodeCodecError(f"code point {value:#x} cannot be encoded")
    return (value,)


def utf32_decode(units: Sequence[int]) -> int:
    """Decode one UTF-32 unit into a code point."""
    if len(units) != UTF32_UNITS or utf32_units_to_read(units[0]) != 1:
        raise UnicodeCodecError("invalid UTF-32 sequence")
    return units[0]


def utf32_write_forw(memory: MutableSequence[int], index: int, value: int) -> int:
    return _write_forw(memory, index, utf32_encode(value))


def utf32_write_back(memory: MutableSequence[int], index: int, value: int) -> int:
    return _write_back(memory, index, utf32_encode(value))


def utf32_read_forw(memory: Sequence[int], index: int) -> tuple[int, int]:
    return _read_forw(memory, index, utf32_units_to_read, utf32_decode)


def utf32_read_back(memory: Sequence[int], index: int) -> tuple[int, int]:
    if not 0 <= index < len(memory):
        raise UnicodeCodecError(f"index {index} out of range")
    return utf32_decode(memory[index:index + 1]), 1


def utf32_units_from_utf8(memory: Sequence[int]) -> int:
    """Return how many UTF-32 units the UTF-8 text in memory needs."""
    return _count_units(memory, utf8_read_forw, utf32_units_to_write)


def utf32_units_from_utf16(memory: Sequence[int]) -> int:
    """Return how many UTF-32 units the UTF-16 text in memory needs."""
    return _count_units(memory, utf16_read_forw, utf32_units_to_write)