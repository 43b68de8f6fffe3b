"""Fixed-capacity byte buffer that can be written and read at both ends."""

from __future__ import annotations

BytesLike = bytes | bytearray | memoryview


def _check_length(length: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")


class Buffer8:
    """A byte buffer of fixed capacity holding a run of bytes from its start."""

    def __init__(self, capacity: int, data: BytesLike = b"") -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        data = bytes(data)
        if len(data) > capacity:
            raise ValueError("data does not fit in the buffer")
        self._memory = bytearray(capacity)
        self._memory[:len(data)] = data
        self._length = len(data)

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return bytes(self._memory[:self._length])

    def __repr__(self) -> str:
        return f"Buffer8({self.capacity()}, {bytes(self)!r})"

    def capacity(self) -> int:
        return len(self._memory)

    def head(self) -> int:
        """Index of the first byte."""
        return 0

    def tail(self) -> int:
        """Index of the last byte, -1 when empty."""
        return self._length - 1

    def clear(self) -> None:
        self._length = 0

    def fill(self) -> None:
        """Make the whole capacity part of the content."""
        self._length = len(self._memory)

    def _insert(self, index: int, data: bytes) -> int:
        count = min(len(data), len(self._memory) - self._length)
        end = self._length
        self._memory[index + count:end + count] = self._memory[index:end]
        self._memory[index:index + count] = data[:count]
        self._length += count
        return count

    def _remove(self, index: int, length: int) -> bytes:
        end = self._length
        count = max(0, min(length, end - index))
        removed = bytes(self._memory[index:index + count])
        self._memory[index:end - count] = self._memory[index + count:end]
        self._length -= count
        return removed

    def drop_head(self, length: int) -> int:
        """Discard up to length bytes from the start; return how many."""
        _check_length(length)
        return len(self._remove(0, length))

    def drop_tail(self, length: int) -> int:
        """Discard up to length bytes from the end; return how many."""
        _check_length(length)
        count = min(length, self._length)
        return len(self._remove(self._length - count, count))

    def _write(self, index_of, data: BytesLike | Buffer8) -> int:
        if isinstance(data, Buffer8):
            count = self._insert(index_of(), bytes(data))
            data.drop_head(count)
            return count
        return self._insert(index_of(), bytes(data))

    def write_head(self, data: BytesLike | Buffer8) -> int:
        """Insert data at the start as far as it fits; return the bytes written.

        A Buffer8 source loses the bytes that were written.
        """
        return self._write(lambda: 0, data)

    def write_tail(self, data: BytesLike | Buffer8) -> int:
        """Append data as far as it fits; return the bytes written.

        A Buffer8 source loses the bytes that were written.
        """
        return self._write(lambda: self._length, data)

    def read_head(self, length: int) -> bytes:
        """Remove and return up to length bytes from the start."""
        _check_length(length)
        return self._remove(0, length)

    def read_tail(self, length: int) -> bytes:
        """Remove and return up to length bytes from the end."""
        _check_length(length)
        count = min(length, self._length)
        return self._remove(self._length - count, count)

    def _free(self) -> int:
        return self.capacity() - len(self)

    def read_head_into(self, other: Buffer8) -> int:
        """Move bytes from the start into the free space of other."""
        chunk = self.read_head(other._free())
        return other.write_tail(chunk)

    def read_tail_into(self, other: Buffer8) -> int:
        """Move bytes from the end into the free space of other."""
        chunk = self.read_tail(other._free())
        return other.write_tail(chunk)

    def peek(self, index: int, length: int) -> bytes:
        """Return up to length bytes at index without removing them."""
        _check_length(length)
        if not 0 <= index < self._length:
            return b""
        count = min(length, self._length - index)
        return bytes(self._memory[index:index + count])

    def peek_into(self, index: int, other: Buffer8) -> int:
        """Copy bytes at index into the free space of other."""
        return other.write_tail(self.peek(index, other._free()))

    def peek_or_none(self, index: int) -> int:
        """Return the byte at index, or 0 when index is out of range."""
        if 0 <= index < self._length:
            return self._memory[index]
        return 0