"""Terminal console with a cooked default mode and a raw byte-by-byte mode."""

from __future__ import annotations

import enum
import os
import sys

try:
    import termios
except ImportError:  # pragma: no cover - platforms without POSIX terminals
    termios = None


class ConsoleMode(enum.Enum):
    DEFAULT = "default"
    RAW = "raw"


class Console:
    """A terminal whose input mode can be switched and restored."""

    def __init__(self, input_fd: int | None = None, output_fd: int | None = None) -> None:
        if termios is None:
            raise OSError("terminal modes are not supported on this platform")
        self._input = sys.stdin.fileno() if input_fd is None else input_fd
        self._output = sys.stdout.fileno() if output_fd is None else output_fd
        try:
            self._saved = termios.tcgetattr(self._input)
        except termios.error as exc:
            raise OSError(f"file descriptor {self._input} is not a terminal") from exc
        self._mode = ConsoleMode.DEFAULT

    def mode(self) -> ConsoleMode:
        return self._mode

    def _set(self, when: int, attrs: list) -> None:
        try:
            termios.tcsetattr(self._input, when, attrs)
        except termios.error as exc:
            raise OSError("cannot change the terminal mode") from exc

    def _apply_default(self) -> None:
        if self._mode is not ConsoleMode.DEFAULT:
            self._set(termios.TCSANOW, self._saved)
        self._mode = ConsoleMode.DEFAULT

    def _apply_raw(self) -> None:
        if self._mode is not ConsoleMode.RAW:
            iflag, oflag, cflag, lflag, ispeed, ospeed, cc = self._saved
            iflag &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK
                       | termios.ISTRIP | termios.IXON)
            oflag &= ~termios.OPOST
            cflag |= termios.CS8
            lflag &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
            cc = list(cc)
            cc[termios.VMIN] = 0
            cc[termios.VTIME] = 1
            self._set(termios.TCSAFLUSH, [iflag, oflag, cflag, lflag, ispeed, ospeed, cc])
        self._mode = ConsoleMode.RAW

    def apply(self, mode: ConsoleMode) -> None:
        """Switch the terminal into mode."""
        if mode is ConsoleMode.DEFAULT:
            self._apply_default()
        elif mode is ConsoleMode.RAW:
            self._apply_raw()
        else:
            raise ValueError(f"unknown console mode: {mode!r}")

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Write all of data; return the number of bytes written."""
        view = memoryview(bytes(data))
        written = 0
        while written < len(view):
            count = os.write(self._output, view[written:])
            if count <= 0:
                break
            written += count
        return written

    def read(self, length: int) -> bytes:
        """Read up to length bytes; empty when nothing arrived."""
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        return os.read(self._input, length)

    def close(self) -> None:
        """Restore the terminal to the mode it had when opened."""
        self._apply_default()

    def __enter__(self) -> Console:
        return self

    def __exit__(self, *args) -> None:
        self.close()