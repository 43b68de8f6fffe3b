"""Core utilities: Unicode codecs, byte strings and buffers, a clock, terminal modes, threads and sockets."""

__version__ = "0.1.0"
__all__ = ["unicode", "string8", "buffer8", "clock", "console", "process", "network"]