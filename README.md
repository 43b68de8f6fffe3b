# paxcore

A small set of building blocks for low-level programs, in plain Python with
no third-party dependencies.

## Modules

- `paxcore.unicode` – checks on code points (`is_valid`, `is_surrogate`,
  `is_ascii`, `is_ascii_cntrl`, …) and strict UTF-8, UTF-16 and UTF-32
  coding of single code points: `utf8_encode` / `utf8_decode` and their
  UTF-16 and UTF-32 counterparts, reading and writing a code point forwards
  or backwards in a sequence of units (`utf8_read_forw`, `utf8_read_back`,
  `utf8_write_forw`, `utf8_write_back`, …), and counting the units a text
  needs in another encoding (`utf16_units_from_utf8`, …). Surrogates,
  overlong UTF-8 and truncated or out-of-range input raise
  `UnicodeCodecError`, a subclass of `ValueError`.
- `paxcore.string8` – functions over byte strings: clamped substrings
  (`substring`, `substring_length`, `substring_head`, `substring_tail`,
  `peek`, `peek_or_none`), `begins_with`, `ends_with`, `contains` (counts
  non-overlapping occurrences), `find_first`, `find_last` (both return an
  index or `None`), trimming control characters and spaces (bytes 0x01 to
  0x20) with `trim_spaces`, `trim_spaces_head` and `trim_spaces_tail`,
  `trim_prefix`, `trim_suffix`, `split` (returns `(left, right, found)`),
  `from_memory` (bytes up to the first zero byte), `from_unicode`, and
  stepping through code points with `next_unicode` and `prev_unicode`.
- `paxcore.buffer8` – `Buffer8`, a byte buffer of fixed capacity that can be
  written at and read from either end (`write_head`, `write_tail`,
  `read_head`, `read_tail`, `drop_head`, `drop_tail`), peeked at without
  removing bytes (`peek`, `peek_or_none`), and moved into another buffer's
  free space (`read_head_into`, `read_tail_into`, `peek_into`). Writes store
  only what fits and return how many bytes were stored.
- `paxcore.clock` – `Clock`, whose `elapsed()` returns the seconds since the
  clock was made or since the previous call. The timer function can be
  passed in; it defaults to `time.perf_counter`.
- `paxcore.console` – `Console`, which switches a POSIX terminal between
  `ConsoleMode.DEFAULT` and `ConsoleMode.RAW`, writes and reads bytes, and
  restores the original mode on `close()` or when leaving a `with` block.
- `paxcore.process` – `Thread` (runs `proc(ctxt)`; `wait()` returns its
  result or re-raises its exception), `Lock`, `Cond`, and `core_amount`,
  `current_thread_sleep`, `current_thread_ident`, `page_size` and
  `reserve` (a zeroed `bytearray` of whole pages).
- `paxcore.network` – `SocketTCP` and `SocketUDP` for `AddrKind.IP4` or
  `AddrKind.IP6`. Addresses are `ipaddress` objects or strings. Failures
  raise `NetworkError`, a subclass of `OSError`.

## Install

    pip install paxcore

## Example

    from paxcore import string8, unicode
    from paxcore.buffer8 import Buffer8

    assert unicode.utf8_encode(0x1F600) == b"\xf0\x9f\x98\x80"
    assert string8.trim_prefix(b"--port=8000", b"--port=") == b"8000"

    buffer = Buffer8(16)
    buffer.write_tail(b"ciao")
    assert buffer.peek(2, 16) == b"ao"
    assert buffer.read_head(2) == b"ci"
    assert bytes(buffer) == b"ao"

A UDP round trip on the loopback interface:

    from paxcore.network import AddrKind, SocketUDP

    with SocketUDP(AddrKind.IP4) as server, SocketUDP(AddrKind.IP4) as client:
        server.bind("127.0.0.1", 0)
        client.write_host(b"hello", "127.0.0.1", server.port())
        data, addr, port = server.read_host(1024)
        assert data == b"hello"

## What it does not do

- There is no command-line program; the package is a library only.
- `Console` needs a POSIX terminal (`termios`). On other platforms, or when
  the input is not a terminal, creating one raises `OSError`.
- Addresses are parsed with the standard `ipaddress` module; there is no
  name resolution, so host names such as `localhost` are rejected.
- There is no text formatting or parsing of numbers, no streams and no
  channels between threads.

## Tests

    pip install paxcore[test]
    pytest