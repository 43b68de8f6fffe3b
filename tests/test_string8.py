import pytest

from paxcore import string8
from paxcore.unicode import UnicodeCodecError


def test_copy_of_ascii_bytes():
    text = string8.from_memory(bytes([ord("c"), ord("i"), ord("a"), ord("o")]))
    assert [string8.peek_or_none(text, i) for i in range(len(text))] == [
        0x63, 0x69, 0x61, 0x6F,
    ]


def test_from_unicode_emoji():
    text = string8.from_unicode(0x1F600)
    assert [string8.peek_or_none(text, i) for i in range(len(text))] == [
        0xF0, 0x9F, 0x98, 0x80,
    ]


def test_from_unicode_rejects_surrogate():
    with pytest.raises(UnicodeCodecError):
        string8.from_unicode(0xD800)


def test_from_memory_stops_at_zero():
    assert string8.from_memory(b"abc\x00def") == b"abc"
    assert string8.from_memory(b"abc") == b"abc"


def test_substring_of_empty():
    assert string8.substring_length(b"", 0, 3) == b""


def test_substring_head_and_tail():
    assert string8.substring_head(b"hello", 2) == b"llo"
    assert string8.substring_tail(b"hello", 2) == b"he"


def test_peek():
    assert string8.peek(b"hello", 1, 10) == b"ello"


def test_peek_or_none_out_of_range():
    assert string8.peek_or_none(b"ab", 5) == 0
    assert string8.peek_or_none(b"ab", -1) == 0
    assert string8.peek_or_none(b"ab", 1) == ord("b")


def test_begins_and_ends_with():
    assert string8.begins_with(b"--port=80", b"--port=")
    assert not string8.begins_with(b"--p", b"--port=")
    assert string8.ends_with(b"file.txt", b".txt")
    assert not string8.ends_with(b"txt", b"file.txt")


def test_contains_counts_non_overlapping():
    assert string8.contains(b"aaaa", b"aa") == 2
    assert string8.contains(b"abcabc", b"bc") == 2
    assert string8.contains(b"abc", b"x") == 0


def test_contains_empty_value_raises():
    with pytest.raises(ValueError):
        string8.contains(b"abc", b"")


def test_trim_spaces():
    assert string8.trim_spaces(b"  \t hi there \r\n") == b"hi there"
    assert string8.trim_spaces(b"   ") == b""


def test_trim_spaces_head_and_tail():
    assert string8.trim_spaces_head(b"  hi  ") == b"hi  "
    assert string8.trim_spaces_tail(b"  hi  ") == b"  hi"


def test_trim_spaces_keeps_multibyte():
    assert string8.trim_spaces(b" \xc3\xa9 ") == b"\xc3\xa9"


def test_trim_spaces_invalid_utf8_raises():
    with pytest.raises(UnicodeCodecError):
        string8.trim_spaces(b"\xff abc")


def test_trim_prefix_and_suffix():
    assert string8.trim_prefix(b"--port=80", b"--port=") == b"80"
    assert string8.trim_prefix(b"port", b"--") == b"port"
    assert string8.trim_suffix(b"file.txt", b".txt") == b"file"
    assert string8.trim_suffix(b"file", b".txt") == b"file"


def test_find_first():
    assert string8.find_first(b"abcabc", 0, b"bc") == 1
    assert string8.find_first(b"abcabc", 2, b"bc") == 4
    assert string8.find_first(b"abcabc", 0, b"x") is None


def test_find_last():
    assert string8.find_last(b"abcabc", 6, b"bc") == 4
    assert string8.find_last(b"abcabc", 4, b"bc") == 1
    assert string8.find_last(b"abcabc", 0, b"bc") is None


def test_split_found():
    assert string8.split(b"key=value", b"=") == (b"key", b"value", True)


def test_split_not_found():
    assert string8.split(b"abc", b"=") == (b"abc", b"", False)


def test_next_and_prev_unicode():
    text = b"a\xc3\xa9"
    assert string8.next_unicode(text, 0) == (ord("a"), 1)
    assert string8.next_unicode(text, 1) == (0xE9, 2)
    assert string8.prev_unicode(text, 2) == (0xE9, 2)


def test_next_unicode_out_of_range():
    with pytest.raises(IndexError):
        string8.next_unicode(b"a", 1)
    with pytest.raises(IndexError):
        string8.prev_unicode(b"a", -1)