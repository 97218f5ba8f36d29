"""Tests for reading the full line around an offset."""

import io

import pytest

from line_bisect.src.extractor import Line, read_line_around
from line_bisect.src.line_endings import LineEnding
from tests.fixtures import LONE_CR, LONE_LF, stream_from_string


def _read(text: str, position: int) -> Line:
    stream = stream_from_string(text)
    stream.seek(position)
    return read_line_around(stream)


def test_already_at_start_of_line_no_line_ending():
    line = _read("12345\n12345", 7)
    assert line.as_tuple() == ("12345", 7, 11)
    assert line.ending is LineEnding.NONE


def test_already_at_start_of_line_ending_crlf():
    line = _read("12345\n12345\n", 7)
    assert line.as_tuple() == ("12345", 7, 13)
    assert line.ending is LineEnding.CRLF


def test_mid_line_ending_lf():
    line = _read("12345" + LONE_LF + "12345" + LONE_LF, 7)
    assert line.as_tuple() == ("12345", 6, 11)
    assert line.ending is LineEnding.LF


def test_mid_line_ending_cr():
    line = _read("12345" + LONE_CR + "12345" + LONE_CR, 7)
    assert line.as_tuple() == ("12345", 6, 11)
    assert line.ending is LineEnding.CR


def test_first_line_from_inside_its_crlf():
    line = _read("12345\n67", 6)
    assert line.as_tuple() == ("12345", 0, 6)


def test_single_unterminated_line():
    line = _read("12345", 5)
    assert line.as_tuple() == ("12345", 0, 4)
    assert line.span == 5
    assert line.content_length == 5


def test_empty_last_line_after_trailing_ending():
    line = _read("12345\n", 7)
    assert line.as_tuple() == ("", 7, 6)
    assert line.ending is LineEnding.NONE
    assert line.content_length == 0


def test_empty_lines_between_lone_crs():
    assert _read(LONE_CR + LONE_CR, 0).as_tuple() == ("", 0, 0)
    assert _read(LONE_CR + LONE_CR, 1).as_tuple() == ("", 1, 1)


def test_pending_cr_at_end_of_stream():
    line = _read("ab" + LONE_CR, 1)
    assert line.as_tuple() == ("ab", 0, 2)
    assert line.ending is LineEnding.CR


def test_cr_then_crlf():
    first = _read("x" + LONE_CR + "\n", 0)
    assert first.as_tuple() == ("x", 0, 1)
    assert first.ending is LineEnding.CR

    second = _read("x" + LONE_CR + "\n", 3)
    assert second.as_tuple() == ("", 2, 3)
    assert second.ending is LineEnding.CRLF


def test_utf8_text():
    line = _read("héllo\nwörld", 2)
    assert line.text == "héllo"
    assert line.first_offset == 0
    assert line.last_offset == 7


def test_invalid_utf8_is_replaced():
    line = read_line_around(io.BytesIO(b"a\xffb\n"), 0)
    assert line.text == "a�b"


def test_invalid_utf8_strict_raises():
    with pytest.raises(UnicodeDecodeError):
        read_line_around(io.BytesIO(b"a\xffb\n"), 0, errors="strict")


def test_other_encoding():
    line = read_line_around(io.BytesIO("café\n".encode("latin-1")), 0, encoding="latin-1")
    assert line.text == "café"


def test_line_longer_than_read_chunk():
    data = b"a" * 10000 + b"\r\n" + b"b" * 10
    line = read_line_around(io.BytesIO(data), 9000)
    assert line.first_offset == 0
    assert line.last_offset == 10001
    assert line.content_length == 10000


def test_position_out_of_bounds():
    with pytest.raises(ValueError):
        read_line_around(io.BytesIO(b"abc"), 4)
