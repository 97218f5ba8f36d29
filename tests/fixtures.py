# Shared test fixture builders.
# Turn readable strings into byte streams with controllable line endings
# so tests can spell out CR / LF / CRLF layouts without escaping bytes.

from __future__ import annotations

import io
from typing import Iterable

# Marker characters (the Unicode control pictures for CR and LF)
LONE_CR = "\u240d"
LONE_LF = "\u240a"


def bytes_from_string(text: str) -> bytes:
    """Encode test text.

    - "\\n" becomes CRLF (0x0D 0x0A)
    - U+240D becomes a lone CR (0x0D)
    - U+240A becomes a lone LF (0x0A)
    - anything else is UTF-8 encoded
    """
    out = bytearray()
    for ch in text:
        if ch == "\n":
            out += b"\r\n"
        elif ch == LONE_CR:
            out += b"\r"
        elif ch == LONE_LF:
            out += b"\n"
        else:
            out += ch.encode("utf-8")
    return bytes(out)


def stream_from_string(text: str) -> io.BytesIO:
    """In-memory stream built with bytes_from_string()."""
    return io.BytesIO(bytes_from_string(text))


def sorted_lines_bytes(lines: Iterable[str], endings: Iterable[bytes], trailing: bool = True) -> bytes:
    """Join lines, terminating line i with endings[i].

    With trailing=False the last line is left unterminated.
    """
    lines = list(lines)
    endings = list(endings)
    out = bytearray()
    for i, line in enumerate(lines):
        out += line.encode("utf-8")
        if trailing or i < len(lines) - 1:
            out += endings[i]
    return bytes(out)
