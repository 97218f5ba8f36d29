"""
Line extractor.

Reads the full line around a byte offset: backs up to the line start with
the locator, then scans forward classifying the line ending.
"""

from dataclasses import dataclass
from typing import BinaryIO, Optional, Tuple

from .constants import DEFAULT_DECODE_ERRORS, DEFAULT_ENCODING, READ_CHUNK_SIZE
from .line_endings import ForwardEndingScanner, LineEnding
from .locator import locate_line_start
from ..utils.logger_setup import get_logger
from ..utils.stream_utils import read_span, stream_length

logger = get_logger(__name__)


@dataclass(frozen=True)
class Line:
    """
    A line materialized from a byte stream.

    `last_offset` is the final byte of the line ending when there is one,
    otherwise the last content byte (`length - 1` for an unterminated last
    line). `text` never includes ending bytes.
    """
    text: str
    first_offset: int
    last_offset: int
    ending: LineEnding = LineEnding.NONE

    @property
    def span(self) -> int:
        """Bytes covered by the line, ending included."""
        return self.last_offset - self.first_offset + 1

    @property
    def content_length(self) -> int:
        """Bytes of content, ending excluded."""
        return self.span - self.ending.byte_count

    def as_tuple(self) -> Tuple[str, int, int]:
        return self.text, self.first_offset, self.last_offset


def _scan_line_end(stream: BinaryIO, first: int, length: int) -> ForwardEndingScanner:
    """Read forward from `first` until the line ending is resolved."""
    scanner = ForwardEndingScanner()
    offset = first
    stream.seek(first)

    while not scanner.done:
        chunk = stream.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        for byte in chunk:
            if scanner.feed(byte, offset):
                break
            offset += 1

    scanner.finish(length)
    return scanner


def read_line_around(
    stream: BinaryIO,
    position: Optional[int] = None,
    encoding: str = DEFAULT_ENCODING,
    errors: str = DEFAULT_DECODE_ERRORS,
) -> Line:
    """
    Read the line containing `position`.

    Args:
        stream: Seekable binary stream
        position: Offset inside the line. Defaults to the current position.
        encoding: Codec used to decode the line content
        errors: bytes.decode() error handler

    Returns:
        Line with decoded text and the offsets of its first and last bytes.
        The final stream position is unspecified.

    Raises:
        ValueError: If position is outside [0, length]
        UnicodeDecodeError: With errors='strict' and undecodable content
    """
    length = stream_length(stream)
    first = locate_line_start(stream, position)

    scanner = _scan_line_end(stream, first, length)
    last = scanner.last_offset
    ending = scanner.ending

    raw = read_span(stream, first, last - first + 1 - ending.byte_count)
    line = Line(raw.decode(encoding, errors), first, last, ending)

    logger.debug(f"Read line [{first}, {last}] ending={ending.name} ({line.content_length} content bytes)")
    return line
