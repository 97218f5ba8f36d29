"""
Line boundary locator.

Finds the start of the line containing an arbitrary byte offset by walking
backward one byte at a time. Never seeks forward past the requested
position.
"""

from typing import BinaryIO, Optional

from .line_endings import boundary_state_for, is_boundary_after
from ..utils.logger_setup import get_logger
from ..utils.stream_utils import check_offset, read_byte_at, stream_length

logger = get_logger(__name__)


def locate_line_start(stream: BinaryIO, position: Optional[int] = None) -> int:
    """
    Seek the stream to the beginning of the line containing `position`.

    Formally, returns the nearest offset at or before `position` whose
    previous byte is either the beginning of the stream or the last byte
    of a line ending. A position inside a CRLF pair belongs to the line
    that pair terminates; a position at end of stream right after an
    ending is the (empty) last line and is returned unchanged.

    Args:
        stream: Seekable binary stream
        position: Offset to start from. Defaults to the current position.

    Returns:
        Offset of the first byte of the line. The stream is left there.

    Raises:
        ValueError: If position is outside [0, length]

    Example:
        >>> locate_line_start(io.BytesIO(b"12345\\r\\n"), 6)
        0
        >>> locate_line_start(io.BytesIO(b"12345\\r\\n"), 7)
        7
    """
    length = stream_length(stream)
    if position is None:
        position = stream.tell()
    check_offset(position, length, "position")

    # The byte at the position itself tells whether a CR right before it
    # is half of a CRLF; at end of stream there is no such byte.
    current = read_byte_at(stream, position) if position < length else None
    state = boundary_state_for(current)

    offset = position
    while offset > 0:
        previous = read_byte_at(stream, offset - 1)
        if is_boundary_after(previous, state):
            break
        state = boundary_state_for(previous)
        offset -= 1

    logger.debug(f"Line containing offset {position} starts at {offset}")
    stream.seek(offset)
    return offset
