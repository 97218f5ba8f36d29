"""
Random-access helpers over binary streams.

Any object with seek/tell/read in binary mode works: an open file
(`open(path, 'rb')`) or an in-memory `io.BytesIO`. Every helper seeks
absolutely before reading and never relies on a position left behind by
another call.
"""

import io
from typing import BinaryIO, Optional


def stream_length(stream: BinaryIO) -> int:
    """
    Get the length of a stream without disturbing its position.

    Args:
        stream (BinaryIO): Seekable binary stream

    Returns:
        int: Length in bytes
    """
    position = stream.tell()
    length = stream.seek(0, io.SEEK_END)
    stream.seek(position, io.SEEK_SET)
    return length


def check_offset(offset: int, length: int, name: str = "offset"):
    """
    Validate that an offset lies within [0, length].

    Args:
        offset (int): Offset to check
        length (int): Stream length
        name (str): Label used in the error message

    Raises:
        ValueError: If the offset is outside the stream
    """
    if offset < 0 or offset > length:
        raise ValueError(f"{name} {offset} out of bounds (0-{length})")


def read_byte_at(stream: BinaryIO, offset: int) -> Optional[int]:
    """
    Read the single byte at an absolute offset.

    Returns:
        Optional[int]: Byte value, or None at end of stream
    """
    stream.seek(offset, io.SEEK_SET)
    data = stream.read(1)
    if not data:
        return None
    return data[0]


def read_span(stream: BinaryIO, first: int, count: int) -> bytes:
    """
    Read `count` bytes starting at `first`.

    Raises:
        ValueError: If `count` is negative
        OSError: If the stream returns fewer bytes than requested
    """
    if count < 0:
        raise ValueError(f"Cannot read a negative byte count ({count})")

    stream.seek(first, io.SEEK_SET)
    data = stream.read(count)
    if len(data) != count:
        raise OSError(f"Short read at offset {first}: wanted {count} bytes, got {len(data)}")
    return data
