"""
Binary search over the lines of a sorted text file.

Probes the midpoint of a byte range, materializes the line straddling it,
and narrows the range to one side of that line. Lines must be sorted by
their ASCII-uppercased text in ordinal order; results are undefined
otherwise.

Matching is by prefix: a key matches any line that starts with it (after
case folding), so "12" matches "12345". When several lines share the
prefix, whichever one a probe lands on first is returned.
"""

import string
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .config import Config
from .constants import DEFAULT_DECODE_ERRORS, DEFAULT_ENCODING
from .extractor import Line, read_line_around
from ..utils.logger_setup import get_logger
from ..utils.stream_utils import stream_length

logger = get_logger(__name__)

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def fold_key(text: str) -> str:
    """
    Uppercase ASCII letters only; every other character is left as is.

    Example:
        >>> fold_key("abc-é")
        'ABC-é'
    """
    return text.translate(_ASCII_UPPER)


def compare_prefix(line_text: str, key: str) -> int:
    """
    Compare the folded prefix of a line against an already folded key.

    Returns:
        int: -1 if the line sorts before the key, 0 on a prefix match,
        1 if the line sorts after the key
    """
    prefix = fold_key(line_text[:len(key)])
    if prefix == key:
        return 0
    return 1 if prefix > key else -1


def find_line_in_range(
    stream: BinaryIO,
    first: int,
    last: int,
    key: str,
    encoding: str = DEFAULT_ENCODING,
    errors: str = DEFAULT_DECODE_ERRORS,
    stats: Optional[dict] = None,
) -> Optional[Line]:
    """
    Search the half-open byte range [first, last) for a line matching `key`.

    Args:
        stream: Seekable binary stream over sorted lines
        first: Inclusive start of the range
        last: Exclusive end of the range
        key: Search key, already folded with fold_key()
        encoding: Codec used to decode probed lines
        errors: bytes.decode() error handler
        stats: Optional dict; 'probes' is set to the number of lines read

    Returns:
        The matching Line, or None if no line in the range matches

    Raises:
        ValueError: If the range is not within [0, length]
    """
    length = stream_length(stream)
    if first < 0 or last < 0:
        raise ValueError(f"Negative search range [{first}, {last})")
    if last > length:
        raise ValueError(f"Search range end {last} beyond stream length {length}")

    probes = 0
    match = None

    while first < last:
        mid = first + (last - first) // 2
        line = read_line_around(stream, mid, encoding, errors)
        probes += 1

        result = compare_prefix(line.text, key)
        logger.debug(f"Probe {probes}: range [{first}, {last}) mid={mid} line={line.text!r} cmp={result}")

        if result == 0:
            match = line
            break

        if result > 0:
            last = line.first_offset
        else:
            first = line.last_offset + 1

    if stats is not None:
        stats['probes'] = probes

    return match


def find(stream: BinaryIO, first: int, last: int, key: str) -> Optional[str]:
    """
    Return the text of the line matching `key` in [first, last), or None.

    `key` must already be uppercased (see fold_key()).
    """
    line = find_line_in_range(stream, first, last, key)
    if line is None:
        return None
    return line.text


@dataclass
class SearchResult:
    """Outcome of a whole-stream search."""
    search: str
    line: Optional[Line] = None
    probes: int = 0

    @property
    def found(self) -> bool:
        return self.line is not None

    @property
    def text(self) -> Optional[str]:
        return self.line.text if self.line is not None else None


class LineSearcher:
    """Searches sorted text files and streams for a line by prefix."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize LineSearcher.

        Args:
            config: Configuration object. Defaults are used when None.
        """
        self.config = config or Config()

    def search_stream(self, stream: BinaryIO, search: str) -> SearchResult:
        """
        Search an entire stream.

        Args:
            stream: Seekable binary stream over sorted lines
            search: Search text as typed by the user (folded here)

        Returns:
            SearchResult with the matching line, if any
        """
        stats = {}
        line = find_line_in_range(
            stream,
            0,
            stream_length(stream),
            fold_key(search),
            encoding=self.config.search.encoding,
            errors=self.config.search.errors,
            stats=stats,
        )

        result = SearchResult(search=search, line=line, probes=stats.get('probes', 0))
        if result.found:
            logger.info(f"Found '{search}' at offset {line.first_offset} after {result.probes} probe(s)")
        else:
            logger.info(f"'{search}' not found after {result.probes} probe(s)")
        return result

    def search_file(self, file_path: Union[str, Path], search: str) -> SearchResult:
        """
        Search a file on disk.

        Args:
            file_path: Path to a sorted text file
            search: Search text

        Returns:
            SearchResult with the matching line, if any

        Raises:
            OSError: If the file cannot be opened or read
        """
        logger.info(f"Searching {file_path} for '{search}'")
        with open(file_path, 'rb') as stream:
            return self.search_stream(stream, search)
