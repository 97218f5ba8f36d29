"""
Locate a line in a large sorted text file by binary search over byte offsets.

Lines are discovered around each probe offset directly on the raw bytes,
with CR, LF and CRLF endings all recognized, so a lookup costs O(log n)
seeks instead of a full scan.

Typical usage example:

from line_bisect import LineSearcher
result = LineSearcher().search_file("words.txt", "apple")
if result.found:
    print(result.text)
"""

__version__ = "0.1.0"

from .src.extractor import Line, read_line_around
from .src.locator import locate_line_start
from .src.search import LineSearcher, SearchResult, find, find_line_in_range, fold_key

__all__ = [
    "Line",
    "LineSearcher",
    "SearchResult",
    "find",
    "find_line_in_range",
    "fold_key",
    "locate_line_start",
    "read_line_around",
]
