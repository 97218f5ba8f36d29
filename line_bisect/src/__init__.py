"""Core functionality modules."""

from .config import Config, ConfigManager, LoggingConfig, SearchConfig
from .extractor import Line, read_line_around
from .line_endings import BoundaryState, EndingState, ForwardEndingScanner, LineEnding
from .locator import locate_line_start
from .search import LineSearcher, SearchResult, compare_prefix, find, find_line_in_range, fold_key

__all__ = [
    # Config
    "Config",
    "ConfigManager",
    "LoggingConfig",
    "SearchConfig",
    # Line endings
    "BoundaryState",
    "EndingState",
    "ForwardEndingScanner",
    "LineEnding",
    # Locator / extractor
    "locate_line_start",
    "Line",
    "read_line_around",
    # Search
    "LineSearcher",
    "SearchResult",
    "compare_prefix",
    "find",
    "find_line_in_range",
    "fold_key",
]
