"""Utility modules."""

from .logger_setup import get_logger, LoggerManager
from .stream_utils import check_offset, read_byte_at, read_span, stream_length

__all__ = [
    # Logging utilities
    "get_logger",
    "LoggerManager",
    # Stream utilities
    "check_offset",
    "read_byte_at",
    "read_span",
    "stream_length",
]
