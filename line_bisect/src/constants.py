"""
Shared constants for Line Bisect.

Centralizes byte values, defaults and message templates used across
multiple modules.
"""

# Line-ending bytes
CR = 0x0D
LF = 0x0A

# Decoding defaults (lenient UTF-8, invalid sequences become U+FFFD)
DEFAULT_ENCODING = "utf-8"
DEFAULT_DECODE_ERRORS = "replace"

# Error handlers accepted by bytes.decode()
DECODE_ERROR_POLICIES = [
    "strict",
    "replace",
    "ignore",
    "backslashreplace",
    "surrogateescape",
]

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# CLI output (kept byte-for-byte stable, scripts parse these)
FOUND_MESSAGE = "{search} found: {line}."
NOT_FOUND_MESSAGE = "{search} not found in file {file}."

# Bytes pulled per read while scanning a line forward
READ_CHUNK_SIZE = 4096
