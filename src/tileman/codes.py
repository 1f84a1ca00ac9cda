"""Error code constants for tileman deserialization errors.

These constants prevent stringly-typed error codes in error logs
and reports.
"""

from enum import Enum


class DeserErrorCode(str, Enum):
    """Deserialization error codes (closed set)."""

    # Grammar
    REGEX_MATCH_FAILED = "REGEX_MATCH_FAILED"
    CONTENTS_NOT_PARSED = "CONTENTS_NOT_PARSED"

    # Value narrowing
    DATA_CONVERT_FAILED = "DATA_CONVERT_FAILED"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    INVALID_VALUE = "INVALID_VALUE"
    MISSING_VALUE = "MISSING_VALUE"

    # Document structure
    NO_CATEGORY = "NO_CATEGORY"

    # Collaborators (filesystem)
    IO_ERROR = "IO_ERROR"
    MISSING_FILE = "MISSING_FILE"

    UNIMPLEMENTED = "UNIMPLEMENTED"
