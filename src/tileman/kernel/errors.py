"""Deserialization error taxonomy.

Errors are raised while a single record is being built and are caught
by the document assemblers, which keep them as data in the error log
next to the offending line. Nothing here ever aborts a whole load.
"""

from typing import Any, Dict, Optional

from tileman.codes import DeserErrorCode


class DeserError(ValueError):
    """Base class for all deserialization errors."""

    code: DeserErrorCode = DeserErrorCode.UNIMPLEMENTED

    def __init__(self, message: str = "", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details or {})
        self.message = message
        self.details: Dict[str, Any] = details or {}

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeserError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.details == other.details
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view used by reports."""
        data: Dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.details:
            data["details"] = {k: str(v) for k, v in sorted(self.details.items())}
        return data


class RegexMatchFailed(DeserError):
    """A line did not match the grammar it was handed to."""
    code = DeserErrorCode.REGEX_MATCH_FAILED


class ContentsNotParsed(DeserError):
    code = DeserErrorCode.CONTENTS_NOT_PARSED


class DataConvertFailed(DeserError):
    """A value could not be narrowed to the requested shape."""
    code = DeserErrorCode.DATA_CONVERT_FAILED


class TypeMismatch(DeserError):
    """A required property holds a value of the wrong kind."""
    code = DeserErrorCode.TYPE_MISMATCH

    def __init__(self, key: str, expected: str, actual: str):
        super().__init__(
            f"property '{key}': expected {expected}, got {actual}",
            {"key": key, "expected": expected, "actual": actual},
        )
        self.key = key
        self.expected = expected
        self.actual = actual
        self.args = (key, expected, actual)


class InvalidValue(DeserError):
    code = DeserErrorCode.INVALID_VALUE


class NoCategory(DeserError):
    """A tile was found with no category to attach it to."""
    code = DeserErrorCode.NO_CATEGORY

    def __init__(self, tile: Any):
        super().__init__(f"tile '{getattr(tile, 'name', tile)}' has no category", {"tile": tile})
        self.tile = tile
        self.args = (tile,)


class DeserIOError(DeserError):
    """A collaborator failed to read a file or directory."""
    code = DeserErrorCode.IO_ERROR


class MissingFile(DeserError):
    code = DeserErrorCode.MISSING_FILE


class MissingValue(DeserError):
    code = DeserErrorCode.MISSING_VALUE


class Unimplemented(DeserError):
    code = DeserErrorCode.UNIMPLEMENTED
