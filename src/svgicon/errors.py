"""Error hierarchy for the svgicon transform."""
from __future__ import annotations


class SvgIconError(Exception):
    """Base error for all svgicon errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FileAccessError(SvgIconError):
    """An icon file is missing or cannot be read."""

    def __init__(
        self, message: str, *, path: str, cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.path = path


class MarkupParseError(SvgIconError):
    """An icon file is not well-formed markup."""

    def __init__(
        self,
        message: str,
        *,
        source: str,
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.source = source
        self.line = line
        self.column = column


class MalformedMarkerError(SvgIconError):
    """A declaration names the marker function but its arguments are unusable."""

    def __init__(
        self, message: str, *, value: str, cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.value = value


class CssSyntaxError(SvgIconError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message)
