from __future__ import annotations


def _preview(text: str, limit: int = 200) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class XrandrQueryException(Exception):
    """Base exception for all xrandr-query errors."""


class ParsingError(XrandrQueryException):
    """Raised when ``xrandr`` query output cannot be turned into outputs.

    ``line_number`` is 1-based and is filled in by the document parser;
    it stays ``None`` when a line classifier is called directly.
    """

    def __init__(self, line: str, line_number: int | None = None) -> None:
        self.line = line
        self.line_number = line_number
        super().__init__(line)

    def _describe(self) -> str:
        return "Failed to parse line"

    def __str__(self) -> str:
        location = f" {self.line_number}" if self.line_number is not None else ""
        return f"{self._describe()} (line{location}: {_preview(self.line)})"


class MalformedLine(ParsingError):
    """A header or mode line that does not match its grammar."""

    def __init__(
        self,
        line: str,
        reason: str,
        token: str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.reason = reason
        self.token = token
        super().__init__(line, line_number)

    def _describe(self) -> str:
        return f"Malformed line: {self.reason}"


class UnexpectedHeader(ParsingError):
    """The first line does not carry the ``Screen`` marker."""

    def __init__(self, line: str, line_number: int | None = 1) -> None:
        super().__init__(line, line_number)

    def _describe(self) -> str:
        return 'First line should start with "Screen"'


class CommandNotFoundError(XrandrQueryException):
    """Raised when the ``xrandr`` executable cannot be found."""


class TimeoutError(XrandrQueryException):
    """Raised when the query exceeds the configured timeout."""
