"""Exception hierarchy for DocTree Core."""

from __future__ import annotations


class DocTreeError(Exception):
    """Base class for every failure reported by DocTree Core."""


class PathError(DocTreeError):
    """A path cannot be used for the requested operation."""


class InvalidPatternError(DocTreeError):
    """A search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class NotASequenceError(DocTreeError):
    """The value at a path is not a sequence."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path {path!r} does not point to a sequence")
        self.path = path


class DecodeError(DocTreeError):
    """Text could not be parsed by a format front-end."""

    def __init__(self, fmt: str, reason: str, line: int | None = None,
                 column: int | None = None) -> None:
        super().__init__(f"Invalid {fmt.upper()}: {reason}")
        self.format = fmt
        self.reason = reason
        self.line = line
        self.column = column


class EncodeError(DocTreeError):
    """A tree cannot be represented in the requested format."""

    def __init__(self, fmt: str, reason: str) -> None:
        super().__init__(f"Failed to write {fmt.upper()}: {reason}")
        self.format = fmt
        self.reason = reason


class UnsupportedFormatError(DocTreeError):
    """No front-end is registered for a format name or file extension."""


class DocumentNotFoundError(DocTreeError):
    """The document file does not exist."""


class DocumentTooLargeError(DocTreeError):
    """The document file exceeds the configured size ceiling."""

    def __init__(self, path: str, size: int, limit: int) -> None:
        super().__init__(
            f"File too large: {size / 1024 / 1024:.2f} MB "
            f"(limit {limit / 1024 / 1024:.2f} MB): {path}"
        )
        self.path = path
        self.size = size
        self.limit = limit
