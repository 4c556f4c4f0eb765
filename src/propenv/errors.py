"""Errors raised while parsing and loading properties files."""

from __future__ import annotations


class PropertiesError(Exception):
    """Base error for this package."""


class ParseError(PropertiesError):
    """Raised when a physical line cannot be accepted by the parser."""


class LineTooLongError(ParseError):
    """Raised when a line would overflow the parser's assembly buffer."""


class MalformedLineError(ParseError):
    """Raised when a new-record line has no separator or an empty name."""


class LoadError(PropertiesError):
    """Raised when a properties source cannot be loaded.

    ``source`` names the file or stream, ``lineno`` is the 1-based line the
    failure was detected on (``None`` when no line was involved).
    """

    def __init__(self, message: str, *, source: str | None = None, lineno: int | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.lineno = lineno


class UnterminatedLineError(LoadError):
    """Raised for a line that exceeds the read buffer or lacks a newline."""


class HandlerError(LoadError):
    """Raised when the record handler reports failure with a nonzero result."""

    def __init__(self, message: str, result: int, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.result = result


class SourceOpenError(LoadError):
    """Raised when the properties file cannot be opened."""


class SourceReadError(LoadError):
    """Raised when reading the properties stream fails midway."""
