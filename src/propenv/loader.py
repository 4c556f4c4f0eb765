"""Load properties files through the line parser.

Pipeline shape:
- read raw lines (terminator included) from a file or binary stream
- require and strip the ``\\n`` / ``\\r\\n`` terminator
- feed each line to ``parse_line`` with a single ``ParserState``
- stop at the first failure, reporting the 1-based line number

Every failure surfaces as a ``LoadError`` carrying ``source`` and ``lineno``.
"""

from __future__ import annotations

import os
from typing import BinaryIO, Iterable, Iterator, Optional, Union

from .environ import setenv_property
from .errors import (
    HandlerError,
    LoadError,
    PropertiesError,
    SourceOpenError,
    SourceReadError,
    UnterminatedLineError,
)
from .logging_config import get_logger
from .parser import MAX_LENGTH, Handler, ParserState, parse_line

logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load_lines(
    lines: Iterable[Union[bytes, str]],
    handler: Handler = setenv_property,
    *,
    source: str = "<lines>",
) -> None:
    """Parse raw lines, each still ending in its newline.

    Raises:
        UnterminatedLineError: a line is longer than the read buffer or has
            no newline (including a missing newline at end of file), or holds
            a NUL byte.
        HandlerError: the handler returned nonzero.
        LoadError: the parser rejected a line, or the handler raised.
            The original exception is chained as ``__cause__``.
    """
    state = ParserState()
    lineno = 1
    for raw in lines:
        if isinstance(raw, str):
            raw = raw.encode("utf-8")

        # a NUL ends the line early, so it can never reach its newline
        if len(raw) > MAX_LENGTH - 1 or not raw.endswith(b"\n") or b"\0" in raw:
            raise UnterminatedLineError(
                f"properties file line {lineno} too long or does not end with newline",
                source=source,
                lineno=lineno,
            )

        line = raw[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]

        try:
            result = parse_line(state, line, handler)
        except PropertiesError as ex:
            raise LoadError(
                f"properties file line {lineno} malformed: {ex}", source=source, lineno=lineno
            ) from ex
        except Exception as ex:
            raise LoadError(
                f"properties file line {lineno} rejected by handler: {ex}", source=source, lineno=lineno
            ) from ex

        if result != 0:
            raise HandlerError(
                f"properties file line {lineno} malformed: handler returned {result}",
                result,
                source=source,
                lineno=lineno,
            )

        lineno += 1

    logger.debug("%s: parsed %d lines", source, lineno - 1)


def _read_lines(stream: BinaryIO, source: str) -> Iterator[bytes]:
    while True:
        try:
            raw = stream.readline(MAX_LENGTH - 1)
        except OSError as ex:
            raise SourceReadError(f"error reading file: {ex.strerror or ex}", source=source) from ex
        if not raw:
            return
        yield raw


def load_stream(stream: BinaryIO, handler: Handler = setenv_property, *, source: str = "<stream>") -> None:
    """Load from an open binary stream. The caller keeps ownership of ``stream``."""
    load_lines(_read_lines(stream, source), handler, source=source)


def load_file(path: PathLike, handler: Handler = setenv_property) -> None:
    """Load one properties file, closing it on every exit path.

    Raises:
        SourceOpenError: the file could not be opened.
        LoadError: see ``load_lines`` and ``load_stream``.
    """
    source = os.fspath(path)
    try:
        fh = open(source, "rb")
    except OSError as ex:
        raise SourceOpenError(f"could not open filename {source}", source=source) from ex

    with fh:
        load_stream(fh, handler, source=source)
    logger.info("loaded properties from %s", source)


def load_files(
    paths: Iterable[PathLike],
    handler: Handler = setenv_property,
    *,
    stdin: Optional[BinaryIO] = None,
) -> None:
    """Load several files in order; later files override earlier ones.

    When ``stdin`` is given, a path of ``-`` reads from it instead.
    """
    for path in paths:
        if stdin is not None and path == "-":
            load_stream(stdin, handler, source="<stdin>")
        else:
            load_file(path, handler)
