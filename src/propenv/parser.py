"""Line-at-a-time properties parser.

A record is ``name = value`` where:
- the separator is the first ``:`` or ``=`` on the line
- blanks around the name and before the value are dropped
- a trailing ``\\`` continues the value on the next physical line
- lines starting (after blanks) with ``!`` or ``#`` are comments

The parser is fed one physical line at a time (terminator already stripped)
and keeps the partially built record in a fixed-size buffer owned by
``ParserState``. The buffer holds the name, a NUL, then the value:

    n a m e \\0 v a l u e \\0
            ^name_end      ^value_end (after completion)

Completed records are passed to a handler ``(name, value) -> int``; a
nonzero result is returned to the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Union

from .errors import LineTooLongError, MalformedLineError
from .logging_config import get_logger
from .whitespace import BLANKS, NOT_FOUND, next_non_whitespace

logger = get_logger(__name__)

MAX_LENGTH = 2048

Handler = Callable[[bytes, bytes], int]
Line = Union[bytes, bytearray, str]

_SEPARATORS = (ord(":"), ord("="))
_COMMENTS = (ord("!"), ord("#"))
_CONTINUATION = ord("\\")


@dataclass
class ParserState:
    """Assembly buffer plus the two cursors into it.

    One state per input stream; not safe to share between threads.
    """
    buffer: bytearray = field(default_factory=lambda: bytearray(MAX_LENGTH), repr=False, compare=False)
    name_end: int = 0
    value_end: int = 0

    def reset(self) -> None:
        self.name_end = 0
        self.value_end = 0

    def is_idle(self) -> bool:
        return self.name_end == 0 and self.value_end == 0

    @property
    def in_value(self) -> bool:
        """True while a record is waiting for continuation lines."""
        return self.name_end > 0 and self.value_end > 0

    @property
    def capacity(self) -> int:
        return len(self.buffer)


def _emit(state: ParserState, handler: Handler) -> int:
    name = bytes(state.buffer[:state.name_end])
    value = bytes(state.buffer[state.name_end + 1:state.value_end - 1])
    logger.debug("record complete: %r", name)
    try:
        return handler(name, value)
    finally:
        state.reset()


def _append(state: ParserState, fragment: bytes) -> None:
    end = state.value_end + len(fragment)
    state.buffer[state.value_end:end] = fragment
    state.value_end = end


def _terminate(state: ParserState) -> None:
    state.buffer[state.value_end] = 0
    state.value_end += 1


def parse_line(state: ParserState, line: Line, handler: Handler) -> int:
    """Feed one physical line (without its terminator) to the parser.

    Returns 0 when no record was completed, otherwise the handler's result.
    The state is reset after every completed record, even when the handler
    raises.

    Raises:
        LineTooLongError: if the line would overflow the buffer. The state is
            left as it was.
        MalformedLineError: if a new record has no separator or an empty
            name. The state is reset.
    """
    if isinstance(line, str):
        line = line.encode("utf-8")
    length = len(line)

    if length >= state.capacity - state.value_end:
        raise LineTooLongError(f"line length {length + state.value_end} too long for parser state")

    buf = state.buffer

    if state.name_end == 0:
        cursor = next_non_whitespace(line, 0, length - 1)
        if cursor == NOT_FOUND or line[cursor] in _COMMENTS:
            return 0

        value_start = 0
        for i in range(cursor, length):
            c = line[i]
            if c in _SEPARATORS:
                buf[state.name_end] = 0
                value_start = i + 1

                # trim blanks between name and separator
                j = i - 1
                while state.name_end > 0 and line[j] in BLANKS:
                    state.name_end -= 1
                    buf[state.name_end] = 0
                    j -= 1

                state.value_end = state.name_end + 1
                break
            buf[state.name_end] = c
            state.name_end += 1

        if state.value_end == 0 or state.name_end == 0:
            logger.debug("rejecting malformed line: %r", bytes(line))
            state.reset()
            raise MalformedLineError("malformed line")

        value_start = next_non_whitespace(line, value_start, length - 1)
        if value_start == NOT_FOUND:
            _terminate(state)
            return _emit(state, handler)
    else:
        value_start = next_non_whitespace(line, 0, length - 1)
        if value_start == NOT_FOUND or line[value_start] in _COMMENTS:
            return 0

    if line[length - 1] == _CONTINUATION:
        # a lone backslash appends nothing
        _append(state, line[value_start:length - 1])
        return 0

    _append(state, line[value_start:length])
    _terminate(state)
    return _emit(state, handler)


def parse_lines(lines: Iterable[Line], handler: Handler, state: Optional[ParserState] = None) -> int:
    """Parse already-split lines through a single state.

    Stops at, and returns, the first nonzero handler result.
    """
    if state is None:
        state = ParserState()
    for line in lines:
        result = parse_line(state, line, handler)
        if result != 0:
            return result
    return 0
