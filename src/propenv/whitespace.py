"""Blank-skipping helper shared by the parser."""

from __future__ import annotations

NOT_FOUND = -1

BLANKS = (0x20, 0x09)


def next_non_whitespace(buffer: bytes, start: int, end: int) -> int:
    """Return the first index in ``[start, end]`` holding a non-blank byte.

    Only space and tab are blank. A NUL byte, or running off the end of
    ``buffer``, ends the scan early and yields ``NOT_FOUND``.
    """
    for i in range(start, min(end, len(buffer) - 1) + 1):
        c = buffer[i]
        if c in BLANKS:
            continue
        return NOT_FOUND if c == 0 else i
    return NOT_FOUND
