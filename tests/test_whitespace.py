"""Tests for the blank-skipping scanner."""

from propenv.whitespace import NOT_FOUND, next_non_whitespace


def test_skips_spaces_and_tabs() -> None:
    """The first byte that is neither space nor tab is returned."""
    assert next_non_whitespace(b" \t \tx y", 0, 6) == 4


def test_start_is_inclusive() -> None:
    """Scanning begins at ``start`` itself."""
    assert next_non_whitespace(b"ab", 1, 1) == 1


def test_all_blank_returns_sentinel() -> None:
    """A range of only blanks has no match."""
    assert next_non_whitespace(b"    ", 0, 3) == NOT_FOUND


def test_empty_range_returns_sentinel() -> None:
    """An end before the start, as for an empty line, has no match."""
    assert next_non_whitespace(b"", 0, -1) == NOT_FOUND
    assert next_non_whitespace(b"a=", 2, 1) == NOT_FOUND


def test_nul_ends_the_scan() -> None:
    """A NUL inside the range counts as end of string."""
    assert next_non_whitespace(b"  \0abc", 0, 5) == NOT_FOUND


def test_end_past_buffer_is_clamped() -> None:
    """Running off the end of the buffer behaves like end of string."""
    assert next_non_whitespace(b"  ", 0, 10) == NOT_FOUND
    assert next_non_whitespace(b"  z", 0, 10) == 2
