"""Predicates over lines and segments, and the blank line segment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from markseg.lines import ParseError
from markseg.scanners import line_ending_or_eof, space_or_tab


@dataclass(frozen=True)
class BlankLine:
    """A line holding nothing but spaces and tabs, with its line ending if any."""

    segment: str


def blank_line(text: str) -> Tuple[str, BlankLine]:
    """Match a blank line at the start of ``text``.

    A blank line is any run of spaces and tabs followed by a line ending or
    the end of input. Empty input is not a blank line.
    """
    if not text:
        raise ParseError(text)
    rest, _ = space_or_tab(text)
    try:
        remaining, _ = line_ending_or_eof(rest)
    except ParseError:
        raise ParseError(text) from None
    return remaining, BlankLine(text[: len(text) - len(remaining)])


def is_blank_line(text: str) -> bool:
    """Return whether ``text`` is exactly one blank line."""
    try:
        remaining, _ = blank_line(text)
    except ParseError:
        return False
    return not remaining


def parentheses_balance(segment: str) -> bool:
    """Return whether the parentheses in ``segment`` balance, ignoring escaped ones."""
    sanitized = segment.replace("\\(", "").replace("\\)", "")
    return sanitized.count("(") == sanitized.count(")")