"""Small scanners over a single line of text.

Each scanner takes a string and returns ``(remaining, parsed)`` or raises
ParseError when it does not match.
"""

from __future__ import annotations

from typing import Callable, Tuple

from markseg.lines import ParseError

Scan = Tuple[str, str]


def is_space_or_tab(char: str) -> bool:
    """Return whether a character is a space or a tab."""
    return char in (" ", "\t")


def is_char(expected: str) -> Callable[[str], bool]:
    """Return a predicate matching exactly the given character."""
    return lambda char: char == expected


def escaped_sequence(text: str) -> Scan:
    """Match a backslash followed by any one character."""
    if len(text) >= 2 and text[0] == "\\":
        return text[2:], text[:2]
    raise ParseError(text)


def space_or_tab(text: str) -> Scan:
    """Consume any amount of leading spaces and tabs; never fails."""
    stripped = text.lstrip(" \t")
    return stripped, text[: len(text) - len(stripped)]


def indented_by_at_least_4(text: str) -> Scan:
    """Match leading whitespace worth at least 4 columns (a tab counts as 4)."""
    remaining, spaces = space_or_tab(text)
    if "\t" in spaces or len(spaces) >= 4:
        return remaining, spaces
    raise ParseError(text)


def indented_by_less_than_4(text: str) -> Scan:
    """Match leading whitespace of at most 3 spaces and no tabs."""
    remaining, spaces = space_or_tab(text)
    if "\t" not in spaces and len(spaces) < 4:
        return remaining, spaces
    raise ParseError(text)


def line_ending(text: str) -> Scan:
    """Match ``\\n`` or ``\\r\\n``."""
    for ending in ("\n", "\r\n"):
        if text.startswith(ending):
            return text[len(ending):], ending
    raise ParseError(text)


def eof(text: str) -> Scan:
    """Match only the end of input."""
    if text:
        raise ParseError(text)
    return "", ""


def line_ending_or_eof(text: str) -> Scan:
    """Match a line ending or the end of input."""
    try:
        return line_ending(text)
    except ParseError:
        return eof(text)


def line(text: str) -> Scan:
    """Match a line of text, dropping its line ending if present."""
    for terminator in ("\r\n", "\n"):
        index = text.find(terminator)
        if index != -1:
            remaining, _ = line_ending(text[index:])
            return remaining, text[:index]
    if text:
        return "", text
    raise ParseError(text)