"""Setext heading underline segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple, Type, TypeVar, Union

from markseg.lines import ParseError
from markseg.scanners import eof, indented_by_less_than_4, line, space_or_tab


@dataclass(frozen=True)
class SetextHeadingEqualsUnderlineSegment:
    """An underline of ``=`` characters, making a level 1 heading."""

    segment: str
    level: ClassVar[int] = 1


@dataclass(frozen=True)
class SetextHeadingHyphensUnderlineSegment:
    """An underline of ``-`` characters, making a level 2 heading."""

    segment: str
    level: ClassVar[int] = 2


SetextHeadingUnderlineSegment = Union[
    SetextHeadingEqualsUnderlineSegment, SetextHeadingHyphensUnderlineSegment
]

_U = TypeVar("_U", SetextHeadingEqualsUnderlineSegment, SetextHeadingHyphensUnderlineSegment)


def _underline(text: str, char: str, kind: Type[_U]) -> Tuple[str, _U]:
    try:
        remaining, content = line(text)
        rest, _ = indented_by_less_than_4(content)
        stripped = rest.lstrip(char)
        if len(stripped) == len(rest):
            raise ParseError(rest)
        tail, _ = space_or_tab(stripped)
        eof(tail)
    except ParseError:
        raise ParseError(text) from None
    return remaining, kind(text[: len(text) - len(remaining)])


def equals_underline(text: str) -> Tuple[str, SetextHeadingEqualsUnderlineSegment]:
    """Match a line made of ``=`` characters, indented by fewer than 4 spaces."""
    return _underline(text, "=", SetextHeadingEqualsUnderlineSegment)


def hyphens_underline(text: str) -> Tuple[str, SetextHeadingHyphensUnderlineSegment]:
    """Match a line made of ``-`` characters, indented by fewer than 4 spaces."""
    return _underline(text, "-", SetextHeadingHyphensUnderlineSegment)


def setext_heading_underline(text: str) -> Tuple[str, SetextHeadingUnderlineSegment]:
    """Match either kind of setext heading underline."""
    try:
        return equals_underline(text)
    except ParseError:
        return hyphens_underline(text)