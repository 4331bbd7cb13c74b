"""Indented code segments and the runs of lines that continue them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union

from markseg.lines import Lines, ParseError, parse_line, repeated
from markseg.predicates import BlankLine, blank_line, is_blank_line
from markseg.scanners import indented_by_at_least_4


@dataclass(frozen=True)
class IndentedCodeSegment:
    """A line indented by 4 columns or more that is not a blank line."""

    segment: str


IndentedCodeOrBlankLine = Union[IndentedCodeSegment, BlankLine]


def indented_code(text: str) -> Tuple[str, IndentedCodeSegment]:
    """Match a whole line of indented code."""
    if is_blank_line(text):
        raise ParseError(text)
    indented_by_at_least_4(text)
    return "", IndentedCodeSegment(text)


def indented_code_or_blank_line(text: str) -> Tuple[str, IndentedCodeOrBlankLine]:
    """Match an indented code line, or failing that a blank line."""
    try:
        return indented_code(text)
    except ParseError:
        return blank_line(text)


def _blank_line(input: Lines) -> Tuple[Lines, BlankLine]:
    return parse_line(blank_line, input)


def _chunk(input: Lines) -> Tuple[Lines, Tuple[List[BlankLine], IndentedCodeSegment]]:
    remaining, blanks = repeated(_blank_line, input)
    remaining, code = parse_line(indented_code, remaining)
    return remaining, (blanks, code)


@dataclass
class ContinuationSegments:
    """Lines following an indented code opening, ending on an indented code line.

    Blank lines between code lines are kept; trailing blank lines are not
    consumed.
    """

    segments: List[IndentedCodeOrBlankLine] = field(default_factory=list)
    closing_segment: IndentedCodeSegment = IndentedCodeSegment("")

    @classmethod
    def parse(cls, input: str | Lines) -> Tuple[Lines, "ContinuationSegments"]:
        """Parse one or more runs of blank lines each followed by indented code."""
        remaining, chunks = repeated(_chunk, input, at_least=1)
        segments: List[IndentedCodeOrBlankLine] = []
        for blanks, code in chunks:
            segments.extend(blanks)
            segments.append(code)
        closing = segments.pop()
        assert isinstance(closing, IndentedCodeSegment)
        return remaining, cls(segments, closing)