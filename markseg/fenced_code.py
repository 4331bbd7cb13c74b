"""Opening and closing segments of fenced code blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from markseg.lines import ParseError
from markseg.scanners import indented_by_less_than_4, line_ending_or_eof, space_or_tab

Scan = Tuple[str, str]


@dataclass(frozen=True)
class BackticksFencedCodeOpeningSegment:
    """A line opening a fenced code block with at least 3 backticks."""

    segment: str
    indent: int
    fence_length: int
    info_string: str


@dataclass(frozen=True)
class BackticksFencedCodeClosingSegment:
    """A line closing a backticks fenced code block; it has no info string."""

    segment: str
    indent: int
    fence_length: int

    def closes(self, opening: BackticksFencedCodeOpeningSegment) -> bool:
        """Return whether this fence is at least as long as the opening one."""
        return self.fence_length >= opening.fence_length


@dataclass(frozen=True)
class TildesFencedCodeOpeningSegment:
    """A line opening a fenced code block with at least 3 tildes."""

    segment: str
    indent: int
    fence_length: int
    info_string: str


@dataclass(frozen=True)
class TildesFencedCodeClosingSegment:
    """A line closing a tildes fenced code block; it has no info string."""

    segment: str
    indent: int
    fence_length: int

    def closes(self, opening: TildesFencedCodeOpeningSegment) -> bool:
        """Return whether this fence is at least as long as the opening one."""
        return self.fence_length >= opening.fence_length


def _fence(text: str, char: str) -> Scan:
    rest = text.lstrip(char)
    taken = len(text) - len(rest)
    if taken < 3:
        raise ParseError(text)
    return rest, text[:taken]


def backticks_fence(text: str) -> Scan:
    """Match a run of at least 3 backticks."""
    return _fence(text, "`")


def tildes_fence(text: str) -> Scan:
    """Match a run of at least 3 tildes."""
    return _fence(text, "~")


def backticks_info_string(text: str) -> Scan:
    """Consume the rest of the line as a trimmed info string without backticks."""
    if "`" in text:
        raise ParseError(text)
    return "", text.strip()


def tildes_info_string(text: str) -> Scan:
    """Consume the rest of the line as a trimmed info string."""
    return "", text.strip()


def _consumed(text: str, remaining: str) -> str:
    return text[: len(text) - len(remaining)]


def _opening(text: str, fence, info) -> Tuple[str, int, int, str, str]:
    try:
        rest, indent = indented_by_less_than_4(text)
        rest, fence_text = fence(rest)
        remaining, info_string = info(rest)
    except ParseError:
        raise ParseError(text) from None
    return remaining, len(indent), len(fence_text), info_string, _consumed(text, remaining)


def _closing(text: str, fence) -> Tuple[str, int, int, str]:
    try:
        rest, indent = indented_by_less_than_4(text)
        rest, fence_text = fence(rest)
        rest, _ = space_or_tab(rest)
        remaining, _ = line_ending_or_eof(rest)
    except ParseError:
        raise ParseError(text) from None
    return remaining, len(indent), len(fence_text), _consumed(text, remaining)


def backticks_fenced_code_opening_segment(
    text: str,
) -> Tuple[str, BackticksFencedCodeOpeningSegment]:
    """Match an opening backticks fence with its optional info string."""
    remaining, indent, length, info, segment = _opening(
        text, backticks_fence, backticks_info_string
    )
    return remaining, BackticksFencedCodeOpeningSegment(segment, indent, length, info)


def backticks_fenced_code_closing_segment(
    text: str,
) -> Tuple[str, BackticksFencedCodeClosingSegment]:
    """Match a closing backticks fence followed only by spaces or tabs."""
    remaining, indent, length, segment = _closing(text, backticks_fence)
    return remaining, BackticksFencedCodeClosingSegment(segment, indent, length)


def tildes_fenced_code_opening_segment(
    text: str,
) -> Tuple[str, TildesFencedCodeOpeningSegment]:
    """Match an opening tildes fence with its optional info string."""
    remaining, indent, length, info, segment = _opening(
        text, tildes_fence, tildes_info_string
    )
    return remaining, TildesFencedCodeOpeningSegment(segment, indent, length, info)


def tildes_fenced_code_closing_segment(
    text: str,
) -> Tuple[str, TildesFencedCodeClosingSegment]:
    """Match a closing tildes fence followed only by spaces or tabs."""
    remaining, indent, length, segment = _closing(text, tildes_fence)
    return remaining, TildesFencedCodeClosingSegment(segment, indent, length)