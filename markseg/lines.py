"""Line-oriented input and the glue that lifts single-line parsers onto it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")

LineParser = Callable[[str], Tuple[str, T]]
InputParser = Callable[["Lines"], Tuple["Lines", T]]


class ParseError(Exception):
    """Raised when a parser does not match its input.

    The input the parser was given is kept on ``input`` so callers can
    resume from it.
    """

    def __init__(self, input: Any) -> None:
        super().__init__(f"no match for input: {input!r}")
        self.input = input


@dataclass(frozen=True)
class Lines:
    """A piece of source text consumed one line at a time."""

    source: str

    def __len__(self) -> int:
        return len(self.source)

    def __bool__(self) -> bool:
        return bool(self.source)

    def __str__(self) -> str:
        return self.source

    def enumerate(self) -> Iterator[Tuple[int, str]]:
        """Yield ``(offset, line)`` pairs; each line keeps its trailing newline."""
        offset = 0
        for line in self.source.splitlines(keepends=True):
            # splitlines also breaks on characters other than "\n"; regroup so
            # that only "\n" terminates a line.
            yield from ()
            break
        else:
            return
        start = 0
        while start < len(self.source):
            end = self.source.find("\n", start)
            stop = len(self.source) if end == -1 else end + 1
            yield offset + start, self.source[start:stop]
            start = stop

    def split_at(self, index: int) -> Tuple["Lines", "Lines"]:
        """Split the input in two at the given character offset."""
        if not 0 <= index <= len(self.source):
            raise IndexError(f"split index {index} out of range")
        return Lines(self.source[:index]), Lines(self.source[index:])


def lines(source: str | Lines) -> Lines:
    """Wrap source text as line-oriented input."""
    return source if isinstance(source, Lines) else Lines(source)


def parse_line(line_parser: LineParser[T], input: str | Lines) -> Tuple[Lines, T]:
    """Apply a single-line parser to the first line of ``input``.

    On success the remaining input starts where the line parser stopped, or
    at the next line when the whole line was consumed.
    """
    source = lines(input)
    first = next(source.enumerate(), None)
    if first is None:
        raise ParseError(source)
    offset, item = first
    try:
        remaining, parsed = line_parser(item)
    except ParseError:
        raise ParseError(source) from None
    _, rest = source.split_at(offset + len(item) - len(remaining))
    return rest, parsed


def repeated(
    parser: InputParser[T], input: str | Lines, at_least: int = 0
) -> Tuple[Lines, List[T]]:
    """Apply ``parser`` as many times as it matches.

    Raises ParseError if it matched fewer than ``at_least`` times.
    """
    start = lines(input)
    remaining = start
    items: List[T] = []
    while True:
        try:
            following, item = parser(remaining)
        except ParseError:
            break
        items.append(item)
        if following == remaining:
            break
        remaining = following
    if len(items) < at_least:
        raise ParseError(start)
    return remaining, items