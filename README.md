# markseg

Small, dependency-free parsers that recognise some of the line segments
making up CommonMark block constructs: fenced code fences, indented code
lines, setext heading underlines and blank lines.

Single-line parsers take a string and return a pair `(remaining, parsed)`.
Parsers over several lines take a `Lines` view (or a plain string) and return
`(remaining_lines, parsed)`. When the input does not match, a
`markseg.lines.ParseError` is raised; the input it was given is kept on its
`input` attribute.

## Installation

```
pip install markseg
```

## Modules

- `markseg.lines`: `Lines` (text consumed one line at a time, with
  `enumerate()` yielding `(offset, line)` pairs and `split_at(index)`),
  `lines(source)`, `parse_line(line_parser, input)` to lift a single-line
  parser onto `Lines`, `repeated(parser, input, at_least=0)`, and
  `ParseError`.
- `markseg.scanners`: `escaped_sequence`, `space_or_tab`,
  `indented_by_at_least_4`, `indented_by_less_than_4`, `line_ending`, `eof`,
  `line_ending_or_eof`, `line`, and the predicates `is_space_or_tab` and
  `is_char`.
- `markseg.predicates`: `BlankLine`, `blank_line`, `is_blank_line`,
  `parentheses_balance`.
- `markseg.indented_code`: `IndentedCodeSegment`, `indented_code`,
  `indented_code_or_blank_line`, `ContinuationSegments`.
- `markseg.setext_heading`: `SetextHeadingEqualsUnderlineSegment`,
  `SetextHeadingHyphensUnderlineSegment`, `equals_underline`,
  `hyphens_underline`, `setext_heading_underline`.
- `markseg.fenced_code`: opening and closing segments for backtick and tilde
  fences, the fence and info-string scanners, and `closes()` on closing
  segments.

## Usage

Scanning primitives:

```python
from markseg.scanners import indented_by_less_than_4, line

indented_by_less_than_4("   abc")   # ("abc", "   ")
line("abc\nstuff")                 # ("stuff", "abc")
```

Fenced code fences:

```python
from markseg.fenced_code import (
    backticks_fenced_code_opening_segment,
    backticks_fenced_code_closing_segment,
)

_, opening = backticks_fenced_code_opening_segment("```rust\n")
opening.info_string  # "rust"
_, closing = backticks_fenced_code_closing_segment("````\n")
closing.closes(opening)  # True
```

Setext heading underlines:

```python
from markseg.setext_heading import setext_heading_underline

_, underline = setext_heading_underline("=====\n")
underline.level  # 1
```

Indented code continuations, parsed over a `Lines` view:

```python
from markseg.lines import lines
from markseg.indented_code import ContinuationSegments

remaining, continuation = ContinuationSegments.parse(lines("\n    code\n"))
continuation.segments         # [BlankLine(segment='\n')]
continuation.closing_segment  # IndentedCodeSegment(segment='    code\n')
```

Predicates:

```python
from markseg.predicates import is_blank_line, parentheses_balance

is_blank_line(" \t\n")          # True
parentheses_balance("(a(b))")   # True
```

## What it does not do

markseg only recognises individual segments. It does not parse link titles,
does not assemble segments into a document tree, and does not render HTML.
There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```