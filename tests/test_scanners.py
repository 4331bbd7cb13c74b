import pytest

from markseg.lines import ParseError
from markseg.scanners import (
    eof,
    escaped_sequence,
    indented_by_at_least_4,
    indented_by_less_than_4,
    is_char,
    is_space_or_tab,
    line,
    line_ending,
    line_ending_or_eof,
    space_or_tab,
)


@pytest.mark.parametrize("text", ["", "\\", "a", "a\\"])
def test_escaped_sequence_failures(text):
    with pytest.raises(ParseError):
        escaped_sequence(text)


@pytest.mark.parametrize("text", ["\\\\", "\\a", "\\é"])
def test_escaped_sequence_successes(text):
    assert escaped_sequence(text) == ("", text)


@pytest.mark.parametrize("text", ["", "   ", "   a   "])
def test_indented_by_at_least_4_failures(text):
    with pytest.raises(ParseError):
        indented_by_at_least_4(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("\tabc", ("abc", "\t")),
        ("    abc", ("abc", "    ")),
        ("   \t  \t  toto", ("toto", "   \t  \t  ")),
    ],
)
def test_indented_by_at_least_4_successes(text, expected):
    assert indented_by_at_least_4(text) == expected


@pytest.mark.parametrize("text", ["\t", "    "])
def test_indented_by_less_than_4_failures(text):
    with pytest.raises(ParseError):
        indented_by_less_than_4(text)


@pytest.mark.parametrize(
    "text, expected",
    [("", ("", "")), ("abc", ("abc", "")), ("   abc", ("abc", "   "))],
)
def test_indented_by_less_than_4_successes(text, expected):
    assert indented_by_less_than_4(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("", ("", "")), ("abc", ("abc", "")), ("  \t\t toto", ("toto", "  \t\t "))],
)
def test_space_or_tab(text, expected):
    assert space_or_tab(text) == expected


@pytest.mark.parametrize("text", ["", "a"])
def test_line_ending_failures(text):
    with pytest.raises(ParseError):
        line_ending(text)


@pytest.mark.parametrize("text", ["\r\n", "\n"])
def test_line_ending_successes(text):
    assert line_ending(text) == ("", text)


def test_eof_fails_on_non_empty():
    with pytest.raises(ParseError):
        eof("a")


def test_eof_on_empty():
    assert eof("") == ("", "")


def test_line_ending_or_eof_fails_on_text():
    with pytest.raises(ParseError):
        line_ending_or_eof("a")


@pytest.mark.parametrize(
    "text, expected", [("", ("", "")), ("\r\n", ("", "\r\n")), ("\n", ("", "\n"))]
)
def test_line_ending_or_eof_successes(text, expected):
    assert line_ending_or_eof(text) == expected


def test_line_fails_on_empty():
    with pytest.raises(ParseError):
        line("")


@pytest.mark.parametrize("text", ["abc\nstuff", "abc\r\nstuff"])
def test_line_drops_ending(text):
    assert line(text) == ("stuff", "abc")


def test_line_without_ending():
    assert line("abc") == ("", "abc")


@pytest.mark.parametrize("char", ["a", "\n", "1"])
def test_is_space_or_tab_rejects_others(char):
    assert is_space_or_tab(char) is False


@pytest.mark.parametrize("char", [" ", "\t"])
def test_is_space_or_tab_accepts(char):
    assert is_space_or_tab(char) is True


def test_is_char():
    predicate = is_char("=")
    assert predicate("=") is True
    assert predicate("-") is False