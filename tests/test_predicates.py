import pytest

from markseg.lines import ParseError
from markseg.predicates import BlankLine, blank_line, is_blank_line, parentheses_balance


class TestIsBlankLine:
    def test_should_return_false_with_empty_string(self):
        assert is_blank_line("") is False

    def test_should_return_false_for_string_with_one_non_whitespace_character(self):
        assert is_blank_line(" \ta\n") is False

    def test_should_return_false_for_2_blank_lines(self):
        assert is_blank_line("\n\n") is False

    def test_should_return_false_for_a_blank_line_followed_by_a_character(self):
        assert is_blank_line("\nabc") is False

    def test_should_return_true_with_space(self):
        assert is_blank_line(" ") is True

    def test_should_return_true_with_tab(self):
        assert is_blank_line("\t") is True

    def test_should_return_true_for_carriage_return(self):
        assert is_blank_line("\r\n") is True

    def test_should_return_true_for_newline(self):
        assert is_blank_line("\n") is True


class TestBlankLine:
    def test_rejects_empty(self):
        with pytest.raises(ParseError):
            blank_line("")

    def test_rejects_text(self):
        with pytest.raises(ParseError):
            blank_line(" \ta\n")

    def test_consumes_whitespace_and_newline(self):
        assert blank_line(" \t\n") == ("", BlankLine(" \t\n"))

    def test_stops_after_first_line(self):
        assert blank_line("\n\n") == ("\n", BlankLine("\n"))

    def test_accepts_crlf(self):
        assert blank_line("  \r\nabc") == ("abc", BlankLine("  \r\n"))


class TestParenthesesBalance:
    def test_should_reject_single_opening_parenthesis(self):
        assert parentheses_balance("(") is False

    def test_should_reject_single_closing_parenthesis(self):
        assert parentheses_balance(")") is False

    def test_should_reject_unbalanced_parentheses(self):
        assert parentheses_balance("(foo(and(bar))") is False

    def test_should_accept_an_empty_string(self):
        assert parentheses_balance("") is True

    def test_should_accept_string_without_parentheses(self):
        assert parentheses_balance("foo") is True

    def test_should_accept_unbalanced_escaped_parentheses(self):
        assert parentheses_balance(r"\(\(foo\)and\(bar\)") is True

    def test_should_accept_balanced_parentheses(self):
        assert parentheses_balance("(foo(and(bar)))") is True

    def test_should_accept_balanced_parentheses_and_ignore_escaped_ones(self):
        assert parentheses_balance(r"(foo\(blip(and(bar)))") is True