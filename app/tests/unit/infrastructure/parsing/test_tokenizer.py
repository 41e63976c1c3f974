"""Unit tests for the quote-aware tokenizer.

Tests cover:
- Double and single quotes, empty quoted values
- Backslash escapes outside quotes, literal backslashes inside quotes
- Whitespace handling (spaces, tabs, newlines)
- Unclosed quotes
- The first-character literal behavior and escape_first=False
"""

import pytest

from infrastructure.parsing import (
    CommandError,
    TokenizeError,
    UnclosedQuoteError,
    tokenize,
)


@pytest.mark.unit
class TestTokenize:
    """Test quote-aware tokenization."""

    def test_full_approve_command_with_quotes(self):
        """Quoted email and name are single tokens without their quotes."""
        tokens = tokenize(
            '/approve --pm "a@b.com" --name "Jane Doe" --email jane@b.com'
        )
        assert tokens == [
            "/approve",
            "--pm",
            "a@b.com",
            "--name",
            "Jane Doe",
            "--email",
            "jane@b.com",
        ]

    def test_unquoted_command(self):
        tokens = tokenize("/approve --pm a@b.com --name Jane Doe --email jane@b.com")
        assert tokens == [
            "/approve",
            "--pm",
            "a@b.com",
            "--name",
            "Jane",
            "Doe",
            "--email",
            "jane@b.com",
        ]

    def test_single_quotes(self):
        assert tokenize("/approve --name 'Jane Doe'") == [
            "/approve",
            "--name",
            "Jane Doe",
        ]

    def test_other_quote_is_literal_inside_quotes(self):
        assert tokenize('/approve "it\'s"') == ["/approve", "it's"]
        assert tokenize("/approve 'say \"hi\"'") == ["/approve", 'say "hi"']

    def test_whitespace_runs_do_not_produce_empty_tokens(self):
        assert tokenize("/approve  \t --pm   a@b.com\t") == [
            "/approve",
            "--pm",
            "a@b.com",
        ]

    def test_whitespace_preserved_inside_quotes(self):
        assert tokenize('/approve "Jane \t  Doe"') == ["/approve", "Jane \t  Doe"]

    def test_empty_quoted_value_is_a_token(self):
        assert tokenize('/approve --pm ""') == ["/approve", "--pm", ""]
        assert tokenize("/approve --pm ''") == ["/approve", "--pm", ""]

    def test_escaped_space_joins_words(self):
        assert tokenize("/approve Jane\\ Doe") == ["/approve", "Jane Doe"]

    def test_escaped_quote_is_literal(self):
        assert tokenize('/approve \\"hi\\"') == ["/approve", '"hi"']

    def test_backslash_inside_quotes_is_literal(self):
        assert tokenize('/approve "a\\b"') == ["/approve", "a\\b"]

    def test_trailing_backslash_is_dropped(self):
        assert tokenize("/approve a\\") == ["/approve", "a"]

    def test_quote_continues_unquoted_prefix(self):
        """Text before an opening quote becomes part of the quoted token."""
        assert tokenize('/approve --pm=" a@b.com"') == ["/approve", "--pm= a@b.com"]

    def test_closing_quote_ends_token(self):
        assert tokenize('/approve "a"b') == ["/approve", "a", "b"]

    def test_newline_is_an_ordinary_character(self):
        assert tokenize("/approve a\nb") == ["/approve", "a\nb"]

    def test_empty_line(self):
        assert tokenize("") == []


@pytest.mark.unit
class TestUnclosedQuote:
    """Test unclosed quote detection."""

    def test_unclosed_double_quote(self):
        line = '/approve --pm "a@b.com --name Jane --email jane@b.com'
        with pytest.raises(UnclosedQuoteError) as err:
            tokenize(line)

        assert err.value.line == line
        assert str(err.value) == f"Unclosed quote in command line: {line}"
        assert err.value.code == "UNCLOSED_QUOTE"

    def test_unclosed_single_quote(self):
        with pytest.raises(UnclosedQuoteError):
            tokenize("/approve --name 'Jane Doe")

    def test_mismatched_quote_does_not_close(self):
        with pytest.raises(UnclosedQuoteError):
            tokenize("/approve --name \"Jane Doe'")

    def test_is_a_command_error(self):
        with pytest.raises(TokenizeError):
            tokenize('/approve "')
        with pytest.raises(CommandError):
            tokenize('/approve "')


@pytest.mark.unit
class TestFirstCharacterLiteral:
    """The first character is always taken literally unless escape_first=False."""

    def test_leading_slash_unaffected(self):
        assert tokenize("/approve")[0] == "/approve"

    def test_leading_quote_is_literal(self):
        """The leading quote is kept and the closing one opens a new quote."""
        with pytest.raises(UnclosedQuoteError):
            tokenize('"a b"')

    def test_leading_quote_without_escape_first(self):
        assert tokenize('"a b"', escape_first=False) == ["a b"]

    def test_leading_space_is_kept(self):
        assert tokenize(" /approve") == [" /approve"]
        assert tokenize(" /approve", escape_first=False) == ["/approve"]

    def test_leading_backslash_is_kept(self):
        assert tokenize("\\/approve") == ["\\/approve"]
        assert tokenize("\\/approve", escape_first=False) == ["/approve"]

    def test_blank_line(self):
        assert tokenize("  \t ") == [" "]
        assert tokenize("  \t ", escape_first=False) == []


@pytest.mark.unit
class TestRetokenize:
    """Joining plain tokens with spaces and tokenizing again is stable."""

    @pytest.mark.parametrize(
        "line",
        [
            "/approve --pm a@b.com --name Jane Doe --email jane@b.com",
            "/approve   -pm a@b.com\t-email jane@b.com -name Jane",
            "/deny --pm a@b.com",
        ],
    )
    def test_retokenize_is_stable(self, line):
        tokens = tokenize(line)
        assert tokenize(" ".join(tokens)) == tokens
