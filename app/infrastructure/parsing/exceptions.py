"""Exceptions raised while reading command text.

All command errors share the ``CommandError`` base so callers can report
any tokenizing or parsing failure with a single ``except`` clause.
"""


class CommandError(Exception):
    """Base exception for command tokenizing and parsing failures.

    Attributes:
        code: Short machine-readable error kind.
        message: Human-readable description.

    Example:
        try:
            request = parse_command(comment_body)
        except CommandError as e:
            notify_failure(f"unable to parse command [{comment_body}]: {e}")
    """

    code = "COMMAND_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TokenizeError(CommandError):
    """Raised when the command line cannot be split into tokens."""

    code = "TOKENIZE_ERROR"


class UnclosedQuoteError(TokenizeError):
    """Raised when the line ends while a quote is still open.

    Example:
        >>> tokenize('/approve --pm "a@b.com')
        Traceback (most recent call last):
        ...
        UnclosedQuoteError: Unclosed quote in command line: /approve --pm "a@b.com
    """

    code = "UNCLOSED_QUOTE"

    def __init__(self, line: str):
        super().__init__(f"Unclosed quote in command line: {line}")
        self.line = line
