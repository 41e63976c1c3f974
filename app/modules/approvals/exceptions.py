"""Exceptions raised while interpreting approval commands."""

from typing import Sequence

from infrastructure.parsing.exceptions import CommandError


class ParseError(CommandError):
    """Base exception for approval command interpretation failures."""

    code = "PARSE_ERROR"


class EmptyCommandError(ParseError):
    """Raised when the command holds no tokens at all."""

    code = "EMPTY_COMMAND"

    def __init__(self):
        super().__init__("empty command")


class UnsupportedCommandError(ParseError):
    """Raised when the first token is not a known verb."""

    code = "UNSUPPORTED_COMMAND"

    def __init__(self, verb: str):
        super().__init__("unsupported command")
        self.verb = verb


class NotEnoughArgumentsError(ParseError):
    """Raised when a known verb has fewer tokens than its minimum."""

    code = "NOT_ENOUGH_ARGUMENTS"

    def __init__(self, count: int, minimum: int):
        super().__init__("not enough arguments in command")
        self.count = count
        self.minimum = minimum


class MissingFlagError(ParseError):
    """Raised when one or more required flags never appear."""

    code = "MISSING_FLAG"

    def __init__(self, missing: Sequence[str]):
        super().__init__(f"required flag missing: {', '.join(missing)}")
        self.missing = list(missing)


class EmptyFlagValueError(ParseError):
    """Raised when every flag is present but one resolved to ''."""

    code = "EMPTY_FLAG_VALUE"

    def __init__(self):
        super().__init__("command contained empty flag input")


class MalformedCommandError(ParseError):
    """Raised when a flag has too few tokens after it to supply its value."""

    code = "MALFORMED"

    def __init__(self, flag: str):
        super().__init__(f"malformed command: {flag} is missing its value")
        self.flag = flag


class ComposeError(ValueError):
    """Base exception for emails that cannot be built from a valid command."""

    code = "COMPOSE_ERROR"


class TemplateError(ComposeError):
    """Raised when the body template does not take the three values."""

    code = "TEMPLATE_ERROR"


class InvalidAddressError(ComposeError):
    """Raised when an address or display name cannot go in a mail header.

    Covers non-ASCII addresses and values holding CR or LF, which would
    otherwise inject extra headers.
    """

    code = "INVALID_ADDRESS"
