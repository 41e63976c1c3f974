"""Quote-aware tokenizer for command text.

Splits a comment line into shell-like tokens:
- Whitespace (space or tab) separates tokens
- Single or double quotes group text, including whitespace, into one token
- A backslash outside quotes takes the next character literally

There are no pipes, variables or globs. Newlines are ordinary characters.
"""

from enum import Enum
from typing import List

from infrastructure.parsing.exceptions import UnclosedQuoteError

QUOTE_CHARS = ('"', "'")
SEPARATORS = (" ", "\t")
ESCAPE_CHAR = "\\"


class TokenizerState(str, Enum):
    """Position of the tokenizer relative to the token being built."""

    START = "start"
    IN_TOKEN = "in_token"
    IN_QUOTE = "in_quote"


def tokenize(line: str, escape_first: bool = True) -> List[str]:
    """Tokenize command text respecting quotes and escapes.

    The scan is a single pass over the line with no backtracking. An
    escaped character is appended to the current buffer without changing
    the state, so it may start or continue a token. Inside a quote,
    backslashes are literal and only the matching delimiter closes the
    quote. A closing quote always emits a token, even an empty one.

    ``escape_first`` is on by default: the first character of the line is
    always taken literally, so a leading quote or whitespace does not act
    as one. Commands written as ``/approve ...`` are unaffected because the
    literal ``/`` simply starts the verb token. Turning it off changes how
    lines with a leading quote, backslash or blank are split.

    Args:
        line: Raw command text.
        escape_first: Take the first character literally.

    Returns:
        Tokens in the order encountered, with quotes and escapes removed.

    Raises:
        UnclosedQuoteError: If the line ends inside a quote.

    Example:
        >>> tokenize('/approve --pm "a@b.com" --name "Jane Doe"')
        ['/approve', '--pm', 'a@b.com', '--name', 'Jane Doe']

        >>> tokenize("--message ''")
        ['--message', '']
    """
    tokens: List[str] = []
    current: List[str] = []
    state = TokenizerState.START
    quote_char = ""
    escaped = escape_first

    for char in line:
        if state == TokenizerState.IN_QUOTE:
            if char != quote_char:
                current.append(char)
            else:
                tokens.append("".join(current))
                current = []
                state = TokenizerState.START
            continue

        if escaped:
            current.append(char)
            escaped = False
            continue

        if char == ESCAPE_CHAR:
            escaped = True
            continue

        if char in QUOTE_CHARS:
            state = TokenizerState.IN_QUOTE
            quote_char = char
            continue

        if char in SEPARATORS:
            if state == TokenizerState.IN_TOKEN:
                tokens.append("".join(current))
                current = []
                state = TokenizerState.START
            continue

        current.append(char)
        state = TokenizerState.IN_TOKEN

    if state == TokenizerState.IN_QUOTE:
        raise UnclosedQuoteError(line)

    if current:
        tokens.append("".join(current))

    return tokens
