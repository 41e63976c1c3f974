"""Command text tokenizing infrastructure.

Provides quote-aware tokenization for commands posted as issue comments.
"""

from infrastructure.parsing.exceptions import (
    CommandError,
    TokenizeError,
    UnclosedQuoteError,
)
from infrastructure.parsing.tokenizer import TokenizerState, tokenize

__all__ = [
    "CommandError",
    "TokenizeError",
    "UnclosedQuoteError",
    "TokenizerState",
    "tokenize",
]
