"""Approval command interpretation.

Turns the tokens of an issue comment such as::

    /approve --pm "pm@example.com" --name Jane Doe --email jane@example.com

into an ApprovalRequest. Flags may come in any order and each accepts a
single-dash spelling (``-pm``, ``-name``, ``-email``).

Names: a quoted name is always taken whole. An unquoted name is read as one
word when ``--email`` follows it directly, and as two words ("first last")
otherwise. Unquoted names of three or more words are not supported and will
be cut to their first two words; quote them instead.

A command needs at least 8 tokens, so a quoted or one-word name must be
followed by one more token (usually ``skip``) to be accepted.
"""

from typing import Sequence

from infrastructure.parsing import tokenize
from modules.approvals.exceptions import (
    EmptyCommandError,
    EmptyFlagValueError,
    MalformedCommandError,
    MissingFlagError,
    NotEnoughArgumentsError,
    UnsupportedCommandError,
)
from modules.approvals.models import ApprovalRequest

APPROVE_VERB = "/approve"

# verb + three flag/value pairs, plus the surname of an unquoted name
MIN_APPROVE_TOKENS = 8

PM_FLAGS = ("--pm", "-pm")
NAME_FLAGS = ("--name", "-name")
EMAIL_FLAGS = ("--email", "-email")


def _value_at(tokens: Sequence[str], index: int, flag: str) -> str:
    if index >= len(tokens):
        raise MalformedCommandError(flag)
    return tokens[index]


def parse_approval(tokens: Sequence[str]) -> ApprovalRequest:
    """Interpret a tokenized ``/approve`` command.

    Every position is inspected once, left to right. Value tokens are
    inspected too, and when a flag appears twice the later value wins.

    Args:
        tokens: Tokens produced by ``tokenize``.

    Returns:
        ApprovalRequest with all three fields populated.

    Raises:
        EmptyCommandError: If there are no tokens.
        UnsupportedCommandError: If the verb is not ``/approve``.
        NotEnoughArgumentsError: If there are fewer than 8 tokens.
        MalformedCommandError: If a flag sits too close to the end to have
            its value.
        MissingFlagError: If --pm, --name or --email never appears.
        EmptyFlagValueError: If a flag's value is an empty string.
    """
    if not tokens:
        raise EmptyCommandError()

    verb = tokens[0]
    if verb != APPROVE_VERB:
        raise UnsupportedCommandError(verb)

    if len(tokens) < MIN_APPROVE_TOKENS:
        raise NotEnoughArgumentsError(len(tokens), MIN_APPROVE_TOKENS)

    approver = user = email = None

    for i, token in enumerate(tokens):
        if token in PM_FLAGS:
            approver = _value_at(tokens, i + 1, token)
        elif token in NAME_FLAGS:
            lookahead = _value_at(tokens, i + 2, token)
            if lookahead in EMAIL_FLAGS:
                user = tokens[i + 1]
            else:
                user = f"{tokens[i + 1]} {lookahead}"
        elif token in EMAIL_FLAGS:
            email = _value_at(tokens, i + 1, token)

    missing = [
        flag
        for flag, value in (
            (PM_FLAGS[0], approver),
            (NAME_FLAGS[0], user),
            (EMAIL_FLAGS[0], email),
        )
        if value is None
    ]
    if missing:
        raise MissingFlagError(missing)

    if not approver or not user or not email:
        raise EmptyFlagValueError()

    return ApprovalRequest(approver_email=approver, user_name=user, user_email=email)


def parse_command(text: str) -> ApprovalRequest:
    """Tokenize and interpret a raw comment body.

    Raises:
        CommandError: Any tokenizing or interpretation failure.
    """
    return parse_approval(tokenize(text))
