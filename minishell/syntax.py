"""Checking a token stream for misplaced operators."""

from __future__ import annotations

from collections.abc import Iterable

from minishell.tokens import Token, TokenType, is_operator


class ShellSyntaxError(ValueError):
    """Raised when an operator appears where it is not allowed."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"syntax error near unexpected token `{token}'")


def _offending_token(token: Token, following: Token, after: Token | None) -> str | None:
    """Return the token text to report, or None if the sequence is acceptable."""
    if token.type is TokenType.PIPE and following.type in (
        TokenType.REDIR_OUT,
        TokenType.APPEND,
    ):
        if after is not None and after.type is TokenType.WORD:
            return None
        if after is not None and after.type is TokenType.APPEND:
            return ">>"
        return ">>" if following.type is TokenType.APPEND else "newline"
    if token.type is TokenType.PIPE and following.type is TokenType.REDIR_IN:
        if after is not None and after.type is TokenType.WORD:
            return None
        if after is not None and after.type is TokenType.PIPE:
            return "|"
        return "<"
    return following.value


def check_syntax(tokens: Iterable[Token]) -> list[Token]:
    """Return the tokens unchanged if they form a valid command line.

    Raises ShellSyntaxError naming the first offending token.
    """
    stream = list(tokens)
    if not stream:
        return stream
    if stream[0].type is TokenType.PIPE:
        raise ShellSyntaxError("|")
    for index, (token, following) in enumerate(zip(stream, stream[1:])):
        if not is_operator(token.type) or following.type is TokenType.WORD:
            continue
        after = stream[index + 2] if index + 2 < len(stream) else None
        offending = _offending_token(token, following, after)
        if offending is not None:
            raise ShellSyntaxError(offending)
    if is_operator(stream[-1].type):
        raise ShellSyntaxError("newline")
    return stream