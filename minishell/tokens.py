"""Splitting a command line into words and operator tokens."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from minishell.env import Environment
from minishell.expansion import expand_dollar
from minishell.strutils import is_space, is_special_char

_QUOTES = "'\""
_UNQUOTED_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_QUOTED_ESCAPE = re.compile(r'\\(["\\`])')


class TokenType(enum.Enum):
    """Kinds of tokens produced by the tokenizer."""

    WORD = enum.auto()
    PIPE = enum.auto()
    REDIR_IN = enum.auto()
    REDIR_OUT = enum.auto()
    APPEND = enum.auto()
    HEREDOC = enum.auto()
    EOF = enum.auto()


_OPERATOR_TYPES = frozenset(
    {
        TokenType.PIPE,
        TokenType.REDIR_IN,
        TokenType.REDIR_OUT,
        TokenType.APPEND,
        TokenType.HEREDOC,
    }
)


@dataclass(frozen=True)
class Token:
    """A single token: its kind and its text."""

    type: TokenType
    value: str


class UnclosedQuoteError(ValueError):
    """Raised when a quoted section has no closing quote."""

    def __init__(self, quote: str) -> None:
        self.quote = quote
        kind = "single" if quote == "'" else "double"
        super().__init__(f"minishell: syntax error: unclosed {kind} quote")


def is_operator(token_type: TokenType) -> bool:
    """Return True for pipe and redirection token types."""
    return token_type in _OPERATOR_TYPES


def unescape_unquoted(text: str) -> str:
    """Drop each backslash and keep the character it escapes.

    A trailing lone backslash is kept.
    """
    return _UNQUOTED_ESCAPE.sub(r"\1", text)


def unescape_quoted(text: str) -> str:
    """Resolve backslash escapes as inside double quotes.

    Only ``\\"``, ``\\\\`` and ``\\``` are escapes; any other backslash is kept.
    """
    return _QUOTED_ESCAPE.sub(r"\1", text)


def _is_escaped(text: str, pos: int) -> bool:
    before = text[:pos]
    backslashes = len(before) - len(before.rstrip("\\"))
    return backslashes % 2 == 1


def _read_quoted(
    text: str, pos: int, env: Environment | None, status: int
) -> tuple[str, int]:
    """Read a quoted section starting at ``pos``; return its content and the next position."""
    quote = text[pos]
    start = pos + 1
    if quote == "'":
        end = text.find("'", start)
        if end == -1:
            raise UnclosedQuoteError(quote)
        return text[start:end], end + 1
    end = start
    while end < len(text):
        if text[end] == '"' and not _is_escaped(text, end):
            break
        end += 1
    else:
        raise UnclosedQuoteError(quote)
    return expand_dollar(text[start:end], env, status), end + 1


def _read_plain(text: str, pos: int) -> tuple[str, int]:
    """Read an unquoted run; ``=`` followed by a quote swallows the quoted value raw."""
    start = pos
    length = len(text)
    while pos < length:
        char = text[pos]
        if is_space(char) or char in _QUOTES or is_special_char(char):
            break
        if char == "=" and pos + 1 < length and text[pos + 1] in _QUOTES:
            quote = text[pos + 1]
            pos += 2
            while pos < length and text[pos] != quote:
                pos += 1
            if pos < length:
                pos += 1
            break
        pos += 1
    return text[start:pos], pos


def _read_operator(text: str, pos: int) -> tuple[Token, int]:
    char = text[pos]
    doubled = pos + 1 < len(text) and text[pos + 1] == char
    if char == "|":
        return Token(TokenType.PIPE, "|"), pos + 1
    if char == "<":
        if doubled:
            return Token(TokenType.HEREDOC, "<<"), pos + 2
        return Token(TokenType.REDIR_IN, "<"), pos + 1
    if doubled:
        return Token(TokenType.APPEND, ">>"), pos + 2
    return Token(TokenType.REDIR_OUT, ">"), pos + 1


def tokenize(text: str, env: Environment | None = None, status: int = 0) -> list[Token]:
    """Split ``text`` into tokens, expanding ``$`` references.

    Adjacent unquoted and quoted parts join into one word; words that come
    out empty are dropped. Raises UnclosedQuoteError for an unterminated quote.
    """
    tokens: list[Token] = []
    word = ""

    def flush() -> None:
        nonlocal word
        if word:
            tokens.append(Token(TokenType.WORD, word))
        word = ""

    pos = 0
    while pos < len(text):
        char = text[pos]
        if is_space(char):
            flush()
            pos += 1
        elif char in _QUOTES:
            part, pos = _read_quoted(text, pos, env, status)
            word += part
        elif is_special_char(char):
            flush()
            token, pos = _read_operator(text, pos)
            tokens.append(token)
        else:
            part, pos = _read_plain(text, pos)
            word += expand_dollar(part, env, status)
    flush()
    return tokens