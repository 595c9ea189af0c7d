"""Building the syntax tree of a command line from its tokens."""

from __future__ import annotations

import contextlib
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Union

from minishell.tokens import Token, TokenType

_REDIRECTION_TYPES = frozenset(
    {TokenType.REDIR_IN, TokenType.REDIR_OUT, TokenType.APPEND, TokenType.HEREDOC}
)

_REDIRECTION_SYMBOLS = {
    TokenType.REDIR_IN: "< ",
    TokenType.REDIR_OUT: "> ",
    TokenType.APPEND: ">> ",
    TokenType.HEREDOC: "<< ",
}


def is_redirection(token_type: TokenType) -> bool:
    """Return True for the four redirection token types."""
    return token_type in _REDIRECTION_TYPES


def is_quoted_heredoc_delimiter(filename: str) -> bool:
    """Return True if a heredoc delimiter is quoted or starts with a backslash."""
    if len(filename) >= 2 and filename[0] == filename[-1] and filename[0] in "'\"":
        return True
    return filename.startswith("\\")


@dataclass
class Command:
    """A simple command: a program name followed by its arguments."""

    args: list[str] = field(default_factory=list)


@dataclass
class Pipe:
    """Two commands joined by a pipe."""

    left: Node
    right: Node


@dataclass
class Redirection:
    """A redirection applied to the node it wraps."""

    redir_type: TokenType
    filename: str
    child: Node | None = None
    heredoc_tmpfile: str | None = None
    is_quoted_delimiter: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.is_quoted_delimiter = (
            self.redir_type is TokenType.HEREDOC
            and is_quoted_heredoc_delimiter(self.filename)
        )


Node = Union[Command, Pipe, Redirection]


def _parse_segment(stream: list[Token], pos: int) -> tuple[Node, int]:
    """Parse tokens up to the next pipe; redirections wrap what came before them."""
    command = Command()
    node: Node = command
    while pos < len(stream) and stream[pos].type is not TokenType.PIPE:
        token = stream[pos]
        if is_redirection(token.type):
            if pos + 1 >= len(stream):
                raise ValueError(f"redirection {token.value!r} has no target")
            node = Redirection(token.type, stream[pos + 1].value, node)
            pos += 2
        else:
            if token.type is TokenType.WORD:
                command.args.append(token.value)
            pos += 1
    return node, pos


def parse_tokens(tokens: Iterable[Token]) -> Node | None:
    """Build a tree from ``tokens``; pipes associate to the left.

    Returns None when there are no tokens. Raises ValueError when a
    redirection has no target token.
    """
    stream = list(tokens)
    if not stream:
        return None
    node, pos = _parse_segment(stream, 0)
    while pos < len(stream) and stream[pos].type is TokenType.PIPE:
        right, pos = _parse_segment(stream, pos + 1)
        node = Pipe(node, right)
    return node


def _format_lines(node: Node | None, depth: int) -> Iterator[str]:
    if node is None:
        return
    indent = "  " * depth
    if isinstance(node, Command):
        yield indent + "COMMAND: " + "".join(f"{arg} " for arg in node.args) + "\n"
    elif isinstance(node, Pipe):
        yield indent + "PIPE\n"
        yield from _format_lines(node.left, depth + 1)
        yield from _format_lines(node.right, depth + 1)
    else:
        symbol = _REDIRECTION_SYMBOLS.get(node.redir_type, "")
        yield f"{indent}REDIRECTION: {symbol}file: {node.filename}\n"
        yield from _format_lines(node.child, depth + 1)


def format_ast(node: Node | None) -> str:
    """Render the tree as indented text, one node per line."""
    return "".join(_format_lines(node, 0))


def _walk(node: Node | None) -> Iterator[Node]:
    if node is None:
        return
    yield node
    if isinstance(node, Pipe):
        yield from _walk(node.left)
        yield from _walk(node.right)
    elif isinstance(node, Redirection):
        yield from _walk(node.child)


def remove_heredoc_files(node: Node | None) -> None:
    """Delete the temporary files written for heredocs in the tree."""
    for item in _walk(node):
        if (
            isinstance(item, Redirection)
            and item.redir_type is TokenType.HEREDOC
            and item.heredoc_tmpfile
        ):
            with contextlib.suppress(OSError):
                os.unlink(item.heredoc_tmpfile)
            item.heredoc_tmpfile = None