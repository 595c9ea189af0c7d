"""Writing heredoc bodies to temporary files before a command line runs."""

from __future__ import annotations

import contextlib
import os
from collections.abc import Iterator

from minishell.env import Environment
from minishell.heredoc import ReadLine, read_heredoc
from minishell.parser import Command, Node, Pipe, Redirection
from minishell.tokens import TokenType

HEREDOC_PREFIX = "/tmp/minishell_heredoc_"


def heredoc_filename(pid: int, counter: int) -> str:
    """Return the temporary file path for heredoc number ``counter`` of process ``pid``."""
    return f"{HEREDOC_PREFIX}{pid}_{counter}"


def write_heredoc_file(content: str, counter: int) -> str:
    """Write ``content`` to a new private file and return its path.

    The file is created exclusively with mode 0600; raises OSError if it
    already exists or cannot be written.
    """
    filename = heredoc_filename(os.getpid(), counter)
    fd = os.open(filename, os.O_CREAT | os.O_EXCL | os.O_RDWR, 0o600)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
    except OSError:
        with contextlib.suppress(OSError):
            os.unlink(filename)
        raise
    return filename


def _walk(node: Node | None) -> Iterator[Node]:
    if node is None or isinstance(node, Command):
        if node is not None:
            yield node
        return
    yield node
    if isinstance(node, Pipe):
        yield from _walk(node.left)
        yield from _walk(node.right)
    else:
        yield from _walk(node.child)


def preprocess_heredocs(
    node: Node | None,
    env: Environment | None,
    read_line: ReadLine | None = None,
) -> None:
    """Read every heredoc in the tree and store its body in a temporary file.

    Heredocs are read in tree order; each node's ``heredoc_tmpfile`` is set
    to the file written, or None if the file could not be created.
    """
    counter = 0
    for item in _walk(node):
        if not isinstance(item, Redirection) or item.redir_type is not TokenType.HEREDOC:
            continue
        content = read_heredoc(item.filename, env, 0, read_line)
        try:
            item.heredoc_tmpfile = write_heredoc_file(content, counter)
        except OSError:
            item.heredoc_tmpfile = None
        counter += 1