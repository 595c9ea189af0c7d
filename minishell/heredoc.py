"""Reading the body of a heredoc."""

from __future__ import annotations

from collections.abc import Callable

from minishell.env import Environment
from minishell.expansion import expand_dollar

ReadLine = Callable[[str], "str | None"]


def is_quoted_delimiter(delimiter: str) -> bool:
    """Return True if the delimiter disables expansion of the heredoc body."""
    if not delimiter:
        return False
    if delimiter.startswith("\\"):
        return True
    if len(delimiter) < 2:
        return False
    return delimiter[0] == delimiter[-1] and delimiter[0] in "'\""


def unquote_delimiter(delimiter: str) -> str:
    """Strip a leading backslash or the surrounding quotes from a delimiter."""
    if delimiter.startswith("\\"):
        return delimiter[1:]
    if not is_quoted_delimiter(delimiter):
        return delimiter
    return delimiter[1:-1]


def is_delimiter(line: str, delimiter: str) -> bool:
    """Return True if ``line`` ends the heredoc."""
    return line == delimiter


def _prompt_input(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def read_heredoc(
    delimiter: str,
    env: Environment | None,
    status: int = 0,
    read_line: ReadLine | None = None,
) -> str:
    """Read lines until the delimiter or end of input; return them newline-terminated.

    ``read_line`` is called with the prompt and returns None at end of input.
    ``$`` references are expanded unless the delimiter is quoted or ``env`` is None.
    """
    reader = read_line if read_line is not None else _prompt_input
    should_expand = env is not None and not is_quoted_delimiter(delimiter)
    end = unquote_delimiter(delimiter)
    parts: list[str] = []
    while True:
        line = reader("> ")
        if line is None or is_delimiter(line, end):
            break
        if should_expand:
            line = expand_dollar(line, env, status)
        parts.append(line + "\n")
    return "".join(parts)