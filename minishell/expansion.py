"""Expansion of ``$`` references in words."""

from __future__ import annotations

import os
import re

from minishell.env import Environment

_DOLLAR = re.compile(r"\$(\$|\?|[A-Za-z_][A-Za-z0-9_]*)?")


def expand_dollar(text: str, env: Environment | None, status: int) -> str:
    """Expand ``$$``, ``$?`` and ``$NAME`` in ``text``.

    ``$$`` becomes the process id, ``$?`` the last exit status, and ``$NAME``
    the variable's value or nothing if it is unset. A ``$`` followed by
    anything else, or at the end, stays literal.
    """

    def replace(match: re.Match[str]) -> str:
        ref = match.group(1)
        if ref is None:
            return "$"
        if ref == "$":
            return str(os.getpid())
        if ref == "?":
            return str(status)
        if env is None:
            return ""
        value = env.get(ref)
        return "" if value is None else value

    return _DOLLAR.sub(replace, text)