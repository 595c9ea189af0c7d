"""Commands built into the shell: echo, cd, pwd, export, unset, env and exit."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence

from minishell.env import Environment
from minishell.strutils import is_name_char, is_name_start, parse_long_long

EXIT_BASE = 128
"""Offset added to an exit status to tell the shell loop to stop."""

_DIGITS = frozenset("0123456789")


def _out(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _err(text: str) -> None:
    sys.stderr.write(text)
    sys.stderr.flush()


def is_valid_key(key: str) -> bool:
    """Return True if ``key`` starts a valid ``export`` argument.

    Only the part before the first ``=`` or ``+`` has to be a variable name.
    """
    if not key or not is_name_start(key[0]):
        return False
    for char in key:
        if char in "=+":
            break
        if not is_name_char(char):
            return False
    return True


def is_valid_unset_key(key: str) -> bool:
    """Return True if the whole of ``key`` is a variable name."""
    if not key or not is_name_start(key[0]):
        return False
    return all(is_name_char(char) for char in key)


def extract_key(arg: str) -> str:
    """Return the name part of an ``export`` argument.

    The name ends at the first ``+=`` if there is one, otherwise at the
    first ``=``; without either the whole argument is the name.
    """
    plus_equal = arg.find("+=")
    if plus_equal != -1:
        return arg[:plus_equal]
    equal = arg.find("=")
    if equal != -1:
        return arg[:equal]
    return arg


def trim_quotes(value: str) -> str:
    """Remove one pair of matching single or double quotes around ``value``."""
    if value and value[0] in "'\"" and value[-1] == value[0]:
        return value[1:-1]
    return value


def export_lines(env: Environment) -> list[str]:
    """Return the sorted ``declare -x`` lines that ``export`` prints."""
    lines = [
        f'declare -x {key}="{value}"' if value is not None else f"declare -x {key}"
        for key, value in env.items()
    ]
    return sorted(lines)


def echo(args: Sequence[str]) -> int:
    """Print the arguments separated by spaces; leading ``-n`` flags drop the newline."""
    words = list(args[1:])
    newline = True
    while words and _is_n_flag(words[0]):
        newline = False
        words.pop(0)
    _out(" ".join(words) + ("\n" if newline else ""))
    return 0


def _is_n_flag(arg: str) -> bool:
    return len(arg) > 1 and arg[0] == "-" and set(arg[1:]) == {"n"}


def pwd() -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _err(f"pwd: {exc.strerror}\n")
        return 1
    _out(cwd + "\n")
    return 0


def cd(args: Sequence[str], env: Environment) -> int:
    """Change directory, to ``HOME`` without an argument, and update PWD and OLDPWD."""
    if len(args) > 2:
        _err("cd: too many arguments\n")
        return 1
    if len(args) < 2 or not args[1]:
        path = env.get("HOME")
        if path is None:
            _err("cd: HOME not set\n")
            return 1
    else:
        path = args[1]
    old_path = env.get("PWD")
    try:
        os.chdir(path)
    except OSError as exc:
        _err(f"cd: {exc.strerror}\n")
        return 1
    try:
        new_path = os.getcwd()
    except OSError as exc:
        _err(f"cd: getcwd: {exc.strerror}\n")
        return 1
    env.set("PWD", new_path)
    if old_path is not None:
        env.set("OLDPWD", old_path)
    return 0


def env_command(args: Sequence[str], env: Environment) -> int:
    """Print every variable that has a value as ``KEY=VALUE``."""
    if len(args) > 1:
        _out("env: too many arguments\n")
        return 1
    _out("".join(f"{key}={value}\n" for key, value in env.items() if value is not None))
    return 0


def _update_key_value(arg: str, key: str, env: Environment) -> None:
    plus_equal = arg.find("+=")
    equal = arg.find("=")
    if plus_equal != -1:
        addition = trim_quotes(arg[plus_equal + 2 :])
        existing = env.get(key)
        env.set(key, addition if existing is None else existing + addition)
    elif equal != -1:
        env.set(key, trim_quotes(arg[equal + 1 :]))
    elif env.get(arg) is None:
        env.set(arg, None)


def export(args: Sequence[str], env: Environment) -> int:
    """Set or declare variables; without arguments list them all."""
    if len(args) < 2:
        for line in export_lines(env):
            _out(line + "\n")
        return 0
    status = 0
    for arg in args[1:]:
        key = extract_key(arg)
        if not is_valid_key(arg):
            _err(f"export: `{arg}`: not a valid identifier\n")
            status = 1
            continue
        _update_key_value(arg, key, env)
    return status


def unset(args: Sequence[str], env: Environment) -> int:
    """Remove the named variables; invalid names are reported and skipped."""
    status = 0
    for arg in args[1:]:
        if not is_valid_unset_key(arg):
            _err(f"unset: `{arg}`: not a valid identifier\n")
            status = 1
        else:
            env.remove(arg)
    return status


def _is_number(text: str) -> bool:
    if not text:
        return False
    digits = text[1:] if text[0] in "+-" else text
    return all(char in _DIGITS for char in digits)


def _numeric_error(arg: str) -> int:
    _err(f"exit\nbash: exit: {arg}: numeric argument required\n")
    return EXIT_BASE + 2


def exit_command(args: Sequence[str]) -> int:
    """Ask the shell to exit.

    Returns ``128`` plus the exit code when the shell should stop, or 1 when
    there are too many arguments and the shell keeps running.
    """
    if len(args) < 2:
        return EXIT_BASE
    if len(args) > 2:
        _err("bash: exit: too many arguments\n")
        return 1
    if not _is_number(args[1]):
        return _numeric_error(args[1])
    try:
        code = parse_long_long(args[1])
    except OverflowError:
        return _numeric_error(args[1])
    _err("exit\n")
    return EXIT_BASE + code % 256


_BUILTINS: dict[str, Callable[[Sequence[str], Environment], int]] = {
    "echo": lambda args, env: echo(args),
    "pwd": lambda args, env: pwd(),
    "cd": cd,
    "env": lambda args, env: env_command(args, env),
    "export": export,
    "unset": unset,
    "exit": lambda args, env: exit_command(args),
}


def is_builtin(name: str | None) -> bool:
    """Return True if ``name`` is one of the built-in commands."""
    return name in _BUILTINS


def run_builtin(args: Sequence[str], env: Environment) -> int:
    """Run the built-in named by ``args[0]`` and return its status."""
    if not args:
        return 1
    handler = _BUILTINS.get(args[0])
    if handler is None:
        return 0
    return handler(args, env)