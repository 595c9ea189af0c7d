"""Tokenizer, syntax check, parser, heredoc reading and builtins of a small shell."""

__version__ = "0.1.0"

__all__ = [
    "builtins",
    "env",
    "expansion",
    "heredoc",
    "heredoc_files",
    "parser",
    "strutils",
    "syntax",
    "tokens",
]