# minishell

The front half of a small POSIX-style shell, as a Python library. It splits a
command line into tokens, expands `$` references, checks the operators, builds
a command tree, reads heredoc bodies and runs the built-in commands.

## Installing

```
pip install .
```

## What it handles

- Words, single quotes and double quotes, with backslash escapes
- `$NAME`, `$?` (the status you pass in) and `$$` (the process id)
- Pipes `|` and redirections `<`, `>`, `>>` and heredocs `<< END`
  (a quoted or backslash-prefixed delimiter turns off expansion)
- Builtins: `echo [-n]`, `cd`, `pwd`, `export`, `unset`, `env`, `exit`

## Modules

- `minishell.env` – `Environment`, an ordered table of variables.
  `Environment.from_envp(["KEY=VALUE", ...])` builds one; `get`, `set`,
  `remove`, `items` and `to_envp` work on it. A value of `None` marks a
  variable declared without a value.
- `minishell.expansion` – `expand_dollar(text, env, status)`.
- `minishell.tokens` – `tokenize(text, env, status)` returns a list of
  `Token(type, value)` with `TokenType` kinds; it raises
  `UnclosedQuoteError` for an unterminated quote. Also `unescape_unquoted`,
  `unescape_quoted` and `is_operator`.
- `minishell.syntax` – `check_syntax(tokens)` returns the tokens or raises
  `ShellSyntaxError` naming the offending token (`|`, `newline`, ...).
- `minishell.parser` – `parse_tokens(tokens)` builds a tree of `Command`,
  `Pipe` and `Redirection` nodes; `format_ast(node)` renders it as indented
  text; `remove_heredoc_files(node)` deletes heredoc temporary files.
- `minishell.heredoc` – `read_heredoc(delimiter, env, status, read_line)`
  reads lines until the delimiter or end of input. `read_line` is called with
  the prompt `"> "` and returns `None` at end of input; without it, `input()`
  is used.
- `minishell.heredoc_files` – `preprocess_heredocs(node, env, read_line)`
  reads every heredoc in a tree and writes each body to
  `/tmp/minishell_heredoc_<pid>_<n>`, setting the node's `heredoc_tmpfile`.
- `minishell.builtins` – `is_builtin(name)`, `run_builtin(args, env)` and
  the individual commands. `exit_command` returns `128` plus the exit code
  when the shell should stop, or `1` for too many arguments.
- `minishell.strutils` – character classes and `parse_long_long`, which
  raises `OverflowError` outside the 64-bit range.

## Example

```python
from minishell.builtins import run_builtin
from minishell.env import Environment
from minishell.parser import format_ast, parse_tokens
from minishell.syntax import check_syntax
from minishell.tokens import tokenize

env = Environment.from_envp(["HOME=/tmp", "NAME=world"])

tokens = check_syntax(tokenize('echo "hello $NAME" | wc -c > out.txt', env, 0))
print(format_ast(parse_tokens(tokens)))
# PIPE
#   COMMAND: echo hello world
#   REDIRECTION: > file: out.txt
#     COMMAND: wc -c

run_builtin(["export", "GREETING=hi"], env)
print(env.get("GREETING"))          # hi
run_builtin(["echo", "-n", "hi"], env)  # prints "hi" without a newline
```

## What it does not do

There is no interactive prompt and no `minishell` command. The package does
not run a parsed tree: external programs, pipes and redirections are not
executed, and no files are opened for `<`, `>` or `>>`. Only the builtins
actually run, through `minishell.builtins`.

## Tests

```
pip install .[test]
pytest
```