import pytest

from minishell.syntax import ShellSyntaxError, check_syntax
from minishell.tokens import tokenize


@pytest.mark.parametrize(
    "line",
    ["", "echo hi", "a | b | c", "ls | > out", "ls | < in", "cat << EOF", "ls >> log"],
)
def test_valid_lines_pass_through(line):
    tokens = tokenize(line)
    assert check_syntax(tokens) == tokens


@pytest.mark.parametrize(
    "line, offending",
    [
        ("| ls", "|"),
        ("ls |", "newline"),
        ("ls >", "newline"),
        ("ls > |", "|"),
        ("ls | | wc", "|"),
        ("ls | >", "newline"),
        ("ls | >>", ">>"),
        ("ls | > >> x", ">>"),
        ("ls | < | x", "|"),
        ("ls | <", "<"),
        ("ls | << x", "<<"),
        ("cat < < x", "<"),
    ],
)
def test_errors_name_offending_token(line, offending):
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax(tokenize(line))
    assert info.value.token == offending


def test_error_message():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax(tokenize("| ls"))
    assert str(info.value) == "syntax error near unexpected token `|'"


def test_is_value_error():
    with pytest.raises(ValueError):
        check_syntax(tokenize("echo >"))