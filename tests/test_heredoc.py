import pytest

from minishell.env import Environment
from minishell.heredoc import (
    is_delimiter,
    is_quoted_delimiter,
    read_heredoc,
    unquote_delimiter,
)


def _reader(lines):
    remaining = iter(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return next(remaining, None)

    read.prompts = prompts
    return read


@pytest.mark.parametrize(
    "delimiter, expected",
    [("'EOF'", True), ('"EOF"', True), ("\\EOF", True), ("\\", True), ("EOF", False), ('"', False), ("", False)],
)
def test_is_quoted_delimiter(delimiter, expected):
    assert is_quoted_delimiter(delimiter) is expected


@pytest.mark.parametrize(
    "delimiter, expected",
    [("'EOF'", "EOF"), ('"EOF"', "EOF"), ("\\EOF", "EOF"), ("EOF", "EOF"), ("", "")],
)
def test_unquote_delimiter(delimiter, expected):
    assert unquote_delimiter(delimiter) == expected


def test_is_delimiter():
    assert is_delimiter("EOF", "EOF") is True
    assert is_delimiter("EOF ", "EOF") is False
    assert is_delimiter("EO", "EOF") is False


def test_reads_until_delimiter_with_expansion():
    env = Environment([("USER", "alice")])
    reader = _reader(["hello $USER", "plain", "EOF", "after"])
    content = read_heredoc("EOF", env, 0, reader)
    assert content == "hello alice\nplain\n"
    assert reader.prompts == ["> "] * 3


def test_quoted_delimiter_disables_expansion():
    env = Environment([("USER", "alice")])
    content = read_heredoc("'EOF'", env, 0, _reader(["hello $USER", "EOF"]))
    assert content == "hello $USER\n"


def test_no_environment_disables_expansion():
    content = read_heredoc("EOF", None, 0, _reader(["$HOME", "EOF"]))
    assert content == "$HOME\n"


def test_status_expansion():
    content = read_heredoc("END", Environment(), 7, _reader(["$?", "END"]))
    assert content == "7\n"


def test_end_of_input_stops_reading():
    content = read_heredoc("EOF", None, 0, _reader(["one", "two"]))
    assert content == "one\ntwo\n"


def test_immediate_delimiter_gives_empty_body():
    assert read_heredoc("EOF", Environment(), 0, _reader(["EOF"])) == ""