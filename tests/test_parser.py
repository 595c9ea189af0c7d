import pytest

from minishell.parser import (
    Command,
    Pipe,
    Redirection,
    format_ast,
    is_quoted_heredoc_delimiter,
    is_redirection,
    parse_tokens,
    remove_heredoc_files,
)
from minishell.tokens import Token, TokenType, tokenize


def test_empty_tokens_give_none():
    assert parse_tokens([]) is None


def test_simple_command():
    assert parse_tokens(tokenize("echo hi there")) == Command(["echo", "hi", "there"])


def test_pipes_associate_left():
    tree = parse_tokens(tokenize("a | b | c"))
    assert isinstance(tree, Pipe)
    assert tree.right == Command(["c"])
    assert isinstance(tree.left, Pipe)
    assert tree.left.left == Command(["a"])
    assert tree.left.right == Command(["b"])


def test_redirections_wrap_in_order():
    tree = parse_tokens(tokenize("cat < in > out"))
    assert isinstance(tree, Redirection)
    assert tree.redir_type is TokenType.REDIR_OUT
    assert tree.filename == "out"
    inner = tree.child
    assert isinstance(inner, Redirection)
    assert inner.redir_type is TokenType.REDIR_IN
    assert inner.filename == "in"
    assert inner.child == Command(["cat"])


def test_redirection_before_words():
    tree = parse_tokens(tokenize("< in cat -n"))
    assert isinstance(tree, Redirection)
    assert tree.child == Command(["cat", "-n"])


def test_empty_segment_after_pipe():
    tree = parse_tokens(tokenize("ls |"))
    assert isinstance(tree, Pipe)
    assert tree.right == Command([])


def test_missing_redirection_target():
    with pytest.raises(ValueError):
        parse_tokens([Token(TokenType.WORD, "ls"), Token(TokenType.REDIR_OUT, ">")])


@pytest.mark.parametrize(
    "token_type, expected",
    [
        (TokenType.REDIR_IN, True),
        (TokenType.REDIR_OUT, True),
        (TokenType.APPEND, True),
        (TokenType.HEREDOC, True),
        (TokenType.PIPE, False),
        (TokenType.WORD, False),
    ],
)
def test_is_redirection(token_type, expected):
    assert is_redirection(token_type) is expected


@pytest.mark.parametrize(
    "name, expected",
    [("'EOF'", True), ('"EOF"', True), ("\\EOF", True), ("EOF", False), ("'", False), ("", False)],
)
def test_is_quoted_heredoc_delimiter(name, expected):
    assert is_quoted_heredoc_delimiter(name) is expected


def test_quoted_flag_only_for_heredoc():
    assert Redirection(TokenType.HEREDOC, "'EOF'").is_quoted_delimiter is True
    assert Redirection(TokenType.HEREDOC, "EOF").is_quoted_delimiter is False
    assert Redirection(TokenType.REDIR_OUT, "'EOF'").is_quoted_delimiter is False


def test_format_ast():
    tree = parse_tokens(tokenize("ls -l | wc > out"))
    expected = "PIPE\n  COMMAND: ls -l \n  REDIRECTION: > file: out\n    COMMAND: wc \n"
    assert format_ast(tree) == expected


def test_format_ast_none():
    assert format_ast(None) == ""


def test_remove_heredoc_files(tmp_path):
    body = tmp_path / "heredoc"
    body.write_text("x\n")
    node = Redirection(TokenType.HEREDOC, "EOF", Command(["cat"]), heredoc_tmpfile=str(body))
    tree = Pipe(node, Command(["wc"]))
    remove_heredoc_files(tree)
    assert not body.exists()
    assert node.heredoc_tmpfile is None