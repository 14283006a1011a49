import pytest

from oiiashell.debug import format_env, format_token_list, token_type_name
from oiiashell.env import Environment
from oiiashell.lexer import lex
from oiiashell.tokens import Token, TokenList, TokenType


@pytest.mark.parametrize(
    "kind, name",
    [
        (TokenType.WORD, "WORD"),
        (TokenType.HEREDOC, "HEREDOC"),
        (TokenType.WS, "WHITESPACE"),
        (TokenType.NONE, "UNKNOWN"),
    ],
)
def test_token_type_name(kind, name):
    assert token_type_name(kind) == name


def test_format_token_list_line():
    tokens = TokenList([Token(TokenType.PIPE, "|")])
    assert format_token_list(tokens) == "Type: PIPE       | Text: |\n"


def test_format_token_list_missing_text():
    tokens = TokenList([Token(TokenType.WORD, None)])
    assert format_token_list(tokens).endswith("| Text: (null)\n")


def test_format_token_list_one_line_per_token():
    tokens = lex("echo hi | wc")
    lines = format_token_list(tokens).splitlines()
    assert len(lines) == len(tokens)
    assert all(line.startswith("Type: ") for line in lines)


def test_format_token_list_empty():
    assert format_token_list(TokenList()) == ""


def test_format_env_none():
    assert format_env(None) == "env is NULL\n"


def test_format_env_pairs():
    env = Environment([("A", "1"), ("B", None)])
    assert format_env(env) == (
        "Environment variables (2):\n[0] A=1\n[1] B=(null)\n"
    )