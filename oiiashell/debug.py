"""Text dumps of token lists and environments."""

from __future__ import annotations

from typing import Iterable, Optional

from oiiashell.env import Environment
from oiiashell.tokens import Token, TokenType

_NAMES = {
    TokenType.WORD: "WORD",
    TokenType.PIPE: "PIPE",
    TokenType.HEREDOC: "HEREDOC",
    TokenType.APPEND: "APPEND",
    TokenType.QUOTE: "QUOTE",
    TokenType.DQUOTE: "DQUOTE",
    TokenType.DOLLAR: "DOLLAR",
    TokenType.INPUT: "INPUT",
    TokenType.OUTPUT: "OUTPUT",
    TokenType.WS: "WHITESPACE",
}

_MISSING = "(null)"


def token_type_name(token_type: TokenType) -> str:
    """Return the display name of a token type."""
    return _NAMES.get(token_type, "UNKNOWN")


def format_token_list(tokens: Iterable[Token]) -> str:
    """Return one ``Type: ... | Text: ...`` line per token."""
    return "".join(
        f"Type: {token_type_name(t.type):<10} | Text: "
        f"{_MISSING if t.text is None else t.text}\n"
        for t in tokens
    )


def format_env(env: Optional[Environment]) -> str:
    """Return a numbered listing of the environment's pairs."""
    if env is None:
        return "env is NULL\n"
    lines = [f"Environment variables ({len(env)}):\n"]
    lines.extend(
        f"[{i}] {key}={_MISSING if value is None else value}\n"
        for i, (key, value) in enumerate(env.items())
    )
    return "".join(lines)