"""Expansion of ``$`` parameters in a token list."""

from __future__ import annotations

import os
from typing import Optional

from oiiashell.chars import is_white_space, valid_key_length, will_eat
from oiiashell.env import Environment
from oiiashell.tokens import Token, TokenList, TokenType

LAST_STATUS = "8888"
SHELL_FLAGS = "himBHs"


def tokenize_value(value: str) -> TokenList:
    """Split *value* into alternating whitespace and word tokens."""
    tokens = TokenList()
    i = 0
    end = len(value)
    while i < end:
        start = i
        blank = is_white_space(value[i])
        while i < end and is_white_space(value[i]) == blank:
            i += 1
        kind = TokenType.WS if blank else TokenType.WORD
        tokens.append(Token(kind, value[start:i]))
    return tokens


def _insert_env_value(
    tokens: TokenList, dollar: Token, key: str, env: Environment
) -> None:
    value = env.get(key)
    dollar.text = value
    if value is None:
        return
    tokens.remove(dollar)
    tokens.insert_after(dollar.prev, tokenize_value(value))


def _expand_special(tokens: TokenList, dollar: Token, pid: int) -> None:
    nxt = dollar.next
    text = nxt.text or ""
    if nxt.type is TokenType.DOLLAR:
        dollar.text = str(pid)
    elif text.startswith("?"):
        dollar.text = LAST_STATUS
    elif text.startswith("-"):
        dollar.text = SHELL_FLAGS
    elif will_eat(text[:1]):
        dollar.text = text[1:]
    tokens.remove(nxt)


def _expand_word(tokens: TokenList, dollar: Token, env: Environment) -> None:
    text = dollar.next.text or ""
    length = valid_key_length(text)
    if length == len(text):
        _insert_env_value(tokens, dollar, text, env)
    else:
        _insert_env_value(tokens, dollar, text[:length], env)
        dollar.next.text = text[length:]
    tokens.remove(dollar.next)


def expand_dollar(
    tokens: TokenList,
    dollar: Optional[Token],
    env: Environment,
    pid: Optional[int] = None,
) -> None:
    """Expand the ``$`` token *dollar* together with the token after it.

    ``$$`` gives *pid* (the current process id by default), ``$?`` and ``$-``
    give fixed values, a digit or one of ``#@*!`` is dropped, a quote after
    the ``$`` removes it, and a name is replaced by its value split into
    word and whitespace tokens. A lone ``$`` becomes a plain word.
    """
    if dollar is None:
        return
    nxt = dollar.next
    if nxt is None:
        dollar.type = TokenType.WORD
        return
    head = (nxt.text or "")[:1]
    if nxt.type in (TokenType.DQUOTE, TokenType.QUOTE):
        tokens.remove(dollar)
    elif nxt.type is TokenType.DOLLAR or head in ("?", "-") or will_eat(head):
        _expand_special(tokens, dollar, os.getpid() if pid is None else pid)
    elif nxt.type is TokenType.WORD:
        _expand_word(tokens, dollar, env)
    dollar.type = TokenType.WORD