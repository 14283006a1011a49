"""Split a command line into tokens and fold single-quoted text into words."""

from __future__ import annotations

from typing import Optional

from oiiashell.chars import is_white_space
from oiiashell.tokens import Token, TokenList, TokenType

_SINGLE_CHAR_TYPES = {
    "'": TokenType.QUOTE,
    '"': TokenType.DQUOTE,
    "$": TokenType.DOLLAR,
    "|": TokenType.PIPE,
}


class UnclosedQuoteError(ValueError):
    """Raised when a quote has no matching closing quote."""

    def __init__(self, quote: Optional[str]) -> None:
        super().__init__(f"unclosed quote: {quote}")
        self.quote = quote


def identify_token(text: Optional[str], i: int) -> TokenType:
    """Return the type of the token that starts at position *i* of *text*."""
    if text is None:
        return TokenType.NONE
    c = text[i:i + 1]
    if c in _SINGLE_CHAR_TYPES:
        return _SINGLE_CHAR_TYPES[c]
    if c and is_white_space(c):
        return TokenType.WS
    following = text[i + 1:i + 2]
    if c == "<":
        return TokenType.HEREDOC if following == "<" else TokenType.INPUT
    if c == ">":
        return TokenType.APPEND if following == ">" else TokenType.OUTPUT
    return TokenType.WORD


def lex(cmd: str) -> TokenList:
    """Split *cmd* into tokens, then merge single-quoted spans."""
    tokens = TokenList()
    i = 0
    end = len(cmd)
    while i < end:
        kind = identify_token(cmd, i)
        if kind is TokenType.WORD:
            start = i
            while i < end and identify_token(cmd, i) is TokenType.WORD:
                i += 1
            tokens.append(Token(kind, cmd[start:i]))
        elif kind in (TokenType.HEREDOC, TokenType.APPEND):
            tokens.append(Token(kind, cmd[i:i + 2]))
            i += 2
        else:
            tokens.append(Token(kind, cmd[i]))
            i += 1
    process_tokens(tokens)
    return tokens


def process_tokens(tokens: TokenList) -> None:
    """Fold the contents of every single-quoted span into one word."""
    node = tokens.head
    while node is not None:
        if node.type is TokenType.QUOTE:
            node = process_quote_token(tokens, node)
        node = node.next


def process_quote_token(tokens: TokenList, token: Token) -> Token:
    """Replace the tokens between *token* and its closing quote by one word.

    Both quote tokens stay in the list. The word's text is the inner texts
    joined, or None when the quotes are empty. Returns the closing quote.
    """
    closing = token.next
    while closing is not None and closing.type is not token.type:
        closing = closing.next
    if closing is None:
        raise UnclosedQuoteError(token.text)

    inner: list[Token] = []
    node = token.next
    while node is not closing:
        inner.append(node)
        node = node.next

    value = "".join(t.text or "" for t in inner) if inner else None
    for t in inner:
        t.text = None
        tokens.remove(t)

    word = Token(TokenType.WORD, value, prev=token, next=closing)
    token.next = word
    closing.prev = word
    return closing