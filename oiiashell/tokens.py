"""Tokens and the doubly linked token list the lexer and expander edit in place."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, Optional, Union


class TokenType(Enum):
    """Kinds of lexical token."""

    WORD = auto()
    PIPE = auto()
    HEREDOC = auto()
    APPEND = auto()
    QUOTE = auto()
    DQUOTE = auto()
    DOLLAR = auto()
    INPUT = auto()
    OUTPUT = auto()
    WS = auto()
    NONE = auto()


@dataclass(eq=False)
class Token:
    """A token with links to its neighbours in a :class:`TokenList`."""

    type: TokenType
    text: Optional[str] = None
    prev: Optional["Token"] = field(default=None, repr=False)
    next: Optional["Token"] = field(default=None, repr=False)


class TokenList:
    """A doubly linked list of tokens.

    A removed token keeps its own ``prev`` and ``next`` links, so code walking
    the list can still step past a token it has just unlinked.
    """

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self.head: Optional[Token] = None
        for token in tokens:
            self.append(token)

    def append(self, token: Token) -> None:
        """Link *token* after the last token."""
        last = self.last()
        if last is None:
            self.head = token
            return
        last.next = token
        token.prev = last

    def last(self) -> Optional[Token]:
        """Return the last token, or None if the list is empty."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def remove(self, token: Optional[Token]) -> None:
        """Unlink *token*, leaving the token's own links untouched."""
        if self.head is None or token is None:
            return
        if token.prev is not None:
            token.prev.next = token.next
        else:
            self.head = token.next
        if self.head is token:
            self.head = token.next
        if token.next is not None:
            token.next.prev = token.prev

    def insert_after(
        self, pos: Optional[Token], other: Union["TokenList", Token, None]
    ) -> None:
        """Splice *other* in after *pos*, or at the front when *pos* is None.

        *other* is another list, whose tokens move into this one, or the
        first token of a linked chain.
        """
        if isinstance(other, TokenList):
            first = other.head
            other.head = None
        else:
            first = other
        if first is None:
            return
        new_last = first
        while new_last.next is not None:
            new_last = new_last.next
        if self.head is None or pos is None:
            if self.head is not None:
                new_last.next = self.head
                self.head.prev = new_last
            self.head = first
            first.prev = None
            return
        new_last.next = pos.next
        if pos.next is not None:
            pos.next.prev = new_last
        pos.next = first
        first.prev = pos

    def clear(self) -> None:
        """Empty the list and reset every token it held."""
        node = self.head
        while node is not None:
            following = node.next
            node.next = None
            node.prev = None
            node.text = None
            node.type = TokenType.NONE
            node = following
        self.head = None

    def __iter__(self) -> Iterator[Token]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)