"""Character classes and small string helpers used by the lexer and expander."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_EATEN_SPECIALS = frozenset("#@*!")
_DIGITS = frozenset("0123456789")
_KEY_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_KEY_BODY = _KEY_START | _DIGITS


def is_white_space(c: str) -> bool:
    """Return True for a space or one of the ASCII control whitespaces."""
    return c in _WHITESPACE and len(c) == 1


def will_eat(c: str) -> bool:
    """Return True if a ``$`` followed by *c* consumes exactly that character.

    Digits and the special parameters ``#``, ``@``, ``*`` and ``!`` are
    single-character parameters: ``$1abc`` expands ``$1`` and keeps ``abc``.
    """
    return len(c) == 1 and (c in _DIGITS or c in _EATEN_SPECIALS)


def valid_key_length(text: str | None) -> int:
    """Return the length of the variable name at the start of *text*.

    A name starts with an ASCII letter or underscore and continues with
    letters, digits and underscores. Zero means there is no valid name.
    """
    if not text or text[0] not in _KEY_START:
        return 0
    length = 1
    for ch in text[1:]:
        if ch not in _KEY_BODY:
            break
        length += 1
    return length


def str_change(dst: str, src: str, idx: int, length: int) -> str:
    """Return *dst* with the *length* characters at *idx* replaced by *src*."""
    if idx < 0 or length < 0:
        raise ValueError("index and length must not be negative")
    return dst[:idx] + src + dst[idx + length:]