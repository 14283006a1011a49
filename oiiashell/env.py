"""An ordered environment of key/value pairs."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

Pair = tuple[str, Optional[str]]


class Environment:
    """Environment variables kept in insertion order.

    A value is None when the variable was defined without one.
    """

    def __init__(self, pairs: Iterable[Pair] = ()) -> None:
        self._pairs: list[Pair] = list(pairs)

    @classmethod
    def from_strings(cls, env_data: Iterable[str]) -> "Environment":
        """Build an environment from ``KEY=VALUE`` strings.

        Each string is split on ``=`` with empty fields dropped; the first
        field is the key and the second the value, so ``A=b=c`` gives ``b``
        and ``A=`` gives no value. Strings with no field at all are skipped.
        """
        pairs: list[Pair] = []
        for entry in env_data:
            fields = [f for f in entry.split("=") if f]
            if not fields:
                continue
            pairs.append((fields[0], fields[1] if len(fields) > 1 else None))
        return cls(pairs)

    def get(self, key: Optional[str]) -> Optional[str]:
        """Return the value of the first *key*, or "" when it is not set."""
        if key is None:
            return ""
        for name, value in self._pairs:
            if name == key:
                return value
        return ""

    def set(self, key: str, value: Optional[str]) -> None:
        """Replace the first *key*'s value, adding the pair if it is absent."""
        for i, (name, _) in enumerate(self._pairs):
            if name == key:
                self._pairs[i] = (name, value)
                return
        self.add(key, value)

    def add(self, key: str, value: Optional[str]) -> None:
        """Append a pair without looking for an existing key."""
        self._pairs.append((key, value))

    def remove(self, key: str) -> None:
        """Remove every pair named *key*."""
        self._pairs = [(n, v) for n, v in self._pairs if n != key]

    def items(self) -> list[Pair]:
        """Return the pairs in order."""
        return list(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._pairs)