"""The interactive shell: read a line, tokenize it, print the tokens."""

from __future__ import annotations

import os
import signal
import sys
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Sequence

from oiiashell.debug import format_token_list
from oiiashell.env import Environment
from oiiashell.lexer import UnclosedQuoteError, lex
from oiiashell.tokens import TokenList

PROMPT = "\001\033[1;32m\002🐱 OIIA OIIA$\001\033[0m\002"
WHITESPACES = " \t\n\v\f\r"
TOKENS_HEADER = "-----TOKENS AFTER PARSE-----"


class Shell:
    """Shell state: the environment and the tokens of the current line."""

    def __init__(self, environ: Optional[Iterable[str]] = None) -> None:
        if environ is None:
            environ = [f"{key}={value}" for key, value in os.environ.items()]
        self.env = Environment.from_strings(environ)
        self.tokens = TokenList()

    def process(self, line: str) -> TokenList:
        """Trim *line*, tokenize it and return the tokens."""
        self.tokens = lex(line.strip(WHITESPACES))
        return self.tokens


@contextmanager
def _interactive_signals() -> Iterator[None]:
    """Ignore SIGQUIT while the prompt loop runs."""
    sigquit = getattr(signal, "SIGQUIT", None)
    if sigquit is None or threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(sigquit, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(sigquit, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the prompt loop until end of input. Arguments are ignored."""
    try:
        import readline  # noqa: F401  line editing and history for input()
    except ImportError:
        pass
    shell = Shell()
    with _interactive_signals():
        while True:
            try:
                line = input(PROMPT)
            except KeyboardInterrupt:
                print()
                continue
            except EOFError:
                break
            try:
                tokens = shell.process(line)
            except UnclosedQuoteError as exc:
                print(f"oiiashell: {exc}", file=sys.stderr)
                continue
            print(TOKENS_HEADER)
            print(format_token_list(tokens), end="")
            tokens.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())