from __future__ import annotations

import contextlib
import sys
from typing import Iterator, Optional

import blessed


class TerminalKeys:
    """Non-blocking key source over a blessed terminal."""

    def __init__(self, term: blessed.Terminal):
        self.term = term

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[TerminalKeys]:
        # cbreak turns off echo and line buffering; both context managers
        # restore the terminal even when the body raises.
        with self.term.cbreak(), self.term.hidden_cursor():
            yield self

    def poll(self) -> Optional[str]:
        key = self.term.inkey(timeout=0)
        if not key:
            return None
        if key.is_sequence:
            return key.name
        return str(key)


class TerminalScreen:
    def __init__(self, term: blessed.Terminal, out=None):
        self.term = term
        self.out = out if out is not None else sys.stdout

    def show(self, text: str) -> None:
        self.out.write(self.term.home + self.term.clear + text)
        self.out.flush()
