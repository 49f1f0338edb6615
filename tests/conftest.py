import contextlib
import threading

import pytest
from blessed.keyboard import Keystroke


class ScriptedKeys:
    """Key source that hands out a fixed script, then reports no key forever."""

    def __init__(self, keys):
        self._keys = list(keys)
        self._lock = threading.Lock()
        self.polls = 0

    def poll(self):
        with self._lock:
            self.polls += 1
            if self._keys:
                return self._keys.pop(0)
            return None


class RecordingScreen:
    def __init__(self):
        self.shown = []

    def show(self, text):
        self.shown.append(text)


class FakeTerm:
    """Stands in for blessed.Terminal: scripted keystrokes, recorded mode changes."""

    home = "<home>"
    clear = "<clear>"

    def __init__(self, strokes=()):
        self.strokes = list(strokes)
        self.timeouts = []
        self.events = []

    def inkey(self, timeout=None):
        self.timeouts.append(timeout)
        return self.strokes.pop(0) if self.strokes else Keystroke("")

    @contextlib.contextmanager
    def cbreak(self):
        self.events.append("cbreak on")
        try:
            yield
        finally:
            self.events.append("cbreak off")

    @contextlib.contextmanager
    def hidden_cursor(self):
        self.events.append("cursor hidden")
        try:
            yield
        finally:
            self.events.append("cursor shown")


@pytest.fixture
def keys():
    return ScriptedKeys


@pytest.fixture
def screen():
    return RecordingScreen()


@pytest.fixture
def fake_term():
    return FakeTerm
