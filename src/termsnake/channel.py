from __future__ import annotations

import logging
import threading

from .state import Direction

logger = logging.getLogger(__name__)


class DirectionChannel:
    """Single-slot, last-write-wins holder for the steering direction.

    Shared between the input thread (writer) and the game loop (reader).
    The lock is only ever held for one read or one read-modify-write.
    """

    def __init__(self, initial: Direction = Direction.STOPPED):
        self._lock = threading.Lock()
        self._direction = initial
        self._closed = False

    def get(self) -> Direction:
        with self._lock:
            return self._direction

    def set(self, direction: Direction) -> None:
        """Unconditional write. Reversal filtering is done by `steer`, not here."""
        with self._lock:
            if not self._closed:
                self._direction = direction

    def steer(self, requested: Direction) -> bool:
        """Store `requested` unless it reverses the stored direction.

        Returns True if the stored direction is now `requested`.
        """
        with self._lock:
            if self._closed or requested.is_reversal_of(self._direction):
                return False
            changed = requested is not self._direction
            self._direction = requested
        if changed:
            logger.debug("direction -> %s", requested.name)
        return True

    def close(self) -> None:
        with self._lock:
            self._closed = True

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed
