from __future__ import annotations

import logging
import threading
from typing import Optional, Protocol

from . import config
from .channel import DirectionChannel
from .state import Direction

logger = logging.getLogger(__name__)

KEY_MAP = {
    config.KEY_LEFT: Direction.LEFT,
    config.KEY_RIGHT: Direction.RIGHT,
    config.KEY_UP: Direction.UP,
    config.KEY_DOWN: Direction.DOWN,
}


class KeySource(Protocol):
    def poll(self) -> Optional[str]: ...


def handle_key(key: str, channel: DirectionChannel, stop: threading.Event) -> None:
    if key == config.KEY_QUIT:
        logger.info("quit key pressed")
        stop.set()
        return
    new_dir = KEY_MAP.get(key)
    if new_dir is not None:
        channel.steer(new_dir)


def input_loop(
    source: KeySource,
    channel: DirectionChannel,
    stop: threading.Event,
    poll_seconds: float = config.POLL_SECONDS,
) -> None:
    """Poll `source` until `stop` is set, steering through `channel`."""
    logger.debug("input task started")
    while not stop.is_set():
        key = source.poll()
        if key is None:
            stop.wait(poll_seconds)
            continue
        handle_key(key, channel, stop)
    logger.debug("input task stopped")


def start_input_task(
    source: KeySource,
    channel: DirectionChannel,
    stop: threading.Event,
    poll_seconds: float = config.POLL_SECONDS,
) -> threading.Thread:
    thread = threading.Thread(
        target=input_loop,
        args=(source, channel, stop, poll_seconds),
        name="termsnake-input",
    )
    thread.start()
    return thread
