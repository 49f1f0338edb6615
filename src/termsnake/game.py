from __future__ import annotations

import argparse
import logging
import random
import threading
import time
from typing import Callable, Optional

from . import config
from .channel import DirectionChannel
from .controls import KeySource, start_input_task
from .logic import game_tick, random_food
from .render import draw_state, render_game_over
from .state import State, new_state

logger = logging.getLogger(__name__)


def run_game(
    keys: KeySource,
    screen,
    rng: Optional[random.Random] = None,
    sleep: Callable[[float], None] = time.sleep,
    width: int = config.GRID_WIDTH,
    height: int = config.GRID_HEIGHT,
    tick_seconds: float = config.TICK_SECONDS,
    poll_seconds: float = config.POLL_SECONDS,
) -> State:
    """Play one session and return the final (dead) state.

    The calling thread is the game loop; key polling runs on one extra
    thread that is always joined before this returns or raises.
    """
    rng = rng if rng is not None else random.Random()
    state = new_state(random_food(width, height, rng), width, height)
    channel = DirectionChannel()
    stop = threading.Event()

    logger.info("session start: %dx%d board, food at %s", width, height, state.food)
    input_thread = start_input_task(keys, channel, stop, poll_seconds)
    try:
        while state.alive and not stop.is_set():
            # Draw first: the frame on screen is always the pre-tick state.
            draw_state(screen, state)
            state = game_tick(state, channel.get(), rng)
            sleep(tick_seconds)
    finally:
        stop.set()
        channel.close()
        input_thread.join()

    if state.alive:
        state = state._replace(alive=False, death_reason="quit")
    logger.info("session over: %s, score %d", state.death_reason, state.score)
    screen.show(render_game_over(state))
    return state


def setup_logging() -> None:
    if not config.LOG_FILE:
        logging.getLogger("termsnake").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=config.LOG_FILE,
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(threadName)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description=f"Terminal snake on a fixed {config.GRID_WIDTH}x{config.GRID_HEIGHT} board. {config.HINT}",
    )
    parser.parse_args(argv)
    setup_logging()

    import blessed

    from .terminal import TerminalKeys, TerminalScreen

    term = blessed.Terminal()
    keys = TerminalKeys(term)
    with keys.raw_mode():
        run_game(keys, TerminalScreen(term))
    return 0
