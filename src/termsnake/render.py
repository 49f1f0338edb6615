from __future__ import annotations

from . import config
from .state import Point, State


def cell_glyph(state: State, x: int, y: int) -> str:
    if x == 0 or x == state.width - 1:
        return config.BORDER
    pos = Point(x, y)
    if pos == state.head:
        return config.HEAD
    if pos == state.food:
        return config.FOOD
    if pos in state.body:
        return config.BODY
    return config.EMPTY


def render_frame(state: State) -> str:
    rows = [config.BORDER * state.width]
    for y in range(state.height):
        rows.append("".join(cell_glyph(state, x, y) for x in range(state.width)))
    rows.append(config.BORDER * state.width)
    rows.append(f"Score: {state.score}")
    rows.append(config.HINT)
    return "\n".join(rows) + "\n"


def render_game_over(state: State) -> str:
    return f"GAME OVER\nYour final score: {state.score}\n"


def draw_state(screen, state: State) -> None:
    screen.show(render_frame(state))
