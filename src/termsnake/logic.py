from __future__ import annotations

import logging
import random

from . import config
from .state import Direction, Functor, Point, State, add_vectors

logger = logging.getLogger(__name__)


def random_food(width: int, height: int, rng: random.Random) -> Point:
    """Uniform interior cell. Snake occupancy is not checked."""
    return Point(rng.randint(1, width - 2), rng.randint(1, height - 2))


def leave_body(state: State) -> State:
    if state.direction is Direction.STOPPED:
        return state
    return state._replace(body=(state.head,) + state.body)


def move_head(state: State) -> State:
    return state._replace(head=add_vectors(state.head, state.direction.value))


def check_walls(state: State) -> State:
    x, y = state.head
    # Rows run 0..height-1 between the top and bottom border lines, while
    # columns 0 and width-1 are the side borders themselves.
    if x >= state.width - 1 or x <= 0 or y >= state.height or y < 0:
        logger.info("hit wall at %s", state.head)
        return state._replace(alive=False, death_reason="wall")
    return state


def check_self(state: State) -> State:
    if state.head in state.body:
        logger.info("hit own body at %s", state.head)
        return state._replace(alive=False, death_reason="self")
    return state


def eat_or_trim(state: State, rng: random.Random) -> State:
    # Deliberate change: a snake that has never moved does not eat food spawned
    # under its head, so body length always equals the number of foods eaten.
    if state.direction is Direction.STOPPED:
        return state
    if state.head == state.food:
        food = random_food(state.width, state.height, rng)
        score = state.score + config.FOOD_REWARD
        logger.debug("ate food at %s, score %d, next food at %s", state.food, score, food)
        return state._replace(food=food, score=score)
    return state._replace(body=state.body[:-1])


def _if_alive(func):
    return lambda s: func(s) if s.alive else s


def game_tick(state: State, direction: Direction, rng: random.Random) -> State:
    """Advance one tick using a single snapshot of the shared direction.

    A dead state is returned unchanged.
    """
    if not state.alive:
        return state
    return (
        Functor(state._replace(direction=direction))
        .map(leave_body)
        .map(move_head)
        .map(check_walls)
        .map(_if_alive(check_self))
        .map(_if_alive(lambda s: eat_or_trim(s, rng)))
        .get()
    )
