from __future__ import annotations

import enum
from collections import namedtuple

from . import config

Point = namedtuple("Point", ["x", "y"])

State = namedtuple(
    "State",
    ["head", "body", "food", "direction", "score", "alive", "death_reason", "width", "height"],
)
# head: Point
# body: tuple[Point, ...], most recently vacated head cell first.
# food: Point
# direction: Direction the last tick moved with.
# score: int
# alive: bool
# death_reason: None | "wall" | "self" | "quit"
# width, height: board size in cells


class Direction(enum.Enum):
    STOPPED = (0, 0)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_reversal_of(self, other: Direction) -> bool:
        """True when steering from `other` to `self` would turn the snake back on itself."""
        return self is not Direction.STOPPED and self is other.opposite


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> Point:
    return Point(a[0] + b[0], a[1] + b[1])


def new_state(
    food: Point,
    width: int = config.GRID_WIDTH,
    height: int = config.GRID_HEIGHT,
) -> State:
    return State(
        head=Point(width // 2, height // 2),
        body=(),
        food=food,
        direction=Direction.STOPPED,
        score=0,
        alive=True,
        death_reason=None,
        width=width,
        height=height,
    )


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
