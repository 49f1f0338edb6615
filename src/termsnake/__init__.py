from .channel import DirectionChannel
from .game import run_game
from .logic import game_tick
from .state import Direction, Point, State, new_state

__all__ = ["DirectionChannel", "Direction", "Point", "State", "game_tick", "new_state", "run_game"]
