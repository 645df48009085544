from .logic import Tick, advance
from .input import on_key
from .state import Position, State, new_game

__all__ = ["Position", "State", "Tick", "advance", "new_game", "on_key"]
