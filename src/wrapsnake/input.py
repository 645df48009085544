from __future__ import annotations

import pygame

from . import config
from .state import Position, State

DIRECTIONS = {
    config.ARROW_LEFT: Position(-1, 0),
    config.ARROW_RIGHT: Position(1, 0),
    config.ARROW_UP: Position(0, -1),
    config.ARROW_DOWN: Position(0, 1),
}

KEY_NAMES = {
    pygame.K_LEFT: config.ARROW_LEFT,
    pygame.K_RIGHT: config.ARROW_RIGHT,
    pygame.K_UP: config.ARROW_UP,
    pygame.K_DOWN: config.ARROW_DOWN,
}


def key_name(key: int) -> str | None:
    return KEY_NAMES.get(key)


def on_key(state: State, name: str) -> State:
    """Record a key press; the move itself is only committed on the next tick."""
    new_dir = DIRECTIONS.get(name)
    if new_dir is not None:
        state = state._replace(next_move=new_dir)
    if name.startswith(config.ARROW_PREFIX):
        state = state._replace(running=True)
    return state


def handle_input(state: State, events) -> State:
    for event in events:
        if event.type != pygame.KEYDOWN:
            continue
        name = key_name(event.key)
        if name:
            state = on_key(state, name)
    return state
