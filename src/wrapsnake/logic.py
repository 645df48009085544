from __future__ import annotations

from collections import namedtuple

from . import config
from .state import Functor, State, move_position, negate, new_game, random_free_position, same_direction

Tick = namedtuple("Tick", ["state", "reset"])
# reset: True when a self-collision or a full board replaced the whole state this tick.


def commit_direction(state: State) -> State:
    # A straight reversal would run the head into the neck, so it is ignored.
    if same_direction(state.next_move, negate(state.move)):
        return state
    return state._replace(move=state.next_move)


def extend_head(state: State) -> State:
    new_head = move_position(state.snake[-1], state.move)
    return state._replace(snake=state.snake + (new_head,))


def is_self_collision(state: State) -> bool:
    head = state.snake[-1]
    return sum(1 for seg in state.snake if seg == head) >= 2


def is_board_full(state: State) -> bool:
    return len(set(state.snake)) >= config.GRID_WIDTH * config.GRID_HEIGHT


def eat_apple(state: State, rng) -> State:
    if state.snake[-1] != state.apple:
        return state
    return state._replace(
        points=state.points + 1,
        apple=random_free_position(rng, state.snake),
    )


def grow_or_shrink(state: State) -> State:
    if state.points <= 0:
        return state._replace(snake=state.snake[1:])
    return state._replace(points=state.points - 1)


def advance(state: State, rng) -> Tick:
    """Run one tick.

    Commits the pending direction, moves the head one cell on the wrapping
    board and then either restarts the game on self-collision or settles the
    apple and the tail. Eating the last free cell also restarts, since no
    apple can be placed. Nothing happens until `running` is set.
    """
    if not state.running:
        return Tick(state, False)

    moved = Functor(state).map(commit_direction).map(extend_head).get()
    if is_self_collision(moved):
        return Tick(new_game(rng), True)
    if moved.snake[-1] == moved.apple and is_board_full(moved):
        return Tick(new_game(rng), True)

    settled = (
        Functor(moved)
        .map(lambda s: eat_apple(s, rng))
        .map(grow_or_shrink)
        .get()
    )
    return Tick(settled, False)
