from __future__ import annotations

from collections import namedtuple

from . import config

Position = namedtuple("Position", ["x", "y"])

State = namedtuple("State", ["snake", "move", "next_move", "points", "apple", "running"])
# snake: tuple[Position, ...], tail first, head is the last element.
# move: committed (dx, dy)
# next_move: (dx, dy) requested by the latest key press
# points: growth budget; > 0 keeps the tail this tick
# apple: Position
# running: False until the first arrow key

STILL = Position(0, 0)


def wrap(n: int, size: int = config.GRID_WIDTH) -> int:
    """Fold a coordinate that stepped one cell off the board back onto it."""
    if n > size - 1:
        return 0
    if n < 0:
        return size - 1
    return n


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> Position:
    return Position(a[0] + b[0], a[1] + b[1])


def move_position(pos: Position, move: Position) -> Position:
    x, y = add_vectors(pos, move)
    return Position(wrap(x, config.GRID_WIDTH), wrap(y, config.GRID_HEIGHT))


def negate(v: Position) -> Position:
    return Position(-v[0], -v[1])


def same_direction(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def random_free_position(rng, exclude) -> Position:
    """Draw cells uniformly until one is not in `exclude`."""
    taken = set(exclude)
    if len(taken) >= config.GRID_WIDTH * config.GRID_HEIGHT:
        raise ValueError("no free cell left on the board")
    while True:
        pos = Position(
            rng.randint(0, config.GRID_WIDTH - 1),
            rng.randint(0, config.GRID_HEIGHT - 1),
        )
        if pos not in taken:
            return pos


def new_game(rng) -> State:
    snake = (Position(*config.START),)
    return State(
        snake=snake,
        move=STILL,
        next_move=STILL,
        points=config.START_POINTS,
        apple=random_free_position(rng, snake),
        running=False,
    )


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
