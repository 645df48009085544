from __future__ import annotations

import random

from wrapsnake.state import Position, State


class ScriptedRandom:
    """Hands out queued randint values, then falls back to a seeded stream."""

    def __init__(self, values=()):
        self.values = list(values)
        self.fallback = random.Random(0)

    def randint(self, a, b):
        if self.values:
            return self.values.pop(0)
        return self.fallback.randint(a, b)


def make_state(snake, move=(0, 0), next_move=None, points=0, apple=(0, 0), running=True) -> State:
    return State(
        snake=tuple(Position(*p) for p in snake),
        move=Position(*move),
        next_move=Position(*(move if next_move is None else next_move)),
        points=points,
        apple=Position(*apple),
        running=running,
    )


def full_board_snake(free=(0, 0), head=(0, 19)):
    """Every cell but `free`, walked column by column, ending on `head`."""
    cells = []
    for x in range(20):
        ys = range(20) if x % 2 == 0 else range(19, -1, -1)
        cells.extend((x, y) for y in ys if (x, y) not in (free, head))
    return cells + [head]
