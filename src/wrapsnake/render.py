from __future__ import annotations

import pygame

from . import config
from .state import State


def cell_rect(x: int, y: int) -> pygame.Rect:
    return pygame.Rect(x * config.BLOCK, y * config.BLOCK, config.CELL, config.CELL)


def cell_rects(state: State):
    for x, y in state.snake:
        yield cell_rect(x, y), config.SNAKE_COLOR
    ax, ay = state.apple
    yield cell_rect(ax, ay), config.APPLE_COLOR


def draw_state(screen: pygame.Surface, state: State) -> None:
    screen.fill(config.BACKGROUND_COLOR)
    for rect, color in cell_rects(state):
        pygame.draw.rect(screen, color, rect)
