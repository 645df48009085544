from __future__ import annotations

GRID_WIDTH, GRID_HEIGHT = 20, 20
BLOCK = 20
CELL = 18  # leaves a 2px gap between cells
WIDTH, HEIGHT = GRID_WIDTH * BLOCK, GRID_HEIGHT * BLOCK

TITLE = "Snake!"
TICK_MS = 150
FPS = 60

START = (10, 10)
START_POINTS = 2

BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BACKGROUND_COLOR = BLACK
SNAKE_COLOR = RED
APPLE_COLOR = GREEN

ARROW_LEFT = "ArrowLeft"
ARROW_RIGHT = "ArrowRight"
ARROW_UP = "ArrowUp"
ARROW_DOWN = "ArrowDown"
ARROW_PREFIX = "Arrow"
