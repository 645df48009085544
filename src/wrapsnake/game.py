from __future__ import annotations

import argparse
import random
import sys

import pygame

from . import config
from .console import hide_console
from .input import handle_input
from .logic import advance, commit_direction, extend_head, is_board_full
from .render import draw_state
from .state import State, new_game

TICK_EVENT = pygame.USEREVENT + 1
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class Game:
    """Sole owner of the game state.

    Ticks and key presses reach it as events from one queue and are applied
    in arrival order, so the renderer always sees a whole state value.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.state = new_game(self.rng)
        self.best = len(self.state.snake)
        self.crashes = 0
        self.done = False

    def handle(self, event) -> None:
        if event.type == pygame.QUIT:
            self.done = True
        elif event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
            self.done = True
        elif event.type == pygame.KEYDOWN:
            self.state = handle_input(self.state, [event])
        elif event.type == TICK_EVENT:
            self.tick()

    def tick(self) -> None:
        length = len(self.state.snake)
        result = advance(self.state, self.rng)
        if result.reset:
            self.crashes += 1
            if is_board_full(extend_head(commit_direction(self.state))):
                self.best = max(self.best, length + 1)
                print("Board full! Length:", length + 1)
            else:
                print("Crashed! Length:", length)
        self.state = result.state
        self.best = max(self.best, len(self.state.snake))

    def snapshot(self) -> State:
        return self.state


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wrapsnake", description="Snake on a wrapping 20x20 board.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for apple placement.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    hide_console()

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
        pygame.display.set_caption(config.TITLE)
        pygame.time.set_timer(TICK_EVENT, config.TICK_MS)
    except pygame.error as e:
        print(f"error: {e}", file=sys.stderr)
        pygame.quit()
        return 1

    clock = pygame.time.Clock()
    game = Game(random.Random(args.seed))

    while not game.done:
        for event in pygame.event.get():
            game.handle(event)
        draw_state(screen, game.snapshot())
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.quit()
    print("Best length:", game.best, "Crashes:", game.crashes)
    return 0
