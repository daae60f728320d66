"""Game loop: reads the keyboard, drives the player and draws each frame."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from sealhunter.player import Button, Player, load_sprite_sheet

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
WINDOW_TITLE = "Seal Hunter"
DEFAULT_SPRITE_PATH = "sprites/player/blue/blue_spritesheet.bmp"
BACKGROUND = (0, 0, 0, 255)
FPS = 60

_KEY_BINDINGS = (
    (pygame.K_UP, Button.UP),
    (pygame.K_DOWN, Button.DOWN),
    (pygame.K_LEFT, Button.LEFT),
    (pygame.K_RIGHT, Button.RIGHT),
    (pygame.K_ESCAPE, Button.PLUS),
    (pygame.K_PLUS, Button.PLUS),
    (pygame.K_KP_PLUS, Button.PLUS),
)


def buttons_from_keys(pressed) -> Button:
    """Turn a key-state lookup (indexed by key code) into held buttons."""
    held = Button(0)
    for key, button in _KEY_BINDINGS:
        if pressed[key]:
            held |= button
    return held


class Game:
    """One player on a black screen, until PLUS is pressed."""

    def __init__(self, player: Player) -> None:
        self.player = player
        self.quit = False

    def handle_events(self, held: Button, pressed_now: Button) -> None:
        """Pass held buttons to the player and quit on a fresh PLUS press."""
        self.player.handle_input(held)
        if pressed_now & Button.PLUS:
            self.quit = True

    def step(self, surface: pygame.Surface, held: Button, pressed_now: Button) -> bool:
        """Run one frame; return whether the game keeps going."""
        self.handle_events(held, pressed_now)
        surface.fill(BACKGROUND)
        self.player.update()
        self.player.render(surface)
        return not self.quit


def run(sprite_path: str = DEFAULT_SPRITE_PATH) -> None:
    """Open the window and play until the player quits."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        player = Player(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2, load_sprite_sheet(sprite_path))
        game = Game(player)
        frame_clock = pygame.time.Clock()
        previous = Button(0)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.quit = True
            held = buttons_from_keys(pygame.key.get_pressed())
            pressed_now = held & ~previous
            previous = held
            running = game.step(screen, held, pressed_now)
            pygame.display.flip()
            frame_clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="sealhunter", description=WINDOW_TITLE)
    parser.add_argument(
        "--sprite",
        default=DEFAULT_SPRITE_PATH,
        help="path of the player's sprite sheet",
    )
    args = parser.parse_args(argv)
    run(args.sprite)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())