"""The player sprite: walking, sitting down when idle and getting back up."""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable
from pathlib import Path

import pygame

FRAME_WIDTH = 20
FRAME_HEIGHT = 20
ANIMATION_DELAY = 10
IDLE_TIMEOUT_MS = 10_000
SPEED = 1

_STAND_FRAME = 0
_SIT_FIRST_FRAME = 4
_SIT_LAST_FRAME = 5
_GET_UP_FIRST_FRAME = 6
_GET_UP_LAST_FRAME = 9

_TICK_MASK = 0xFFFFFFFF
_PLACEHOLDER_COLOUR = (255, 255, 255, 255)


class Button(enum.IntFlag):
    """Controller buttons the game reacts to."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    PLUS = enum.auto()


_DIRECTIONS = Button.UP | Button.DOWN | Button.LEFT | Button.RIGHT


def load_sprite_sheet(path: str | Path) -> pygame.Surface | None:
    """Load the player's sprite sheet, or return None if it cannot be read."""
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError) as exc:
        print(f"Could not load {path}: {exc}", file=sys.stderr)
        return None


class Player:
    """A player drawn from a horizontal strip of 20x20 animation frames."""

    def __init__(
        self,
        x: int,
        y: int,
        texture: pygame.Surface | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._rect = pygame.Rect(x, y, FRAME_WIDTH, FRAME_HEIGHT)
        self._src_rect = pygame.Rect(0, 0, FRAME_WIDTH, FRAME_HEIGHT)
        self.speed = SPEED
        self.texture = texture
        self._clock = clock if clock is not None else pygame.time.get_ticks
        self._frame = _STAND_FRAME
        self._frame_counter = 0
        self.is_idle_animating = False
        self.is_getting_up = False
        self._last_input_time = self._clock()

    @property
    def position(self) -> tuple[int, int]:
        """Top-left corner of the player on screen."""
        return self._rect.x, self._rect.y

    @property
    def source_rect(self) -> pygame.Rect:
        """Area of the sprite sheet currently shown."""
        return self._src_rect.copy()

    def handle_input(self, held: Button) -> None:
        """Move the player by the held direction buttons and advance the walk."""
        if self.is_getting_up:
            return

        dx = dy = 0
        if held & Button.UP:
            dy -= self.speed
        if held & Button.DOWN:
            dy += self.speed
        if held & Button.LEFT:
            dx -= self.speed
        if held & Button.RIGHT:
            dx += self.speed
        self._rect.move_ip(dx, dy)
        moving = bool(held & _DIRECTIONS)

        if moving:
            self._last_input_time = self._clock()
            if self.is_idle_animating:
                self.is_getting_up = True
                self.is_idle_animating = False
                self._frame = _GET_UP_FIRST_FRAME
                self._frame_counter = 0
                return

        if moving and not self.is_idle_animating:
            self._frame_counter += 1
            if self._frame_counter >= ANIMATION_DELAY:
                self._frame = 1 + self._frame % 2
                self._frame_counter = 0

        if not moving and not self.is_idle_animating:
            self._frame = _STAND_FRAME
            self._frame_counter = 0

        self._src_rect.x = self._frame * FRAME_WIDTH

    def update(self) -> None:
        """Advance the sitting and getting-up animations."""
        elapsed = (self._clock() - self._last_input_time) & _TICK_MASK

        if not self.is_idle_animating and not self.is_getting_up and elapsed > IDLE_TIMEOUT_MS:
            self.is_idle_animating = True
            self._frame = _SIT_FIRST_FRAME
            self._frame_counter = 0

        if self.is_idle_animating:
            self._frame_counter += 1
            if self._frame_counter >= ANIMATION_DELAY:
                self._frame = min(self._frame + 1, _SIT_LAST_FRAME)
                self._frame_counter = 0
                self._src_rect.x = self._frame * FRAME_WIDTH

        if self.is_getting_up:
            self._frame_counter += 1
            if self._frame_counter >= ANIMATION_DELAY:
                self._frame += 1
                self._frame_counter = 0
                if self._frame > _GET_UP_LAST_FRAME:
                    self._frame = _STAND_FRAME
                    self.is_getting_up = False
                self._src_rect.x = self._frame * FRAME_WIDTH

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current frame, or a white square when there is no texture."""
        if self.texture is not None:
            surface.blit(self.texture, self._rect, self._src_rect)
        else:
            surface.fill(_PLACEHOLDER_COLOUR, self._rect)