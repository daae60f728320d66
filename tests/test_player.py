import pygame
import pytest

from sealhunter.player import (
    ANIMATION_DELAY,
    FRAME_HEIGHT,
    FRAME_WIDTH,
    IDLE_TIMEOUT_MS,
    Button,
    Player,
    load_sprite_sheet,
)

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def player(clock):
    return Player(50, 60, None, clock)


def _walk(player, button, steps):
    for _ in range(steps):
        player.handle_input(button)


def _idle_until_seated(player, clock):
    clock.now = IDLE_TIMEOUT_MS + 1
    player.update()
    for _ in range(ANIMATION_DELAY):
        player.handle_input(Button(0))
        player.update()


def test_initial_state(player):
    assert player.position == (50, 60)
    assert player.source_rect == pygame.Rect(0, 0, FRAME_WIDTH, FRAME_HEIGHT)
    assert not player.is_idle_animating
    assert not player.is_getting_up


@pytest.mark.parametrize(
    "button, expected",
    [
        (Button.UP, (50, 59)),
        (Button.DOWN, (50, 61)),
        (Button.LEFT, (49, 60)),
        (Button.RIGHT, (51, 60)),
        (Button.UP | Button.RIGHT, (51, 59)),
        (Button.UP | Button.DOWN, (50, 60)),
    ],
)
def test_movement(player, button, expected):
    player.handle_input(button)
    assert player.position == expected


def test_plus_does_not_move(player):
    player.handle_input(Button.PLUS)
    assert player.position == (50, 60)


def test_walk_animation_alternates(player):
    _walk(player, Button.RIGHT, ANIMATION_DELAY - 1)
    assert player.source_rect.x == 0
    player.handle_input(Button.RIGHT)
    assert player.source_rect.x == FRAME_WIDTH
    _walk(player, Button.RIGHT, ANIMATION_DELAY)
    assert player.source_rect.x == 2 * FRAME_WIDTH
    _walk(player, Button.RIGHT, ANIMATION_DELAY)
    assert player.source_rect.x == FRAME_WIDTH


def test_release_returns_to_standing_frame(player):
    _walk(player, Button.LEFT, ANIMATION_DELAY)
    player.handle_input(Button(0))
    assert player.source_rect.x == 0
    _walk(player, Button.LEFT, ANIMATION_DELAY - 1)
    assert player.source_rect.x == 0


def test_not_idle_at_exact_timeout(player, clock):
    clock.now = IDLE_TIMEOUT_MS
    player.update()
    assert not player.is_idle_animating


def test_sits_down_after_timeout(player, clock):
    _idle_until_seated(player, clock)
    assert player.is_idle_animating
    assert player.source_rect.x == 5 * FRAME_WIDTH
    for _ in range(5 * ANIMATION_DELAY):
        player.handle_input(Button(0))
        player.update()
    assert player.source_rect.x == 5 * FRAME_WIDTH


def test_moving_while_seated_starts_getting_up(player, clock):
    _idle_until_seated(player, clock)
    player.handle_input(Button.DOWN)
    assert player.position == (50, 61)
    assert player.is_getting_up
    assert not player.is_idle_animating
    player.handle_input(Button.DOWN)
    assert player.position == (50, 61)


def test_get_up_animation_finishes_standing(player, clock):
    _idle_until_seated(player, clock)
    player.handle_input(Button.UP)
    for _ in range(ANIMATION_DELAY):
        player.update()
    assert player.source_rect.x == 7 * FRAME_WIDTH
    for _ in range(3 * ANIMATION_DELAY):
        player.update()
    assert not player.is_getting_up
    assert not player.is_idle_animating
    assert player.source_rect.x == 0
    before = player.position
    player.handle_input(Button.UP)
    assert player.position == (before[0], before[1] - 1)


def test_render_without_texture_draws_white_square(player):
    surface = pygame.Surface((100, 100))
    player.render(surface)
    assert surface.get_at((50, 60)) == WHITE
    assert surface.get_at((50 + FRAME_WIDTH - 1, 60 + FRAME_HEIGHT - 1)) == WHITE
    assert surface.get_at((49, 60)) == BLACK


def test_render_with_texture_uses_current_frame(clock):
    sheet = pygame.Surface((10 * FRAME_WIDTH, FRAME_HEIGHT))
    sheet.fill(GREEN)
    sheet.fill(RED, pygame.Rect(0, 0, FRAME_WIDTH, FRAME_HEIGHT))
    player = Player(5, 5, sheet, clock)
    surface = pygame.Surface((60, 60))
    player.render(surface)
    assert surface.get_at((5, 5)) == RED
    _walk(player, Button.RIGHT, ANIMATION_DELAY)
    surface.fill(BLACK)
    player.render(surface)
    x, y = player.position
    assert surface.get_at((x, y)) == GREEN


def test_load_sprite_sheet_reads_bmp(tmp_path):
    path = tmp_path / "sheet.bmp"
    pygame.image.save(pygame.Surface((2 * FRAME_WIDTH, FRAME_HEIGHT)), str(path))
    sheet = load_sprite_sheet(path)
    assert sheet.get_size() == (2 * FRAME_WIDTH, FRAME_HEIGHT)


def test_load_sprite_sheet_missing_file(tmp_path, capsys):
    path = tmp_path / "missing.bmp"
    assert load_sprite_sheet(path) is None
    assert str(path) in capsys.readouterr().err