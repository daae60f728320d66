# sealhunter

A small arcade game built on pygame. A 20×20 sprite stands in the middle of a
1280×720 black window and is moved around with the arrow keys. Left alone for ten
seconds, it sits down; move it again and it gets back up first.

## Installing

```
pip install .
```

## Playing

```
sealhunter
```

By default the sprite sheet is read from `sprites/player/blue/blue_spritesheet.bmp`,
relative to the current directory. To use a different one, pass its path:

```
sealhunter --sprite path/to/spritesheet.bmp
```

The sprite sheet is one row of 20×20 frames:

| Frames | Use                                   |
|--------|---------------------------------------|
| 0      | standing still                        |
| 1–2    | walking, alternating every 10 frames  |
| 4–5    | sitting down after 10 s without input |
| 6–9    | getting up again                      |

If the sheet cannot be loaded, a message is printed to standard error and the player
is drawn as a white square.

### Controls

| Key                      | Action                               |
|--------------------------|--------------------------------------|
| Arrow keys               | move one pixel per frame (60 fps)    |
| `+`, keypad `+`, Escape  | quit                                 |
| closing the window       | quit                                 |

While the player is getting up, movement is ignored until the animation ends.

## Using it as a library

```python
from sealhunter.player import Button, Player, load_sprite_sheet
from sealhunter.game import Game, buttons_from_keys, run

player = Player(640, 360, texture=None, clock=lambda: 0)
player.handle_input(Button.RIGHT | Button.DOWN)
player.update()
print(player.position, player.source_rect)

game = Game(player)
```

- `Button` is a flag enum with `UP`, `DOWN`, `LEFT`, `RIGHT` and `PLUS`.
- `Player(x, y, texture=None, clock=None)` takes an optional sprite-sheet surface and
  an optional millisecond clock (defaults to `pygame.time.get_ticks`).
  `handle_input(held)` moves it and advances the walk, `update()` advances the
  sitting and getting-up animations, and `render(surface)` draws it. `position` and
  `source_rect` are read-only properties.
- `load_sprite_sheet(path)` returns the loaded surface, or `None` if it cannot be read.
- `buttons_from_keys(pressed)` turns a key-state lookup such as
  `pygame.key.get_pressed()` into held `Button` flags.
- `Game.step(surface, held, pressed_now)` runs one frame: it handles the input, clears
  the surface to black, updates the player and draws it, and returns whether the game
  keeps going. A fresh `PLUS` press in `pressed_now` ends it.
- `run(sprite_path)` opens the window and keeps calling `step` until you quit.

## What it does not do

There are no seals to hunt yet: no enemies, shooting, score, levels or sound. The
package ships no sprite sheet of its own; without one the player is a white square.

## Running the tests

```
pip install .[test]
pytest
```