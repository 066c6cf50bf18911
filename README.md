# lawndefense

A small real-time lane-defence game. Zombies walk in from the right along
three lanes of lawn. You drag plant cards onto the grass to stop them.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window and plays sounds.

## Playing

```
lawndefense --resources RESOURCE_DIR
```

`RESOURCE_DIR` is the directory that holds the game's images and sound.
It defaults to `res` in the current directory. The directory must contain:

- `bg.jpg`, `bar5.png`, `menu.png`, `menu1.png` and `menu2.png`
- `Cards/card_1.png` and `Cards/card_2.png`
- `zhiwu/0/1.png …` and `zhiwu/1/1.png …`, with up to 20 frames per plant
- `sunshine/1.png … 29.png`
- `zm/1.png … 18.png`
- `bullets/bullet_normal.png` and `bullets/bullet_blast.png`

If an image is missing, the command stops with an error. The sound
`sunshine.mp3` is optional.

How to play:

- A start menu appears first. Press the button and release over it to begin.
- Left-click a card in the top bar to pick up a plant. Then left-click a free
  lawn cell to plant it. Right-click drops the plant you are holding.
- Sunshine falls from the sky now and then. Click a ball to collect it. When
  it reaches the counter, you get 25 sun. You start with 50 sun.
- Peashooters fire at zombies in their own row once a zombie has come close
  enough.
- When a zombie reaches the house, the game prints `over` and the window
  closes.

### What the game does not do

Planting costs no sun, so the counter only shows what you have gathered.
Sunflowers do not produce sunshine. Zombies lose health when they are hit,
but they are never removed from the lawn. There are no levels, no saved games
and no settings beyond the resource directory.

## Using the pieces

The rules in `lawndefense.game` are kept apart from the drawing code, so you
can drive them without a window:

```python
import random
from lawndefense.game import Game, GameOver, PlantKind, SpriteSizes

sizes = SpriteSizes(sun_width=79, sun_height=79, zombie_width=166, peashooter_width=71)
game = Game(
    plant_frames={PlantKind.PEASHOOTER: 13, PlantKind.SUNFLOWER: 18},
    sizes=sizes,
    rng=random.Random(1),
)
game.press(330, 50)      # pick up the first card (peashooter)
game.press(300, 200)     # plant it in the top-left cell
for _ in range(500):
    game.tick()
print(game.sunshine, game.lawn[0][0])
```

Parts of the `Game` API:

- `press`, `move` and `right_press` take mouse input. `press` returns how
  many sun balls it picked up.
- `tick` advances one logic frame. It raises `GameOver` when a zombie gets
  through.
- `balls`, `zombies` and `bullets` are fixed-size pools of dataclasses.
  `lawn` is a 3×9 grid of `Plant` or `None`.
- `sun_text_x`, `cell_at` and `cell_origin` are layout helpers.

`lawndefense.app` holds the pygame window:

- `App` runs the window.
- `load_assets` and `count_frames` read the resource directory.
- `menu_button_hit` tests whether a point is on the start button.

`lawndefense.tools` has helpers for image buffers and timing:

- `blend_pixel` and `blend_image` alpha-blend ARGB pixel buffers.
- `clip_rect` clips an image rectangle to a window.
- `DelayTimer` reports the milliseconds between calls.

`lawndefense.vector2` has a small integer vector type, `Vector2`:

- Vectors add and subtract.
- Multiplying two vectors uses Gaussian-integer rules, and so do division
  and modulo.
- Multiplying by a number scales the vector and truncates toward zero.
- Helper functions: `cross`, `dot`, `round_div`, `length_squared`,
  `magnitude`, `gcd`, and `bezier_point` for cubic Bézier curves.

## Running the tests

```
pip install .[test]
pytest
```