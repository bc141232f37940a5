# evolution

A small side-scrolling platform game with three levels. Each level has a
two-row ground strip with a gap every ten cells, four randomly placed steps,
four randomly placed floating platforms, a row of clouds and a row of trees,
six monsters that drift slowly to the left, and twenty tools to pick up. When
you touch the finish flag at the right end of the map, the next level starts.
When a monster touches you, you go back to the start of the level.

## Installing

```
pip install .
```

The game draws its window with `pygame`. It reads its pictures from a
`resources/` directory. By default that directory is looked for under the
current working directory; `--root DIR` points the game at another directory
that holds `resources/`.

The pictures it loads are `menu.png`, `role.png`, `fin.png` and `mais.png`,
the ground textures `sade.jpg`, `break.jpg` and `ground.jpg`, and the level
textures `wood.png`, `stone.jpg`, `fe.jpg`, `Cloud.png`, `xian.png`,
`tree.png`, `light.png`, `bee.png`, `huang.png` and `mouse.png`. A missing
picture raises `FileNotFoundError`. The font `resources/font.ttf` is optional;
without it pygame's default font is used.

## Playing

```
evolution
evolution --root path/to/game
```

The same entry point can be started with `python -m evolution.game`.

The menu shows two buttons. **Start** starts level 1. **End** quits. Closing
the window also quits.

| Key | Action                                                  |
|-----|---------------------------------------------------------|
| A   | walk left                                               |
| D   | walk right                                              |
| W   | jump (only while on the ground or on top of an obstacle) |

The status line at the top shows the current level out of 3 and how many
tools you have collected, out of 10. The camera scrolls when you come within
100 pixels of the edge of the window.

## Using the pieces

The game logic does not need a window, so you can drive it from code or tests:

```python
from evolution.world import World
from evolution.role import Controls

world = World()
world.start()                      # leave the menu, build level 1
world.tick(1 / 60, Controls(right=True))
print(world.status_text())
```

Without a window, every sprite is taken to be one 32-pixel cell in size;
`World(sizer=...)` accepts a function that maps a texture name to a
`(width, height)` pair, and `World(rng=...)` a `random.Random` that places the
steps and platforms.

- `evolution.geometry` holds the world constants, `FloatRect` (axis-aligned
  rectangles with `intersection`, `intersects` and `moved`) and the `Contact`
  flags `RIGHT`, `LEFT` and `BOTTOM`.
- `evolution.role` holds `Controls` and `Role`, the player, moved by
  `Role.update`.
- `evolution.terrain` builds the `Ground`, `Step`, `Platform`, `Cloud` and
  `Tree` layers; `ground_texture_for_level` names the ground texture of a level.
- `evolution.entities` holds the `Finish` flag, the `Tool` items and the
  `Monster` row.
- `evolution.world` holds `World`, which runs a level at a fixed time step,
  and `LevelTheme` with `theme_for_level`.
- `evolution.game` holds `Game`, which puts a world in a pygame window, and
  `main`, the command's entry point.

## What it does not do

There is no end screen: on level 3, touching the flag only sends you back to
the start. Falling into a gap does not cost a life; the character simply keeps
falling. There are no saved games and no scores beyond the tool counter.

## Running the tests

```
pip install ".[test]"
pytest
```