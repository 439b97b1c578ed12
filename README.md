# genkicub

A small first-person explorer that draws a walled grid world with the
DDA raycasting technique. You describe a level in a `.cub` scene file,
and `genkicub` renders it from the player's eyes in a 1600×900 pygame
window.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
genkicub path/to/level.cub
```

The command takes exactly one argument, and its name must end in `.cub`.
If the arguments or the scene are invalid, or a wall texture cannot be
loaded, the program writes `Error` and a message describing the problem
to standard error and exits with status 1.

## Controls

| Key             | Action                                |
|-----------------|---------------------------------------|
| `W` / `S`       | move forward / backward               |
| `A` / `D`       | strafe left / right                   |
| `←` / `→`       | turn left / right (2° per frame)      |
| `Left Shift`    | sprint (3× speed, slightly wider FOV) |
| `Esc`           | quit                                  |

Closing the window quits as well. Movement stops at walls, and keyboard
auto-repeat is switched off while the game runs.

## The `.cub` format

A scene file starts with six identifiers in any order, each given once,
followed by the map:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

        1111111111111
        1000000000001
111111111011000001110000000001
100000000011000001110111111111
11110111111111011100000010001
11110111111111011101010010001
11000000110101011100000010001
10000000000000001100000010001
10000000000000001101010010001
11000001110101011111011110N0111
11110111 1110101 101111010001
11111111 1111111 111111111111
```

- `NO`, `SO`, `WE`, `EA` give the path to the wall image for each side.
  Any image that Pillow can open works. The texture height should be a
  power of two, because texture rows wrap with a bit mask. Textures are
  only loaded when the game window opens.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. Each value is
  an integer from 0 to 255, written with at most three digits; spaces are
  allowed around the commas. An identifier and its value must be on the
  same line.
- The map uses `1` for walls, `0` for open floor, and spaces (or tabs) for
  the void. It holds exactly one spawn point, `N`, `E`, `S` or `W`, which
  also sets the direction the player faces.
- The map may not contain empty lines, and every open cell must be
  enclosed by walls.

## Using it as a library

```python
from genkicub.loader import load_scene
from genkicub.image import Image, load_textures
from genkicub.raycast import raycast_image

scene = load_scene("level.cub")
load_textures(scene.textures)
frame = Image.blank(1600, 900)
raycast_image(scene, frame)
print(hex(frame.get_pixel(800, 450)))
```

The main pieces:

- `genkicub.loader`: `validate_arguments` and `load_scene`, which builds a
  `Scene` from a file.
- `genkicub.identifiers` and `genkicub.mapfile`: parsing of the header and
  of the map section (`read_textures`, `parse_color`, `parse_map`,
  `check_map`, …).
- `genkicub.scene`: the `Scene`, `Player`, `GameMap` and `Textures`
  dataclasses and the window constants.
- `genkicub.image`: `Image`, a numpy grid of `0xRRGGBB` pixels, and
  `load_texture` / `load_textures`.
- `genkicub.raycast`: `setup_ray`, `dda`, `draw_vert_line`,
  `fill_background` and `raycast_image`.
- `genkicub.controls`: `handle_press`, `handle_release`,
  `update_rotation` and `move_player`, keyed by the `Key` enum.
- `genkicub.app`: `Game`, whose `update()` advances and renders one frame
  and whose `run()` opens the window, and `main`, the command.

`load_scene` raises `genkicub.errors.CubError` if the file is missing or
malformed, and `load_textures` raises `TextureNotFoundError` (a
`CubError`) for an image it cannot read. `report_error` writes an error in
the same form the command prints.

## What it does not do

There are no sprites, doors, minimap, mouse look or sound: the game draws
textured walls and flat floor and ceiling colours, and lets you walk
around.