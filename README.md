# cubmaze

cubmaze reads a `.cub` scene file and opens a 1280x1080 window with a top-down
minimap of the maze. Walls are drawn in blue and other cells in grey. The
player is a green square, and a red ray runs from the player in the direction
the player faces until it reaches a wall.

## Installation

```
pip install .
```

The window is drawn with pygame. To run the tests, install the `test` extra
(`pip install .[test]`) and run `pytest`.

## Running

```
cubmaze path/to/level.cub
```

Controls:

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe left / right |
| Left / Right | rotate              |
| Esc          | quit                |

Closing the window also quits. The player cannot move into a wall cell or off
the map. Each axis is checked on its own, so the player slides along walls.

The command exits with status 1 if no file is given, if there is more than one
argument, if the file is invalid or if the window cannot be opened. In each case
it prints a message to standard error.

## Scene files

A `.cub` file has texture paths, floor and ceiling colours, and then the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100101
1000N1
111111
```

- `NO`, `SO`, `WE`, `EA`, `F` and `C` must each appear exactly once. A missing
  or repeated entry is an error.
- Colour values are `R,G,B`, each from 0 to 255.
- The map starts at the first line that begins with a space or `1`. Every line
  after it belongs to the map. Shorter rows are padded with spaces.
- The map uses `0` for floor, `1` for wall and a space for void. Exactly one of
  `N`, `S`, `E` or `W` marks the player's start and the direction the player
  faces. Any other character is an error.
- A floor or player cell must not have a space directly to its left, right,
  top or bottom. After this check, every space becomes a wall.

Any of these problems raises `cubmaze.model.MapError`.

## What it does not do

cubmaze shows only the top-down minimap. It does not draw a first-person 3D
view. The wall texture paths and the floor and ceiling colours are read and
checked for format, but they are not used for drawing, and the texture files
are not opened while a scene loads.

## Library use

```python
from cubmaze.mapparse import parse_map
from cubmaze.model import Action
from cubmaze.movement import apply_move, calc_move_vector

game_map = parse_map("level.cub")
game_map.pressed.add(Action.MOVE_FWD)
v_x, v_y = calc_move_vector(game_map)
apply_move(game_map, v_x, v_y)
print(game_map.player_x, game_map.player_y)
```

Modules:

- `cubmaze.model`: the `GameMap` and `Textures` dataclasses, the `Action` enum,
  `MapError` and the game constants.
- `cubmaze.textures`: parses texture lines and colour lines (`parse_textures_colors`,
  `parse_rgb`, `check_xpm_file`, `check_exist_textures`).
- `cubmaze.mapparse`: loads, validates and closes the map (`parse_map`,
  `validate_map`, `format_map`).
- `cubmaze.movement`: key handling, movement vectors, rotation and collision.
- `cubmaze.minimap`: draws the minimap (`draw_minimap`, `draw_square`,
  `draw_direction`) into an `Image`.
- `cubmaze.game`: `redraw`, `game_tick`, `run` (the pygame window) and `main`.
- `cubmaze.image`: `Image`, a packed pixel buffer with `put_pixel`, `get_pixel`
  and `clear`, and the colour helpers `mask_shifts` and `good_color`.
- `cubmaze.xpm`: loads XPM pixmaps into an `Image`. Use `xpm_file_to_image` for
  a file and `xpm_to_image` for a list of strings. Bad data raises `XpmError`.
- `cubmaze.colornames`: `lookup_color` maps a colour name to `0xRRGGBB`. Case is
  ignored, `none` gives -1, and an unknown name raises `KeyError`.