"""Loading, checking and closing the map grid of a scene file."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from cubmaze.model import GameMap, MapError
from cubmaze.textures import parse_textures_colors

logger = logging.getLogger(__name__)

MAX_MAP_LINES = 1024
PLAYER_CHARS = frozenset("NSEW")
_WALKABLE = frozenset("0NSEW")
_VALID_CHARS = frozenset("01 NSEW\t\n\v\f\r")
_LINE = re.compile(r"[^\n]*\n|[^\n]+")

_ANGLES = {
    "N": 3 * math.pi / 2,
    "S": math.pi / 2,
    "E": 0.0,
    "W": math.pi,
}

# (dir_x, dir_y, plane_x, plane_y) for each spawn direction.
_VIEWS = {
    "N": (0.0, -1.0, 0.66, 0.0),
    "S": (0.0, 1.0, -0.66, 0.0),
    "E": (1.0, 0.0, 0.0, -0.66),
    "W": (-1.0, 0.0, 0.0, 0.66),
}


def read_map_lines(lines: Iterable[str]) -> list[list[str]]:
    """Collect the map rows of a scene and pad them with spaces to equal width.

    Lines are skipped until the first one starting with a space or ``1``;
    from there on every line belongs to the map.
    """
    rows: list[str] = []
    started = False
    for line in lines:
        if not started:
            if not line or line[0] not in " 1":
                continue
            started = True
        if len(rows) >= MAX_MAP_LINES:
            raise MapError(f"map has more than {MAX_MAP_LINES} lines")
        if line.endswith("\n"):
            line = line[:-1]
        rows.append(line)
    width = max((len(row) for row in rows), default=0)
    logger.debug("Total lines read: %d, max width: %d", len(rows), width)
    return [list(row.ljust(width)) for row in rows]


def is_out_of_bounds(x: int, y: int, width: int, height: int) -> bool:
    """Tell whether (x, y) lies outside a ``width`` x ``height`` grid."""
    return x < 0 or y < 0 or x >= width or y >= height


def _at(game_map: GameMap, x: int, y: int) -> str:
    row = game_map.grid[y]
    return row[x] if x < len(row) else " "


def is_touching_void(game_map: GameMap, x: int, y: int) -> bool:
    """Tell whether a space lies directly left, right, above or below (x, y)."""
    width, height = game_map.width, game_map.height
    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
        if not is_out_of_bounds(nx, ny, width, height) and _at(game_map, nx, ny) == " ":
            return True
    return False


def validate_void_surroundings(game_map: GameMap) -> None:
    """Raise MapError if a floor or player cell touches empty space."""
    for y, row in enumerate(game_map.grid):
        for x, char in enumerate(row):
            if char in _WALKABLE and is_touching_void(game_map, x, y):
                raise MapError(
                    f"map not closed: cell ({x}, {y}) touches empty space"
                )


def fill_voids_with_walls(game_map: GameMap) -> None:
    """Pad every row to the map width and turn each space into a wall."""
    width = game_map.width
    for row in game_map.grid:
        row.extend(" " * (width - len(row)))
        row[:] = ["1" if char == " " else char for char in row]


def check_invalid_char(game_map: GameMap) -> None:
    """Raise MapError on any character that has no meaning in a map."""
    for y, row in enumerate(game_map.grid):
        for x, char in enumerate(row):
            if char not in _VALID_CHARS:
                raise MapError(f"Invalid character {char!r} in map at ({x}, {y})")


def check_single_player(game_map: GameMap) -> None:
    """Raise MapError unless the map holds exactly one player start."""
    count = sum(char in PLAYER_CHARS for row in game_map.grid for char in row)
    if count == 0:
        raise MapError("No player position found in map")
    if count > 1:
        raise MapError("Multiple player positions found in map")


def find_player_position(game_map: GameMap) -> None:
    """Place the player on the first start cell, in row order."""
    for y, row in enumerate(game_map.grid):
        for x, char in enumerate(row):
            if char in PLAYER_CHARS:
                game_map.player_x = float(x)
                game_map.player_y = float(y)
                game_map.player_dir = char
                game_map.player_angle = _ANGLES[char]
                logger.debug(
                    "Player at (%d, %d), facing %r, angle %.2f rad",
                    x, y, char, game_map.player_angle,
                )
                return
    raise MapError("No player position found in map")


def init_player_dir(game_map: GameMap) -> None:
    """Set the view direction and camera plane from the player's facing."""
    try:
        view = _VIEWS[game_map.player_dir]
    except KeyError:
        raise MapError(f"Invalid player direction: {game_map.player_dir!r}") from None
    game_map.dir_x, game_map.dir_y, game_map.plane_x, game_map.plane_y = view


def format_map(game_map: GameMap) -> str:
    """Render the grid between a header and a footer line."""
    body = "".join("".join(row) + "\n" for row in game_map.grid)
    return f"=== MAP ===\n{body}===========\n"


def validate_map(game_map: GameMap) -> None:
    """Check the map, place the player and close the map with walls."""
    logger.debug("Map before filling:\n%s", format_map(game_map))
    check_invalid_char(game_map)
    check_single_player(game_map)
    find_player_position(game_map)
    init_player_dir(game_map)
    validate_void_surroundings(game_map)
    fill_voids_with_walls(game_map)
    logger.debug("Map after filling:\n%s", format_map(game_map))


def parse_map(path: str | PathLike[str]) -> GameMap:
    """Read a scene file: textures, colours and a validated map."""
    textures = parse_textures_colors(path)
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise MapError(f"Error opening file {path}: {exc}") from exc
    text = raw.decode("utf-8", errors="replace")
    grid = read_map_lines(_LINE.findall(text))
    game_map = GameMap(grid=grid, textures=textures)
    logger.debug(
        "Map reading complete - Dimensions: %dx%d", game_map.width, game_map.height
    )
    validate_map(game_map)
    return game_map