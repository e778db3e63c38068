"""Game constants and the data model shared by parsing, movement and drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

WIDTH = 1280
HEIGHT = 1080
MOVE_SPEED = 0.15
ROTATE_SPEED = 0.05
TILE_SIZE = 25
PLAYER_SIZE = 25
RAY_STEP = 1.0 / TILE_SIZE

KEY_ESC = 65307
KEY_W = 119
KEY_S = 115
KEY_A = 97
KEY_D = 100
KEY_LEFT = 65361
KEY_RIGHT = 65363


class MapError(Exception):
    """Raised when a scene description or its map is invalid."""


class Action(IntEnum):
    """Player actions that a held key can trigger."""

    MOVE_FWD = 0
    MOVE_BWD = 1
    MOVE_LEFT = 2
    MOVE_RIGHT = 3
    ROTATE_LEFT = 4
    ROTATE_RIGHT = 5


@dataclass
class Textures:
    """Wall texture paths and floor and ceiling colours of a scene."""

    no: str | None = None
    so: str | None = None
    we: str | None = None
    ea: str | None = None
    floor: str | None = None
    ceiling: str | None = None
    floor_rgb: int = -1
    ceiling_rgb: int = -1


@dataclass
class GameMap:
    """The map grid, the player's position and view, and the held keys."""

    grid: list[list[str]] = field(default_factory=list)
    player_x: float = 0.5
    player_y: float = 0.5
    player_dir: str = ""
    player_angle: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    textures: Textures = field(default_factory=Textures)
    pressed: set[Action] = field(default_factory=set)

    @property
    def height(self) -> int:
        """Number of rows in the grid."""
        return len(self.grid)

    @property
    def width(self) -> int:
        """Length of the longest row in the grid."""
        return max((len(row) for row in self.grid), default=0)

    def cell(self, x: int, y: int) -> str:
        """Return the character at column ``x`` of row ``y``."""
        if x < 0 or y < 0 or y >= self.height:
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} map")
        row = self.grid[y]
        if x >= len(row):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} map")
        return row[x]