"""Drawing the top-down minimap and the player's view ray."""

from __future__ import annotations

from cubmaze.image import Image
from cubmaze.model import RAY_STEP, TILE_SIZE, GameMap
from cubmaze.movement import touch

WALL_COLOR = 0x0000FF
FLOOR_COLOR = 0xCCCCCC
RAY_COLOR = 0xFF0000


def draw_square(image: Image, x: int, y: int, size: int, color: int) -> None:
    """Fill a ``size`` x ``size`` square with its top-left corner at (x, y)."""
    for i in range(size):
        for j in range(size):
            image.put_pixel(x + i, y + j, color)


def draw_minimap(image: Image, game_map: GameMap) -> None:
    """Draw one tile per map cell: walls in blue, everything else in grey."""
    for y, row in enumerate(game_map.grid):
        for x in range(game_map.width):
            char = row[x] if x < len(row) else " "
            color = WALL_COLOR if char == "1" else FLOOR_COLOR
            draw_square(image, x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, color)


def draw_direction(image: Image, game_map: GameMap) -> None:
    """Trace the view direction from the player until it meets a wall."""
    ray_x, ray_y = game_map.player_x, game_map.player_y
    if not touch(game_map, ray_x, ray_y) and game_map.dir_x == 0 and game_map.dir_y == 0:
        raise ValueError("view direction is the zero vector")
    while not touch(game_map, ray_x, ray_y):
        image.put_pixel(int(ray_x * TILE_SIZE), int(ray_y * TILE_SIZE), RAY_COLOR)
        ray_x += game_map.dir_x * RAY_STEP
        ray_y += game_map.dir_y * RAY_STEP
    image.put_pixel(int(ray_x * TILE_SIZE), int(ray_y * TILE_SIZE), RAY_COLOR)