"""Player movement, rotation, collision and key handling."""

from __future__ import annotations

import logging
import math

from cubmaze.model import (
    KEY_A,
    KEY_D,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_W,
    MOVE_SPEED,
    ROTATE_SPEED,
    Action,
    GameMap,
)

logger = logging.getLogger(__name__)

_KEY_ACTIONS = {
    KEY_W: Action.MOVE_FWD,
    KEY_S: Action.MOVE_BWD,
    KEY_A: Action.MOVE_LEFT,
    KEY_D: Action.MOVE_RIGHT,
    KEY_LEFT: Action.ROTATE_LEFT,
    KEY_RIGHT: Action.ROTATE_RIGHT,
}


def _char(game_map: GameMap, x: int, y: int) -> str:
    row = game_map.grid[y]
    return row[x] if x < len(row) else " "


def accumulate_vector(game_map: GameMap) -> tuple[float, float]:
    """Sum the movement of every held move key into one vector."""
    held = game_map.pressed
    v_x = v_y = 0.0
    if Action.MOVE_FWD in held:
        v_x += game_map.dir_x * MOVE_SPEED
        v_y += game_map.dir_y * MOVE_SPEED
    if Action.MOVE_BWD in held:
        v_x -= game_map.dir_x * MOVE_SPEED
        v_y -= game_map.dir_y * MOVE_SPEED
    if Action.MOVE_LEFT in held:
        v_x -= game_map.plane_x * MOVE_SPEED
        v_y -= game_map.plane_y * MOVE_SPEED
    if Action.MOVE_RIGHT in held:
        v_x += game_map.plane_x * MOVE_SPEED
        v_y += game_map.plane_y * MOVE_SPEED
    return v_x, v_y


def normalize_vector(v_x: float, v_y: float) -> tuple[float, float]:
    """Scale a non-zero vector to a length of MOVE_SPEED."""
    mag = math.hypot(v_x, v_y)
    if mag > 0.0:
        return v_x / mag * MOVE_SPEED, v_y / mag * MOVE_SPEED
    return v_x, v_y


def calc_move_vector(game_map: GameMap) -> tuple[float, float]:
    """Return this frame's movement vector for the held keys."""
    return normalize_vector(*accumulate_vector(game_map))


def _rotate(game_map: GameMap, angle: float) -> None:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    game_map.dir_x, game_map.dir_y = (
        game_map.dir_x * cos_a - game_map.dir_y * sin_a,
        game_map.dir_x * sin_a + game_map.dir_y * cos_a,
    )
    game_map.plane_x, game_map.plane_y = (
        game_map.plane_x * cos_a - game_map.plane_y * sin_a,
        game_map.plane_x * sin_a + game_map.plane_y * cos_a,
    )


def rotate_left(game_map: GameMap) -> None:
    """Turn the view and camera plane by -ROTATE_SPEED radians."""
    _rotate(game_map, -ROTATE_SPEED)
    logger.debug("Rotated left at (%.2f, %.2f)", game_map.player_x, game_map.player_y)


def rotate_right(game_map: GameMap) -> None:
    """Turn the view and camera plane by ROTATE_SPEED radians."""
    _rotate(game_map, ROTATE_SPEED)
    logger.debug("Rotated right at (%.2f, %.2f)", game_map.player_x, game_map.player_y)


def is_walkable(game_map: GameMap, x: float, y: float) -> bool:
    """Tell whether the point (x, y) lies inside the map and not in a wall."""
    grid_x, grid_y = int(x), int(y)
    if grid_x < 0 or grid_x >= game_map.width or grid_y < 0 or grid_y >= game_map.height:
        return False
    return _char(game_map, grid_x, grid_y) != "1"


def apply_move(game_map: GameMap, v_x: float, v_y: float) -> None:
    """Move the player along each axis where that step stays walkable."""
    if is_walkable(game_map, game_map.player_x + v_x, game_map.player_y):
        game_map.player_x += v_x
    if is_walkable(game_map, game_map.player_x, game_map.player_y + v_y):
        game_map.player_y += v_y


def apply_rotation(game_map: GameMap) -> None:
    """Rotate for a held rotation key; left wins when both are held."""
    if Action.ROTATE_LEFT in game_map.pressed:
        rotate_left(game_map)
    elif Action.ROTATE_RIGHT in game_map.pressed:
        rotate_right(game_map)


def touch(game_map: GameMap, ray_x: float, ray_y: float) -> bool:
    """Tell whether a ray point has left the map or entered a wall."""
    x, y = int(ray_x), int(ray_y)
    if x < 0 or x >= game_map.width or y < 0 or y >= game_map.height:
        return True
    return _char(game_map, x, y) == "1"


def handle_keypress(game_map: GameMap, keycode: int) -> bool:
    """Mark the action of a pressed key as held; return True if it asks to quit."""
    if keycode == KEY_ESC:
        return True
    action = _KEY_ACTIONS.get(keycode)
    if action is not None:
        game_map.pressed.add(action)
    return False


def handle_keyrelease(game_map: GameMap, keycode: int) -> None:
    """Mark the action of a released key as no longer held."""
    action = _KEY_ACTIONS.get(keycode)
    if action is not None:
        game_map.pressed.discard(action)