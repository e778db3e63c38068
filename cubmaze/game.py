"""The game loop, its window and the command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cubmaze.image import Image
from cubmaze.mapparse import parse_map
from cubmaze.minimap import draw_direction, draw_minimap, draw_square
from cubmaze.model import (
    HEIGHT,
    KEY_A,
    KEY_D,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_W,
    PLAYER_SIZE,
    TILE_SIZE,
    WIDTH,
    GameMap,
    MapError,
)
from cubmaze.movement import (
    apply_move,
    apply_rotation,
    calc_move_vector,
    handle_keypress,
    handle_keyrelease,
)

PLAYER_COLOR = 0x00FF00
WINDOW_TITLE = "Cub3D Window"
FRAMES_PER_SECOND = 60


def redraw(image: Image, game_map: GameMap) -> None:
    """Clear the image and draw the minimap, the player and the view ray."""
    image.clear()
    draw_minimap(image, game_map)
    draw_square(
        image,
        int(game_map.player_x * TILE_SIZE) - PLAYER_SIZE // 2,
        int(game_map.player_y * TILE_SIZE) - PLAYER_SIZE // 2,
        PLAYER_SIZE,
        PLAYER_COLOR,
    )
    draw_direction(image, game_map)


def game_tick(image: Image, game_map: GameMap) -> None:
    """Advance one frame: move, rotate, then redraw."""
    v_x, v_y = calc_move_vector(game_map)
    apply_move(game_map, v_x, v_y)
    apply_rotation(game_map)
    redraw(image, game_map)


def _to_rgb(image: Image) -> bytes:
    rgb = bytearray(image.width * image.height * 3)
    data = image.data
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


def run(game_map: GameMap) -> None:
    """Open the game window and run until Escape or the window is closed."""
    import pygame

    keymap = {
        pygame.K_ESCAPE: KEY_ESC,
        pygame.K_w: KEY_W,
        pygame.K_s: KEY_S,
        pygame.K_a: KEY_A,
        pygame.K_d: KEY_D,
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_RIGHT: KEY_RIGHT,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        image = Image(WIDTH, HEIGHT)

        def present() -> None:
            surface = pygame.image.frombuffer(_to_rgb(image), (image.width, image.height), "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        redraw(image, game_map)
        present()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    keysym = keymap.get(event.key)
                    if keysym is not None and handle_keypress(game_map, keysym):
                        running = False
                elif event.type == pygame.KEYUP:
                    keysym = keymap.get(event.key)
                    if keysym is not None:
                        handle_keyrelease(game_map, keysym)
            if not running:
                break
            game_tick(image, game_map)
            present()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene file named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: cubmaze <map_file>", file=sys.stderr)
        return 1
    try:
        game_map = parse_map(args[0])
    except MapError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    try:
        run(game_map)
    except Exception as exc:  # window creation failures surface as library errors
        print(f"Error\nFailed to create window: {exc}", file=sys.stderr)
        return 1
    return 0