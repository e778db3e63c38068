import math

import pytest

from cubmaze.mapparse import (
    check_invalid_char,
    check_single_player,
    fill_voids_with_walls,
    find_player_position,
    format_map,
    init_player_dir,
    is_out_of_bounds,
    is_touching_void,
    parse_map,
    read_map_lines,
    validate_map,
    validate_void_surroundings,
)
from cubmaze.model import GameMap, MapError

HEADER = (
    "NO ./textures/north.xpm\n"
    "SO ./textures/south.xpm\n"
    "WE ./textures/west.xpm\n"
    "EA ./textures/east.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
)


def make_map(rows):
    return GameMap(grid=[list(row) for row in rows])


def test_read_map_lines_skips_header_and_pads():
    lines = ["NO a.xpm\n", "\n", "111\n", "1N01\n", "111"]
    grid = read_map_lines(lines)
    assert ["".join(row) for row in grid] == ["111 ", "1N01", "111 "]


def test_read_map_lines_starts_on_leading_space():
    grid = read_map_lines(["F 1,2,3\n", "  11\n", "1001\n"])
    assert ["".join(row) for row in grid] == ["  11", "1001"]


def test_read_map_lines_empty_input():
    assert read_map_lines(["NO a\n", "SO b\n"]) == []


def test_read_map_lines_too_many_lines():
    with pytest.raises(MapError):
        read_map_lines(["1\n"] * 1025)


def test_is_out_of_bounds():
    assert is_out_of_bounds(-1, 0, 3, 3)
    assert is_out_of_bounds(0, 3, 3, 3)
    assert not is_out_of_bounds(2, 2, 3, 3)


def test_is_touching_void():
    game_map = make_map(["111", "1 1", "101"])
    assert is_touching_void(game_map, 1, 2)
    assert not is_touching_void(game_map, 0, 0) or game_map.cell(1, 1) == " "
    closed = make_map(["0"])
    assert is_touching_void(closed, 0, 0) is False


def test_validate_void_surroundings_open_map():
    with pytest.raises(MapError):
        validate_void_surroundings(make_map(["1111", "10 1", "1111"]))


def test_validate_void_surroundings_closed_map():
    game_map = make_map(["  111", "111N1", "11111"])
    validate_void_surroundings(game_map)
    assert game_map.cell(3, 1) == "N"


def test_fill_voids_with_walls():
    rows = [" 111", "1001", "111"]
    game_map = make_map(rows)
    fill_voids_with_walls(game_map)
    assert all(" " not in row for row in game_map.grid)
    assert all(len(row) == 4 for row in game_map.grid)
    assert game_map.cell(1, 1) == "0"


def test_check_invalid_char_rejects_unknown():
    with pytest.raises(MapError):
        check_invalid_char(make_map(["111", "1X1", "111"]))


def test_check_invalid_char_accepts_whitespace():
    game_map = make_map(["1\t1", "1N1\r"])
    check_invalid_char(game_map)
    assert game_map.cell(1, 0) == "\t"


def test_check_single_player_none():
    with pytest.raises(MapError, match="No player"):
        check_single_player(make_map(["111", "101"]))


def test_check_single_player_multiple():
    with pytest.raises(MapError, match="Multiple"):
        check_single_player(make_map(["1N1", "1S1"]))


@pytest.mark.parametrize(
    "char, angle",
    [("N", 3 * math.pi / 2), ("S", math.pi / 2), ("E", 0.0), ("W", math.pi)],
)
def test_find_player_position(char, angle):
    game_map = make_map(["1111", f"10{char}1", "1111"])
    find_player_position(game_map)
    assert (game_map.player_x, game_map.player_y) == (2.0, 1.0)
    assert game_map.player_dir == char
    assert game_map.player_angle == pytest.approx(angle)


def test_find_player_position_missing():
    with pytest.raises(MapError):
        find_player_position(make_map(["111"]))


@pytest.mark.parametrize(
    "char, view",
    [
        ("N", (0.0, -1.0, 0.66, 0.0)),
        ("S", (0.0, 1.0, -0.66, 0.0)),
        ("E", (1.0, 0.0, 0.0, -0.66)),
        ("W", (-1.0, 0.0, 0.0, 0.66)),
    ],
)
def test_init_player_dir(char, view):
    game_map = GameMap(player_dir=char)
    init_player_dir(game_map)
    got = (game_map.dir_x, game_map.dir_y, game_map.plane_x, game_map.plane_y)
    assert got == pytest.approx(view)


def test_init_player_dir_invalid():
    with pytest.raises(MapError):
        init_player_dir(GameMap(player_dir="Q"))


def test_format_map():
    text = format_map(make_map(["11", "N1"]))
    assert text == "=== MAP ===\n11\nN1\n===========\n"


def test_validate_map_closes_and_places_player():
    game_map = make_map([" 111 ", "11E01", "11111"])
    validate_map(game_map)
    assert game_map.player_dir == "E"
    assert (game_map.player_x, game_map.player_y) == (2.0, 1.0)
    assert game_map.dir_x == pytest.approx(1.0)
    assert all(" " not in row for row in game_map.grid)


def test_validate_map_rejects_open_map():
    with pytest.raises(MapError):
        validate_map(make_map(["111", "1N ", "111"]))


def test_parse_map_reads_scene(tmp_path):
    scene = tmp_path / "level.cub"
    scene.write_text(HEADER + "  1111\n111001\n10N001\n111111\n")
    game_map = parse_map(scene)
    assert game_map.textures.no == "./textures/north.xpm"
    assert game_map.textures.floor_rgb == (220 << 16) | (100 << 8)
    assert game_map.height == 4
    assert game_map.width == 6
    assert game_map.player_dir == "N"
    assert (game_map.player_x, game_map.player_y) == (2.0, 2.0)
    assert "".join(game_map.grid[0]) == "111111"


def test_parse_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        parse_map(tmp_path / "absent.cub")


def test_parse_map_missing_texture(tmp_path):
    scene = tmp_path / "level.cub"
    scene.write_text("NO a.xpm\nF 1,2,3\nC 4,5,6\n111\n1N1\n111\n")
    with pytest.raises(MapError, match="Missing"):
        parse_map(scene)


def test_parse_map_without_player(tmp_path):
    scene = tmp_path / "level.cub"
    scene.write_text(HEADER + "111\n101\n111\n")
    with pytest.raises(MapError, match="No player"):
        parse_map(scene)