import pytest

from cubmaze.model import MapError, Textures
from cubmaze.textures import (
    check_exist_textures,
    check_textures,
    check_xpm_file,
    convert_rgb,
    handle_color_line,
    handle_texture_line,
    parse_line,
    parse_rgb,
    parse_textures_colors,
)

SCENE = """NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

1111111
1000N01
1111111
"""


def _full_textures():
    return Textures(no="n.xpm", so="s.xpm", we="w.xpm", ea="e.xpm",
                    floor="1,2,3", ceiling="4,5,6")


def test_texture_line_sets_trimmed_path():
    textures = Textures()
    handle_texture_line(textures, "NO   ./path/north.xpm")
    assert textures.no == "./path/north.xpm"
    assert textures.so is None


def test_duplicate_texture_raises():
    textures = Textures()
    handle_texture_line(textures, "WE ./a.xpm")
    with pytest.raises(MapError, match="Duplicate WE"):
        handle_texture_line(textures, "WE ./b.xpm")


def test_unrelated_line_changes_nothing():
    textures = Textures()
    handle_texture_line(textures, "1111")
    handle_color_line(textures, "1111")
    assert textures == Textures()


def test_color_line_sets_floor():
    textures = Textures()
    handle_color_line(textures, "F 220,100,0")
    assert textures.floor == "220,100,0"
    assert textures.floor_rgb == convert_rgb(220, 100, 0)
    assert textures.ceiling_rgb == -1


def test_duplicate_ceiling_raises():
    textures = Textures()
    handle_color_line(textures, "C 1,2,3")
    with pytest.raises(MapError, match="Duplicate C"):
        handle_color_line(textures, "C 4,5,6")


def test_color_out_of_range_raises():
    with pytest.raises(MapError):
        handle_color_line(Textures(), "F 256,0,0")


def test_parse_line_trims_whitespace():
    textures = Textures()
    parse_line(textures, "  SO  ./s.xpm \n")
    parse_line(textures, "   \n")
    assert textures.so == "./s.xpm"
    assert textures.no is None


def test_convert_rgb_channels_round_trip():
    value = convert_rgb(12, 34, 56)
    assert (value >> 16) & 0xFF == 12
    assert (value >> 8) & 0xFF == 34
    assert value & 0xFF == 56


def test_parse_rgb_white():
    assert parse_rgb("255,255,255") == 0xFFFFFF


def test_parse_rgb_skips_empty_fields():
    assert parse_rgb("1,,2,3") == convert_rgb(1, 2, 3)


def test_parse_rgb_reads_leading_digits():
    assert parse_rgb("12abc, 7,0") == convert_rgb(12, 7, 0)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "-1,0,0", "0,0,300", ""])
def test_parse_rgb_rejects(text):
    with pytest.raises(MapError):
        parse_rgb(text)


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 999)])
def test_convert_rgb_rejects_out_of_range(channels):
    with pytest.raises(MapError):
        convert_rgb(*channels)


def test_check_textures_missing_raises():
    textures = _full_textures()
    textures.ceiling = None
    with pytest.raises(MapError, match="Missing texture paths"):
        check_textures(textures)


def test_parse_textures_colors_reads_scene(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text(SCENE)
    textures = parse_textures_colors(scene)
    assert textures.no == "./textures/north.xpm"
    assert textures.ea == "./textures/east.xpm"
    assert textures.floor_rgb == convert_rgb(220, 100, 0)
    assert textures.ceiling_rgb == convert_rgb(225, 30, 0)


def test_parse_textures_colors_missing_colour(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text(SCENE.replace("C 225,30,0\n", ""))
    with pytest.raises(MapError, match="Missing"):
        parse_textures_colors(scene)


def test_parse_textures_colors_duplicate(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text("NO a.xpm\n" + SCENE)
    with pytest.raises(MapError, match="Duplicate NO"):
        parse_textures_colors(scene)


def test_parse_textures_colors_missing_file(tmp_path):
    with pytest.raises(MapError):
        parse_textures_colors(tmp_path / "absent.cub")


def test_check_exist_textures_reports_first_missing(tmp_path):
    north = tmp_path / "n.xpm"
    north.write_text("x")
    textures = _full_textures()
    textures.no = str(north)
    textures.so = str(tmp_path / "missing.xpm")
    with pytest.raises(MapError, match="SO"):
        check_exist_textures(textures)


@pytest.mark.parametrize("path", ["", "xpm", "wall.png", "wall.Xpm", "wall.xpm.bak"])
def test_check_xpm_file_rejects(path):
    with pytest.raises(MapError):
        check_xpm_file(path)