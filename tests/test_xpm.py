import pytest

from cubmaze.colornames import lookup_color
from cubmaze.xpm import (
    XpmError,
    parse_xpm,
    str_to_wordtab,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]


def test_str_to_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  a\tb   c ") == ["a", "b", "c"]


def test_str_to_wordtab_keeps_other_whitespace_in_words():
    assert str_to_wordtab("a\nb c") == ["a\nb", "c"]


def test_str_to_wordtab_empty():
    assert str_to_wordtab(" \t ") == []


def test_strip_comments_blanks_block_comment_and_keeps_length():
    text = '/* XPM */\n"ab"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "XPM" not in stripped
    assert stripped.endswith('"ab"')


def test_strip_comments_leaves_quoted_markers():
    text = '"/* kept */" /* gone */ "x // kept"'
    stripped = strip_comments(text)
    assert '"/* kept */"' in stripped
    assert '"x // kept"' in stripped
    assert "gone" not in stripped


def test_strip_comments_line_comment():
    text = '"a" // note\n"b"'
    stripped = strip_comments(text)
    assert "note" not in stripped
    assert stripped.endswith('"b"')
    assert len(stripped) == len(text)


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000


def test_text_to_rgb_names():
    assert text_to_rgb("red", None) == lookup_color("red")
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("light", "blue") == lookup_color("light blue")


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_short_codes_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #00FF00", "a c #0000FF", "a"])
    assert image.get_pixel(0, 0) == 0x0000FF


def test_long_codes_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #00FF00", "abc c #0000FF", "abc"])
    assert image.get_pixel(0, 0) == 0x00FF00


def test_undefined_code_is_black():
    image = parse_xpm(["1 1 1 1", "a c #123456", "z"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 1 1", "a c red", "a", "a"],
        ["2 2 1"],
        [],
        ["1 1 1 1", "a s red"],
        ["1 1 1 1", "a c"],
        ["1 2 1 1", "a c red", "a"],
        ["3 1 1 1", "a c red", "aa"],
    ],
)
def test_malformed_xpm_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_file_matches_in_memory(tmp_path):
    source = (
        "/* XPM */\n"
        "static char *sample[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 2 2 1",\n'
        '"a c #FF0000", // red\n'
        '"b c None",\n'
        '"ab",\n'
        '"ba"\n'
        "};\n"
    )
    path = tmp_path / "sample.xpm"
    path.write_text(source, encoding="latin-1")
    from_file = xpm_file_to_image(path)
    from_memory = xpm_to_image(SAMPLE)
    assert (from_file.width, from_file.height) == (from_memory.width, from_memory.height)
    assert from_file.data == from_memory.data


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")