"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from os import PathLike
from pathlib import Path

from cubmaze.colornames import lookup_color
from cubmaze.image import Image

_TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63
_WORD_SPLIT = re.compile(r"[ \t]+")
_ATOI = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data is malformed."""


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def _find_unquoted(text: str, pattern: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping the text length."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _hex_prefix(text: str) -> int:
    match = _HEX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Resolve an XPM colour spec to 0xRRGGBB, -1 for ``None``, 0 if unknown.

    A name split over two words is joined with ``end`` before lookup.
    """
    if name.startswith("#"):
        return _hex_prefix(name[1:])
    if end:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what}") from None


def _read_palette(rows: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        key = line[:cpp]
        spec = str_to_wordtab(line[cpp:])
        try:
            index = spec.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if index + 1 >= len(spec):
            raise XpmError(f"colour definition without a colour: {line!r}")
        following = spec[index + 2] if index + 2 < len(spec) else None
        rgb = text_to_rgb(spec[index + 1], following)
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)
    return palette


def parse_xpm(lines: Sequence[str]) -> Image:
    """Build an image from XPM strings: header, colours, then pixel rows."""
    rows = iter(lines)
    header = str_to_wordtab(_next_line(rows, "header"))
    if len(header) < 4:
        raise XpmError(f"XPM header needs four values, got {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header values: {header[:4]!r}")
    palette = _read_palette(rows, ncolors, cpp)
    image = Image(width, height, 32, 0)
    for y in range(height):
        line = _next_line(rows, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width} pixels")
        keys = (line[start:start + cpp] for start in range(0, width * cpp, cpp))
        for x, key in enumerate(keys):
            color = palette.get(key, 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(data: Sequence[str]) -> Image:
    """Build an image from an in-memory list of XPM strings."""
    return parse_xpm(data)


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and build an image from its quoted strings."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(_QUOTED.findall(strip_comments(text)))