"""Parsing of texture paths and floor and ceiling colours in a scene file."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

from cubmaze.model import MapError, Textures

_TRIM = " \t\n"
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_WALL_IDS = ("NO", "SO", "WE", "EA")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def handle_texture_line(textures: Textures, line: str) -> None:
    """Record a wall texture path from a trimmed ``NO``/``SO``/``WE``/``EA`` line."""
    for ident in _WALL_IDS:
        if line.startswith(ident):
            attr = ident.lower()
            if getattr(textures, attr) is not None:
                raise MapError(f"Duplicate {ident}")
            setattr(textures, attr, line[2:].strip(_TRIM))
            return


def handle_color_line(textures: Textures, line: str) -> None:
    """Record the floor or ceiling colour from a trimmed ``F``/``C`` line."""
    for prefix, name in (("F ", "floor"), ("C ", "ceiling")):
        if line.startswith(prefix):
            if getattr(textures, name) is not None:
                raise MapError(f"Duplicate {prefix.strip()}")
            value = line[1:].strip(_TRIM)
            rgb = parse_rgb(value)
            setattr(textures, name, value)
            setattr(textures, f"{name}_rgb", rgb)
            return


def parse_line(textures: Textures, line: str) -> None:
    """Apply one line of a scene file; blank and other lines are ignored."""
    trimmed = line.strip(_TRIM)
    if not trimmed:
        return
    handle_texture_line(textures, trimmed)
    handle_color_line(textures, trimmed)


def check_textures(textures: Textures) -> None:
    """Raise MapError unless every texture path and colour is set."""
    required = (textures.no, textures.so, textures.we, textures.ea,
                textures.floor, textures.ceiling)
    if any(not value for value in required):
        raise MapError("Missing texture paths")


def parse_textures_colors(path: str | PathLike[str]) -> Textures:
    """Read the texture and colour lines of a scene file."""
    textures = Textures()
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                parse_line(textures, line)
    except OSError as exc:
        raise MapError(f"Error opening color file: {exc}") from exc
    check_textures(textures)
    return textures


def convert_rgb(r: int, g: int, b: int) -> int:
    """Pack three channel values of 0..255 into 0xRRGGBB."""
    if any(not 0 <= channel <= 255 for channel in (r, g, b)):
        raise MapError("RGB values must be between 0 and 255")
    return (r << 16) | (g << 8) | b


def parse_rgb(text: str) -> int:
    """Parse ``R,G,B`` into 0xRRGGBB; empty fields between commas are skipped."""
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise MapError(f"Invalid RGB format: {text!r}")
    r, g, b = (_atoi(part) for part in parts)
    return convert_rgb(r, g, b)


def check_exist_textures(textures: Textures) -> None:
    """Raise MapError if any wall texture file cannot be opened."""
    for ident in _WALL_IDS:
        path = getattr(textures, ident.lower())
        try:
            with open(path, "rb"):
                pass
        except (OSError, TypeError) as exc:
            raise MapError(f"Error opening {ident} texture file") from exc


def check_xpm_file(path: str) -> None:
    """Raise MapError unless ``path`` ends in ``.xpm`` or ``.XPM``."""
    if not path or len(path) < 4:
        raise MapError("Invalid file path")
    if path[-4:] not in (".xpm", ".XPM"):
        raise MapError("File is not a valid XPM file")