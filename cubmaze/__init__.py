"""Grid maze explorer: .cub scene parsing, movement, XPM loading and a minimap view."""

__version__ = "0.1.0"