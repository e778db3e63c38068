"""In-memory pixel images and colour conversion for display visuals."""

from __future__ import annotations


class Image:
    """A packed pixel buffer of ``width`` x ``height`` pixels.

    Rows are padded to 32 bits, ``size_line`` bytes each. ``endian`` is
    0 for little-endian pixel storage and 1 for big-endian.
    """

    __slots__ = ("width", "height", "bpp", "endian", "size_line", "data")

    def __init__(self, width: int, height: int, bpp: int = 32, endian: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bpp <= 0 or bpp % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {bpp}")
        if endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {endian}")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.endian = endian
        self.size_line = ((width * bpp + 31) // 32) * 4
        self.data = bytearray(self.size_line * height)

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        return y * self.size_line + x * (self.bpp // 8)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); points outside the image are ignored."""
        if not self._inside(x, y):
            return
        opp = self.bpp // 8
        start = self._offset(x, y)
        value = color & ((1 << self.bpp) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value stored at (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        opp = self.bpp // 8
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], self._byteorder)

    def clear(self) -> None:
        """Set every byte of the image to zero."""
        self.data[:] = bytes(len(self.data))


def _shift_and_bits(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask:#x}")
    offset = 0
    while not mask & 1:
        mask >>= 1
        offset += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return offset, bits


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, int, int, int, int, int]:
    """Return (red offset, red bits, green offset, green bits, blue offset, blue bits)."""
    red = _shift_and_bits(red_mask)
    green = _shift_and_bits(green_mask)
    blue = _shift_and_bits(blue_mask)
    return (*red, *green, *blue)


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual of ``depth`` bits."""
    if depth >= 24:
        return color
    red_off, red_bits, green_off, green_bits, blue_off, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_off)
        + ((green >> (16 - green_bits)) << green_off)
        + ((blue >> (16 - blue_bits)) << blue_off)
    )