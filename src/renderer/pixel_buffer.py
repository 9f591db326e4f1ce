# renderer/pixel_buffer.py
import numpy as np
from core.errors import RenderError
from core.vector import Color

class Tile:
    """
    A rectangular block of pixels [x0, x1) x [y0, y1), with y = 0 the top row.
    """
    __slots__ = ("x0", "x1", "y0", "y1")

    def __init__(self, x0: int, x1: int, y0: int, y1: int):
        self.x0 = x0
        self.x1 = x1
        self.y0 = y0
        self.y1 = y1

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    def pixels(self):
        for y in range(self.y0, self.y1):
            for x in range(self.x0, self.x1):
                yield x, y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return (self.x0, self.x1, self.y0, self.y1) == (other.x0, other.x1, other.y0, other.y1)

    def __hash__(self) -> int:
        return hash((self.x0, self.x1, self.y0, self.y1))

    def __repr__(self) -> str:
        return f"Tile(x={self.x0}:{self.x1}, y={self.y0}:{self.y1})"


def make_tiles(width: int, height: int, tile_size: int):
    """Splits the image into row-major tiles, clipping the ones at the edges."""
    tiles = []
    for y in range(0, height, tile_size):
        for x in range(0, width, tile_size):
            tiles.append(Tile(x, min(x + tile_size, width), y, min(y + tile_size, height)))
    return tiles


class PixelBuffer:
    """
    Row-major RGB image of finalized colors in [0, 1], shape (height, width, 3).

    Every pixel is written exactly once; a second write is a scheduling bug
    and raises RenderError.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.data = np.zeros((height, width, 3), dtype=np.float64)
        self._written = np.zeros((height, width), dtype=bool)

    def write_tile(self, tile: Tile, block: np.ndarray):
        if block.shape != (tile.height, tile.width, 3):
            raise RenderError(f"Block shape {block.shape} does not match {tile}")
        region = self._written[tile.y0:tile.y1, tile.x0:tile.x1]
        if region.any():
            raise RenderError(f"{tile} overlaps pixels that were already written")
        self.data[tile.y0:tile.y1, tile.x0:tile.x1] = block
        region[...] = True

    @property
    def complete(self) -> bool:
        return bool(self._written.all())

    def pixel(self, x: int, y: int) -> Color:
        r, g, b = self.data[y, x]
        return Color(r, g, b)

    def to_uint8(self) -> np.ndarray:
        """Denormalizes to 8-bit channels, 0..255."""
        return (np.clip(self.data, 0.0, 0.999) * 256).astype(np.uint8)
