from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Set, Tuple

import numpy as np
from PIL import Image


Color = Tuple[int, int, int, int]
Point = Tuple[int, int]

# Everything outside the map, and every fully transparent pixel, reads as VOID.
VOID: Color = (0, 0, 0, 0)


class GridError(ValueError):
    """Raised when a raster cannot be scanned (missing, empty or malformed)."""


def _normalise_pixels(pixels: np.ndarray) -> np.ndarray:
    if pixels is None:
        raise GridError("No pixel data supplied.")
    arr = np.asarray(pixels)
    if arr.ndim != 3:
        raise GridError(f"Expected an (H, W, 3) or (H, W, 4) array, got shape {arr.shape}.")
    height, width, channels = arr.shape
    if height == 0 or width == 0:
        raise GridError(f"Grid must be non-empty, got {width}x{height}.")
    if channels not in (3, 4):
        raise GridError(f"Expected 3 or 4 color channels, got {channels}.")
    if not np.issubdtype(arr.dtype, np.integer):
        raise GridError(f"Expected integer color channels, got dtype {arr.dtype}.")
    arr = arr.astype(np.int64)
    if arr.min() < 0 or arr.max() > 255:
        raise GridError(f"Color channels must lie in 0..255, got {arr.min()}..{arr.max()}.")
    if channels == 3:
        alpha = np.full((height, width, 1), 255, dtype=np.int64)
        arr = np.concatenate([arr, alpha], axis=2)
    transparent = arr[:, :, 3] == 0
    arr[transparent] = 0
    return arr


class PixelGrid:
    """Read-only color raster with a VOID-returning accessor.

    Colors are kept as shared RGBA tuples so that equality checks between
    neighbouring pixels stay cheap in the tracing loops.
    """

    def __init__(self, pixels: np.ndarray) -> None:
        arr = _normalise_pixels(pixels)
        self.height, self.width = int(arr.shape[0]), int(arr.shape[1])

        packed = (
            (arr[:, :, 0] << 24) | (arr[:, :, 1] << 16) | (arr[:, :, 2] << 8) | arr[:, :, 3]
        )
        keys, inverse = np.unique(packed.ravel(), return_inverse=True)
        palette: List[Color] = [
            (int(k >> 24) & 255, int(k >> 16) & 255, int(k >> 8) & 255, int(k) & 255) for k in keys
        ]
        index = inverse.reshape(self.height, self.width)
        self._rows: List[List[Color]] = [[palette[i] for i in row] for row in index.tolist()]
        # Palette indices per pixel, VOID as -1 to match the padding outside the map.
        self.labels = np.where(packed == 0, -1, index).astype(np.int64)
        self._palette = palette

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelGrid":
        if image is None:
            raise GridError("No image supplied.")
        return cls(np.array(image.convert("RGBA"), dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Sequence[int]]]) -> "PixelGrid":
        if not rows or not rows[0]:
            raise GridError("Grid must be non-empty.")
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise GridError(f"Rows have inconsistent widths: {sorted(widths)}")
        return cls(np.array(rows, dtype=np.int64))

    def color_at(self, x: int, y: int) -> Color:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return VOID
        return self._rows[y][x]

    def colors(self) -> Set[Color]:
        return {c for c in self._palette if c != VOID}

    def corner_block(self, point: Point) -> Tuple[Color, Color, Color, Color]:
        """Return (top_left, top_right, bottom_left, bottom_right) around a corner."""
        x, y = point
        return (
            self.color_at(x - 1, y - 1),
            self.color_at(x, y - 1),
            self.color_at(x - 1, y),
            self.color_at(x, y),
        )

    def __repr__(self) -> str:
        return f"PixelGrid({self.width}x{self.height}, colors={len(self._palette)})"


def as_grid(source) -> PixelGrid:
    if isinstance(source, PixelGrid):
        return source
    if source is None:
        raise GridError("No grid supplied.")
    if isinstance(source, Image.Image):
        return PixelGrid.from_image(source)
    return PixelGrid(source)


def load_grid(path: Path) -> PixelGrid:
    """Open an image file and wrap it as a PixelGrid."""
    path = Path(path)
    if not path.exists():
        raise GridError(f"Image not found: {path}")
    with Image.open(path) as img:
        return PixelGrid.from_image(img)
