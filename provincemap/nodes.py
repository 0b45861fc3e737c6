from __future__ import annotations

from typing import Set

import numpy as np

from .grid import PixelGrid, Point


def is_junction(grid: PixelGrid, point: Point) -> bool:
    """A corner where 3+ colors meet, or 2 colors meet diagonally."""
    top_left, top_right, bottom_left, bottom_right = grid.corner_block(point)
    distinct = len({top_left, top_right, bottom_left, bottom_right})
    if distinct > 2:
        return True
    # Checkerboard: no single dividing edge, so it has to act as a branch point.
    return (
        distinct == 2
        and top_left == bottom_right
        and top_right == bottom_left
        and top_left != top_right
    )


def find_junctions(grid: PixelGrid) -> Set[Point]:
    """Scan every corner, including the ring one unit outside the image."""
    padded = np.pad(grid.labels, 1, constant_values=-1)
    # Index [cy, cx] of each slice is corner (cx, cy).
    tl = padded[:-1, :-1]
    tr = padded[:-1, 1:]
    bl = padded[1:, :-1]
    br = padded[1:, 1:]

    distinct = np.ones(tl.shape, dtype=np.int8)
    distinct += tr != tl
    distinct += (bl != tl) & (bl != tr)
    distinct += (br != tl) & (br != tr) & (br != bl)
    checkerboard = (tl == br) & (tr == bl) & (tl != tr)

    ys, xs = np.nonzero((distinct > 2) | checkerboard)
    return {(int(x), int(y)) for x, y in zip(xs, ys)}
