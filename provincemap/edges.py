"""Unit grid edges and the fixed left/right color lookup used while tracing.

Directions are ``(dx, dy)`` steps in image space, with y pointing down, so
"left" of a heading is the side a walker would see on their left hand when
looking at the map on screen.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Tuple

from .grid import Color, PixelGrid, Point

Direction = Tuple[int, int]

RIGHT: Direction = (1, 0)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
UP: Direction = (0, -1)

CARDINALS: Tuple[Direction, ...] = (RIGHT, DOWN, LEFT, UP)

HORIZONTAL = "h"
VERTICAL = "v"


def turn_left(direction: Direction) -> Direction:
    dx, dy = direction
    return (dy, -dx)


def turn_right(direction: Direction) -> Direction:
    dx, dy = direction
    return (-dy, dx)


def step(point: Point, direction: Direction) -> Point:
    return (point[0] + direction[0], point[1] + direction[1])


class Edge(NamedTuple):
    """A unit edge anchored at its upper (vertical) or left (horizontal) end."""

    x: int
    y: int
    axis: str

    @classmethod
    def from_step(cls, point: Point, direction: Direction) -> "Edge":
        x, y = point
        if direction == RIGHT:
            return cls(x, y, HORIZONTAL)
        if direction == LEFT:
            return cls(x - 1, y, HORIZONTAL)
        if direction == DOWN:
            return cls(x, y, VERTICAL)
        if direction == UP:
            return cls(x, y - 1, VERTICAL)
        raise ValueError(f"Not a cardinal direction: {direction!r}")


def edge_colors(grid: PixelGrid, point: Point, direction: Direction) -> Tuple[Color, Color]:
    """Return (left, right) colors of the edge leaving ``point`` along ``direction``."""
    x, y = point
    if direction == RIGHT:
        return grid.color_at(x, y - 1), grid.color_at(x, y)
    if direction == DOWN:
        return grid.color_at(x, y), grid.color_at(x - 1, y)
    if direction == LEFT:
        return grid.color_at(x - 1, y), grid.color_at(x - 1, y - 1)
    if direction == UP:
        return grid.color_at(x - 1, y - 1), grid.color_at(x, y - 1)
    raise ValueError(f"Not a cardinal direction: {direction!r}")


def path_edges(path) -> Iterator[Edge]:
    """Yield the unit edges walked by a raw, grid-adjacent polyline."""
    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        yield Edge.from_step((x0, y0), (x1 - x0, y1 - y0))


def border_edges(grid: PixelGrid) -> Iterator[Edge]:
    """Brute-force every unit edge that separates two different colors."""
    for y in range(grid.height + 1):
        for x in range(grid.width + 1):
            for direction in (RIGHT, DOWN):
                left, right = edge_colors(grid, (x, y), direction)
                if left != right:
                    yield Edge.from_step((x, y), direction)
