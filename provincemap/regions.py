from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

from .grid import VOID, Color, Point
from .model import OPEN_LOOP, Border, Diagnostic, Region
from .stitch import orient_segments, stitch_polygons


def _register(neighbors: Dict[Color, Set[Color]], me: Color, other: Color) -> None:
    if other == VOID:
        return
    neighbors.setdefault(me, set()).add(other)


def register_neighbors(borders: Iterable[Border]) -> Dict[Color, Set[Color]]:
    neighbors: Dict[Color, Set[Color]] = {}
    for border in borders:
        _register(neighbors, border.color_left, border.color_right)
        _register(neighbors, border.color_right, border.color_left)
    return neighbors


def polygon_centroid(polygons: Iterable[List[Point]]) -> Tuple[float, float]:
    """Unweighted mean of every vertex; good enough to place a label."""
    sx = sy = 0.0
    count = 0
    for poly in polygons:
        for x, y in poly:
            sx += x
            sy += y
            count += 1
    if count == 0:
        return (0.0, 0.0)
    return (sx / count, sy / count)


def signed_area(polygon: List[Point]) -> float:
    """Shoelace area in image coordinates (negative for the region's own loops)."""
    total = 0.0
    for (x0, y0), (x1, y1) in zip(polygon, polygon[1:] + polygon[:1]):
        total += x0 * y1 - x1 * y0
    return total / 2.0


def build_regions(
    borders: List[Border],
    *,
    log_fn: Optional[Callable[[str], None]] = None,
) -> Tuple[Dict[Color, Region], List[Diagnostic]]:
    neighbors = register_neighbors(borders)
    diagnostics: List[Diagnostic] = []
    regions: Dict[Color, Region] = {}

    for color, segments in orient_segments(borders).items():
        if color == VOID:
            continue
        outcome = stitch_polygons(segments, log_fn=log_fn)
        for idx in outcome.open_loops:
            poly = outcome.polygons[idx]
            diagnostics.append(
                Diagnostic(OPEN_LOOP, f"Region {color} loop {idx} is open ({poly[0]} -> {poly[-1]})", (color,))
            )
        regions[color] = Region(
            color=color,
            polygons=outcome.polygons,
            neighbors=neighbors.get(color, set()),
            centroid=polygon_centroid(outcome.polygons),
            open_polygons=list(outcome.open_loops),
        )
    return regions, diagnostics
