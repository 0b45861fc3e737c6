from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from .grid import Color, Point

DEAD_END = "dead_end"
STEP_CAP = "step_cap"
OPEN_LOOP = "open_loop"


@dataclass
class Border:
    """Polyline between two regions; ``color_left`` lies on the walker's left."""

    path: List[Point]
    color_left: Color
    color_right: Color

    @property
    def colors(self) -> frozenset:
        return frozenset((self.color_left, self.color_right))

    def reversed(self) -> "Border":
        return Border(list(reversed(self.path)), self.color_right, self.color_left)


@dataclass(frozen=True)
class Diagnostic:
    kind: str
    message: str
    colors: Tuple[Color, ...] = ()


@dataclass
class Region:
    color: Color
    polygons: List[List[Point]] = field(default_factory=list)
    neighbors: Set[Color] = field(default_factory=set)
    centroid: Tuple[float, float] = (0.0, 0.0)
    # Indices into ``polygons`` of loops the stitcher could not close.
    open_polygons: List[int] = field(default_factory=list)


@dataclass
class ScanResult:
    width: int
    height: int
    borders: List[Border]
    regions: Dict[Color, Region]
    junctions: Set[Point] = field(default_factory=set)
    raw_border_count: int = 0
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def neighbors_of(self, color: Color) -> Set[Color]:
        region = self.regions.get(color)
        if region is None:
            return set()
        return set(region.neighbors)

    def adjacency(self) -> Dict[Color, Set[Color]]:
        return {color: set(region.neighbors) for color, region in self.regions.items()}
