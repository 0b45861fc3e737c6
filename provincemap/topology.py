"""Junction-to-junction border tracing with island injection.

The walker owns all mutable state of one scan: the visited edge set, the
junction set (which grows when islands are injected) and the diagnostics
collected for borders that had to be discarded.
"""

from __future__ import annotations

from collections import Counter
from typing import Callable, Iterable, List, Optional, Set

from .edges import CARDINALS, DOWN, RIGHT, Direction, Edge, edge_colors, path_edges, step, turn_left, turn_right
from .grid import Color, PixelGrid, Point
from .model import DEAD_END, STEP_CAP, Border, Diagnostic


def _row_major(point: Point):
    return (point[1], point[0])


class TopologyWalker:
    def __init__(
        self,
        grid: PixelGrid,
        junctions: Set[Point],
        *,
        max_steps: Optional[int] = None,
        log_fn: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.grid = grid
        self.junctions = junctions
        self.visited: Set[Edge] = set()
        self.diagnostics: List[Diagnostic] = []
        self.injected: List[Point] = []
        if max_steps is None:
            max_steps = 2 * (grid.width + 2) * (grid.height + 2)
        self.max_steps = max_steps
        self._log_fn = log_fn

    def _log(self, msg: str) -> None:
        if self._log_fn is not None:
            self._log_fn(msg)

    def collect_borders(self) -> List[Border]:
        borders: List[Border] = []
        self.visited.clear()
        self.injected = []

        # Snapshot: the set grows while islands are injected.
        for node in sorted(self.junctions, key=_row_major):
            self._trace_from_node(node, borders)

        before = len(borders)
        for y in range(self.grid.height + 1):
            for x in range(self.grid.width + 1):
                self._check_and_inject_island((x, y), RIGHT, borders)
                self._check_and_inject_island((x, y), DOWN, borders)
        if self.injected:
            self._log(
                f"Injected {len(self.injected)} island nodes ({len(borders) - before} island borders)."
            )
        return borders

    def _check_and_inject_island(self, point: Point, direction: Direction, borders: List[Border]) -> None:
        if Edge.from_step(point, direction) in self.visited:
            return
        left, right = edge_colors(self.grid, point, direction)
        if left == right:
            return
        # Border edge no junction reached: a closed ring with no branch point.
        self.junctions.add(point)
        self.injected.append(point)
        self._trace_from_node(point, borders)

    def _trace_from_node(self, node: Point, borders: List[Border]) -> None:
        for direction in CARDINALS:
            if Edge.from_step(node, direction) in self.visited:
                continue
            left, right = edge_colors(self.grid, node, direction)
            if left == right:
                continue
            path = self._trace_path(node, direction, left, right)
            if path is not None:
                borders.append(Border(path, left, right))

    def _trace_path(self, start: Point, direction: Direction, left: Color, right: Color) -> Optional[List[Point]]:
        path = [start]
        pos = start
        heading = direction
        self.visited.add(Edge.from_step(pos, heading))

        for _ in range(self.max_steps):
            pos = step(pos, heading)
            path.append(pos)
            if pos in self.junctions:
                return path

            for candidate in (heading, turn_left(heading), turn_right(heading)):
                if self._separates(pos, candidate, left, right):
                    self.visited.add(Edge.from_step(pos, candidate))
                    heading = candidate
                    break
            else:
                self._report(DEAD_END, f"Dead end at {pos} tracing from {start}", left, right)
                return None

        self._report(STEP_CAP, f"Trace from {start} exceeded {self.max_steps} steps", left, right)
        return None

    def _separates(self, point: Point, direction: Direction, a: Color, b: Color) -> bool:
        left, right = edge_colors(self.grid, point, direction)
        return (left == a and right == b) or (left == b and right == a)

    def _report(self, kind: str, message: str, left: Color, right: Color) -> None:
        self.diagnostics.append(Diagnostic(kind, message, (left, right)))
        self._log(f"[{kind}] {message}")


def edge_coverage(borders: Iterable[Border]) -> Counter:
    """Count how often each unit edge is walked by a set of raw borders."""
    counts: Counter = Counter()
    for border in borders:
        counts.update(path_edges(border.path))
    return counts
