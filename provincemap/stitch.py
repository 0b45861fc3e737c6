"""Stitch per-region border segments into closed loops.

Each border is handed to its left region as traced and to its right region
reversed, so every region sees its own boundary with the region interior on
the walker's left. Loops are then chained by looking up the segment that
starts where the current loop ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from .grid import Color, Point
from .model import Border

Segment = List[Point]


@dataclass
class StitchOutcome:
    polygons: List[Segment] = field(default_factory=list)
    # Indices into ``polygons`` that never returned to their start point.
    open_loops: List[int] = field(default_factory=list)


def orient_segments(borders: Iterable[Border]) -> Dict[Color, List[Segment]]:
    segments: Dict[Color, List[Segment]] = {}
    for border in borders:
        segments.setdefault(border.color_left, []).append(list(border.path))
        segments.setdefault(border.color_right, []).append(border.reversed().path)
    return segments


def stitch_polygons(
    segments: List[Segment],
    *,
    log_fn: Optional[Callable[[str], None]] = None,
) -> StitchOutcome:
    outcome = StitchOutcome()
    starts_at: Dict[Point, List[int]] = {}
    for idx, seg in enumerate(segments):
        if seg:
            starts_at.setdefault(seg[0], []).append(idx)

    used = [not seg for seg in segments]
    for first in range(len(segments)):
        if used[first]:
            continue
        used[first] = True
        loop = list(segments[first])
        end = loop[-1]

        closed = True
        while end != loop[0]:
            nxt = _next_unused(starts_at.get(end, ()), used)
            if nxt is None:
                closed = False
                break
            used[nxt] = True
            loop.extend(segments[nxt][1:])
            end = loop[-1]

        if not closed:
            outcome.open_loops.append(len(outcome.polygons))
            if log_fn is not None:
                log_fn(f"Loop starting at {loop[0]} stopped open at {end} ({len(loop)} points)")
        outcome.polygons.append(loop)
    return outcome


def _next_unused(candidates: Iterable[int], used: List[bool]) -> Optional[int]:
    for idx in candidates:
        if not used[idx]:
            return idx
    return None
