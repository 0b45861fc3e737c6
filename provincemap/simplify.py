from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .grid import Point


def point_segment_distance(point, start, end) -> float:
    """Distance from ``point`` to the segment ``start``-``end`` (not the infinite line)."""
    px, py = point
    sx, sy = start
    ex, ey = end
    vx, vy = ex - sx, ey - sy
    length_sq = vx * vx + vy * vy
    if length_sq == 0:
        return math.hypot(px - sx, py - sy)
    t = ((px - sx) * vx + (py - sy) * vy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(px - (sx + t * vx), py - (sy + t * vy))


def simplify_path(points: Sequence[Point], tolerance: float) -> List[Point]:
    """Ramer-Douglas-Peucker reduction that always keeps both endpoints.

    Uses an explicit stack so long pixel borders do not hit the recursion
    limit. Among equally distant candidates the lowest index wins.
    """
    if tolerance < 0:
        raise ValueError(f"Simplification tolerance must be >= 0, got {tolerance}")
    pts = list(points)
    if len(pts) < 3:
        return pts

    keep = [False] * len(pts)
    keep[0] = True
    keep[-1] = True
    stack: List[Tuple[int, int]] = [(0, len(pts) - 1)]
    while stack:
        first, last = stack.pop()
        if last <= first + 1:
            continue
        max_dist = 0.0
        index = first
        for i in range(first + 1, last):
            d = point_segment_distance(pts[i], pts[first], pts[last])
            if d > max_dist:
                max_dist = d
                index = i
        if max_dist > tolerance:
            keep[index] = True
            stack.append((index, last))
            stack.append((first, index))

    return [p for p, k in zip(pts, keep) if k]
