from __future__ import annotations

import os
from pathlib import Path

from .grid import Color
from .model import ScanResult


def _rgba(color: Color) -> tuple[float, float, float, float]:
    return tuple(c / 255.0 for c in color)


def render_scan_png(
    result: ScanResult,
    *,
    out_path: Path,
    show_junctions: bool = True,
    show_centroids: bool = True,
) -> None:
    """Debug view: filled region polygons, borders, junctions and centroids."""
    os.environ.setdefault("MPLCONFIGDIR", "/tmp/mpl")
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from matplotlib.patches import Polygon

    scale = 8.0 / max(result.width, result.height, 1)
    fig, ax = plt.subplots(figsize=(max(result.width * scale, 2), max(result.height * scale, 2)))
    ax.set_aspect("equal")

    for color, region in result.regions.items():
        for idx, poly in enumerate(region.polygons):
            if len(poly) < 3:
                continue
            patch = Polygon(
                poly,
                closed=idx not in region.open_polygons,
                facecolor=_rgba(color),
                edgecolor="none",
            )
            ax.add_patch(patch)

    for border in result.borders:
        xs = [p[0] for p in border.path]
        ys = [p[1] for p in border.path]
        ax.plot(xs, ys, color="#5a4f4b", linewidth=1.0)

    if show_junctions and result.junctions:
        jx = [p[0] for p in result.junctions]
        jy = [p[1] for p in result.junctions]
        ax.scatter(jx, jy, s=6, c="#c0392b", zorder=3)

    if show_centroids:
        for region in result.regions.values():
            cx, cy = region.centroid
            ax.plot(cx, cy, marker="+", color="black", markersize=4)

    ax.set_xlim(-1, result.width + 1)
    # Image space: y grows downward.
    ax.set_ylim(result.height + 1, -1)
    ax.axis("off")

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=160)
    plt.close(fig)
