from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, List, Optional

from .grid import GridError, as_grid, load_grid
from .model import Border, ScanResult
from .nodes import find_junctions
from .regions import build_regions
from .simplify import simplify_path
from .topology import TopologyWalker

DEFAULT_TOLERANCE = 1.0


def scan_map(
    source,
    simplification_tolerance: float = DEFAULT_TOLERANCE,
    *,
    max_steps: Optional[int] = None,
    log_fn: Optional[Callable[[str], None]] = None,
) -> ScanResult:
    """Vectorise a color-keyed raster into borders, region polygons and adjacency.

    ``source`` may be a PixelGrid, an (H, W, 3|4) numpy array or a PIL image.
    """
    if simplification_tolerance < 0:
        raise ValueError(f"Simplification tolerance must be >= 0, got {simplification_tolerance}")
    grid = as_grid(source)

    def log(msg: str) -> None:
        if log_fn is not None:
            log_fn(f"[scan] {msg}")

    junctions = find_junctions(grid)
    log(f"Found {len(junctions)} junction nodes.")

    walker = TopologyWalker(grid, junctions, max_steps=max_steps, log_fn=log)
    raw = walker.collect_borders()
    log(f"Traced {len(raw)} raw borders.")

    borders: List[Border] = [
        Border(simplify_path(b.path, simplification_tolerance), b.color_left, b.color_right) for b in raw
    ]

    regions, stitch_diagnostics = build_regions(borders, log_fn=log)
    log(f"Built {len(regions)} regions.")

    return ScanResult(
        width=grid.width,
        height=grid.height,
        borders=borders,
        regions=regions,
        junctions=set(junctions),
        raw_border_count=len(raw),
        diagnostics=walker.diagnostics + stitch_diagnostics,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Trace province borders from a color-keyed map image.")
    parser.add_argument("image", type=str, help="Path to the province map (PNG/BMP)")
    parser.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE)
    parser.add_argument("--show", action="store_true", help="Render a debug PNG of the result")
    parser.add_argument(
        "--out",
        type=str,
        default="visualizations/province_scan.png",
        help="Where --show writes the PNG",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the summary line")
    args = parser.parse_args()

    try:
        grid = load_grid(Path(args.image))
        result = scan_map(grid, args.tolerance, log_fn=None if args.quiet else print)
    except (GridError, ValueError) as exc:
        raise SystemExit(f"Scan failed: {exc}")

    print(
        f"{result.width}x{result.height}: {len(result.regions)} regions, "
        f"{len(result.borders)} borders, {len(result.junctions)} junctions, "
        f"{len(result.diagnostics)} diagnostics"
    )
    for diag in result.diagnostics:
        print(f"  {diag.kind}: {diag.message}")

    if args.show:
        from .render import render_scan_png

        out_path = Path(args.out)
        render_scan_png(result, out_path=out_path)
        print(f"Saved scan PNG to {out_path}")


if __name__ == "__main__":
    main()
