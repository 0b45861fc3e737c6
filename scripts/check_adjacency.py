#!/usr/bin/env python3
"""Scan a province map and check the topology of the result.

Verifies that every color boundary in the image is walked exactly once by
the raw borders and that the region adjacency graph is symmetric.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from provincemap import GridError, TopologyWalker, find_junctions, load_grid, scan_map
from provincemap.edges import border_edges
from provincemap.topology import edge_coverage


def check_coverage(grid) -> tuple[int, int, int]:
    walker = TopologyWalker(grid, find_junctions(grid))
    counts = edge_coverage(walker.collect_borders())
    expected = set(border_edges(grid))
    missing = len(expected - set(counts))
    extra = len(set(counts) - expected)
    repeated = sum(1 for n in counts.values() if n > 1)
    return missing, extra, repeated


def check_symmetry(adjacency) -> list[tuple]:
    broken = []
    for color, neighbors in adjacency.items():
        for other in neighbors:
            if color not in adjacency.get(other, set()):
                broken.append((color, other))
    return broken


def main() -> None:
    parser = argparse.ArgumentParser(description="Check border coverage and adjacency symmetry.")
    parser.add_argument("path", help="Path to the province map image")
    parser.add_argument("--tolerance", type=float, default=1.0)
    args = parser.parse_args()

    path = Path(args.path)
    if not path.exists():
        raise SystemExit(f"File not found: {path}")
    try:
        grid = load_grid(path)
    except GridError as exc:
        raise SystemExit(f"Failed to read image {path}: {exc}")

    missing, extra, repeated = check_coverage(grid)
    result = scan_map(grid, args.tolerance)
    broken = check_symmetry(result.adjacency())

    print(f"Regions: {len(result.regions)}  borders: {len(result.borders)}")
    print(f"Edges missing: {missing}  extra: {extra}  repeated: {repeated}")
    print(f"Asymmetric adjacencies: {len(broken)}")
    for diag in result.diagnostics:
        print(f"  {diag.kind}: {diag.message}")

    if missing or extra or repeated or broken:
        raise SystemExit(1)
    print("Topology OK.")


if __name__ == "__main__":
    main()
