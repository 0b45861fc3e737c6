"""Province map vectoriser: color-keyed raster -> borders, polygons, adjacency."""

from .edges import Edge, edge_colors
from .grid import VOID, GridError, PixelGrid, load_grid
from .model import Border, Diagnostic, Region, ScanResult
from .nodes import find_junctions, is_junction
from .regions import build_regions, polygon_centroid, register_neighbors
from .scanner import DEFAULT_TOLERANCE, scan_map
from .simplify import point_segment_distance, simplify_path
from .stitch import orient_segments, stitch_polygons
from .topology import TopologyWalker, edge_coverage

__all__ = [
    "Border",
    "DEFAULT_TOLERANCE",
    "Diagnostic",
    "Edge",
    "GridError",
    "PixelGrid",
    "Region",
    "ScanResult",
    "TopologyWalker",
    "VOID",
    "build_regions",
    "edge_colors",
    "edge_coverage",
    "find_junctions",
    "is_junction",
    "load_grid",
    "orient_segments",
    "point_segment_distance",
    "polygon_centroid",
    "register_neighbors",
    "render_scan_png",
    "scan_map",
    "simplify_path",
    "stitch_polygons",
]


def __getattr__(name: str):
    if name == "render_scan_png":
        from .render import render_scan_png

        return render_scan_png
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
