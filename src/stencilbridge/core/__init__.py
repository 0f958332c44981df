"""Core processing algorithms for stencilbridge.

This module contains the core algorithms for:

- Path-data tokenizing and parsing (contours, coordinates, bounds)
- Path extraction (document -> sub-paths)
- Island classification (element grouping, bounding-box containment)
- Bridge planning (area tiers, direction priority, canvas clamping)
- Stencil composition (paths layer plus bridges layer)

All services are designed to be:
- Stateless (safe to share across documents and threads)
- Pure (no I/O, no randomness)
- Best-effort (malformed input degrades to empty results, never raises)

Key functions:
- tokenize_path_data / parse_path_data: Structured view of path data
- split_contours: Split path data at move commands
- estimate_bounds: Bounding box from coordinate pairs
- read_canvas / canvas_size: Canvas description of a document

Key classes:
- PathExtractor: Turns a document into sub-paths
- IslandClassifier: Marks sub-paths as inner or outer
- BridgePlanner: Plans bridges for islands
- StencilComposer: Writes the stencil document
- StencilProcessor: Runs the whole pipeline
"""

from stencilbridge.core.classifier import (
    IslandClassifier,
    IslandSummary,
    get_islands,
    summarize,
)
from stencilbridge.core.composer import (
    CanvasInfo,
    StencilComposer,
    canvas_size,
    read_canvas,
)
from stencilbridge.core.extractor import PathExtractor, extract_subpaths, find_path_tags
from stencilbridge.core.pathdata import (
    coordinate_pairs,
    estimate_bounds,
    parse_path_data,
    split_contours,
    tokenize_path_data,
)
from stencilbridge.core.planner import BridgePlanner
from stencilbridge.core.processor import StencilProcessor, StencilResult

__all__ = [
    # Planner classes
    "BridgePlanner",
    # Composer classes
    "CanvasInfo",
    # Classifier classes
    "IslandClassifier",
    "IslandSummary",
    # Extractor classes
    "PathExtractor",
    "StencilComposer",
    # Processor classes
    "StencilProcessor",
    "StencilResult",
    # Functions
    "canvas_size",
    "coordinate_pairs",
    "estimate_bounds",
    "extract_subpaths",
    "find_path_tags",
    "get_islands",
    "parse_path_data",
    "read_canvas",
    "split_contours",
    "summarize",
    "tokenize_path_data",
]
