"""Document I/O layer for stencilbridge.

This module handles reading outline documents, tracing raster images into
outline documents, and writing stencil documents.

Key responsibilities:
- Load SVG outline documents
- Trace raster images with Pillow preprocessing and potrace
- Summarize raster images (size, transparency, complexity)
- Write stencil documents with the stencil naming convention

Key classes:
- DocumentReader: Load documents
- DocumentWriter: Save documents
- RasterTracer: Turn images into documents
- ImageAnalysis: Technical summary of a raster image
"""

from stencilbridge.io.analysis import Complexity, ImageAnalysis, analyze_image
from stencilbridge.io.reader import DocumentReader, is_raster
from stencilbridge.io.tracer import RasterTracer
from stencilbridge.io.writer import DocumentWriter

__all__ = [
    "Complexity",
    "DocumentReader",
    "DocumentWriter",
    "ImageAnalysis",
    "RasterTracer",
    "analyze_image",
    "is_raster",
]
