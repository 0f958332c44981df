"""Processing orchestration for the stencil pipeline.

This module coordinates the full workflow for one document:

    document -> PathExtractor -> IslandClassifier -> BridgePlanner -> StencilComposer

and the file-level wrapper that reads (or traces) the input and writes the
output.

Key components:
- StencilResult: Everything a run produced
- StencilProcessor: Main orchestrator class
"""

import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from stencilbridge.config import RenderConfig, StencilBridgeSettings
from stencilbridge.core.classifier import IslandClassifier, get_islands, summarize
from stencilbridge.core.composer import StencilComposer, canvas_size
from stencilbridge.core.extractor import PathExtractor
from stencilbridge.core.planner import BridgePlanner
from stencilbridge.domain import Bridge, SubPath
from stencilbridge.exceptions import DocumentLoadError
from stencilbridge.io import DocumentReader, DocumentWriter, RasterTracer, is_raster
from stencilbridge.utils import ProcessingLogger, ProcessingStats


@dataclass
class StencilResult:
    """Outcome of processing one document.

    Attributes:
        document: Composed stencil document
        source_document: Input outline document
        subpaths: All extracted and classified sub-paths
        bridges: Planned bridges
        canvas_width: Canvas width used for clamping
        canvas_height: Canvas height used for clamping
        stats: Counts and timings of the run
        output_path: Where the document was written (None if not written)
    """

    document: str
    source_document: str
    subpaths: list[SubPath]
    bridges: list[Bridge]
    canvas_width: float
    canvas_height: float
    stats: ProcessingStats = field(default_factory=ProcessingStats)
    output_path: Path | None = None

    @property
    def islands(self) -> list[SubPath]:
        """Sub-paths that received bridges."""
        return get_islands(self.subpaths)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class StencilProcessor:
    """Orchestrates stencil generation.

    Manages the complete workflow:
    1. Load the outline document (tracing raster images first)
    2. Extract contours and classify islands
    3. Plan bridges for every island
    4. Compose and save the stencil document

    Example:
        settings = StencilBridgeSettings()
        processor = StencilProcessor(settings)
        result = processor.process_file(Path("logo.svg"))
    """

    def __init__(
        self,
        config: StencilBridgeSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings for every pipeline stage
            logger: Logger to report to (defaults to the package logger)
        """
        self.config = config or StencilBridgeSettings()
        self.logger = logger or structlog.get_logger("stencilbridge")
        self.extractor = PathExtractor()
        self.classifier = IslandClassifier(mode=self.config.classifier.mode)
        self.planner = BridgePlanner(self.config.bridge)
        self.composer = StencilComposer(render=self.config.render, canvas=self.config.canvas)

    def analyze(self, document: str) -> list[SubPath]:
        """Extract and classify the sub-paths of a document.

        Args:
            document: Outline document text

        Returns:
            Classified sub-paths in document order
        """
        return self.classifier.classify(self.extractor.extract(document))

    def process_document(
        self,
        document: str,
        bridge_width_mm: float | None = None,
        render: RenderConfig | None = None,
        source: str = "<document>",
    ) -> StencilResult:
        """Run the full pipeline on a document string.

        Args:
            document: Outline document text
            bridge_width_mm: Physical bridge width (defaults to config)
            render: Render options overriding the configured ones
            source: Label used in log records

        Returns:
            StencilResult with the composed document and intermediate data
        """
        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()
        processing_logger.log_document_start(source, len(document))

        step_start = time.perf_counter()
        subpaths = self.extractor.extract(document)
        processing_logger.log_extraction(
            shapes=len({s.drawable_index for s in subpaths}),
            contours=len(subpaths),
            degenerate=sum(1 for s in subpaths if s.is_degenerate()),
            duration_ms=_elapsed_ms(step_start),
        )

        step_start = time.perf_counter()
        self.classifier.classify(subpaths)
        summary = summarize(subpaths)
        processing_logger.log_classification(
            mode=self.classifier.mode.value,
            islands=summary.inner,
            unresolved=summary.unresolved,
            duration_ms=_elapsed_ms(step_start),
        )

        step_start = time.perf_counter()
        canvas_width, canvas_height = canvas_size(document, self.config.canvas)
        bridges = self.planner.plan(subpaths, bridge_width_mm, canvas_width, canvas_height)
        processing_logger.log_bridges(
            bridges=len(bridges),
            width=self.config.bridge.document_width(bridge_width_mm),
            duration_ms=_elapsed_ms(step_start),
        )

        step_start = time.perf_counter()
        output = self.composer.compose(document, bridges, render)
        processing_logger.log_composed(
            length=len(output),
            show_bridges=(render or self.composer.render).show_bridges,
            duration_ms=_elapsed_ms(step_start),
        )

        stats.end_time = time.time()
        self.logger.info(
            "Processing complete",
            source=source,
            shapes=stats.shapes_count,
            islands=stats.islands_count,
            bridges=stats.bridges_count,
            duration_seconds=round(stats.duration_seconds, 4),
        )

        return StencilResult(
            document=output,
            source_document=document,
            subpaths=subpaths,
            bridges=bridges,
            canvas_width=canvas_width,
            canvas_height=canvas_height,
            stats=stats,
        )

    def load_document(self, input_path: Path) -> str:
        """Read an SVG document, or trace a raster image into one.

        Args:
            input_path: Path to an SVG document or raster image

        Returns:
            Outline document text

        Raises:
            DocumentLoadError: If an SVG document cannot be read
            TracerError: If a raster image cannot be traced
        """
        if is_raster(input_path):
            self.logger.info("Tracing raster input", input=str(input_path))
            return RasterTracer(self.config.trace).trace(input_path)

        try:
            return DocumentReader(input_path).load()
        except OSError as e:
            raise DocumentLoadError(str(input_path), str(e)) from e

    def process_file(
        self,
        input_path: Path,
        output_path: Path | None = None,
        bridge_width_mm: float | None = None,
        write: bool = True,
    ) -> StencilResult:
        """Process an input file into a stencil document on disk.

        Args:
            input_path: SVG document or raster image
            output_path: Output path (defaults to "{stem}_stencil.svg")
            bridge_width_mm: Physical bridge width (defaults to config)
            write: If False, run the pipeline without writing output

        Returns:
            StencilResult, with output_path set when written

        Raises:
            DocumentLoadError: If the input cannot be read
            DocumentSaveError: If the output cannot be written
            TracerError: If a raster image cannot be traced
        """
        if output_path is None:
            output_path = DocumentWriter.get_stencil_path(input_path)

        self.logger.info(
            "Starting stencil processing",
            input=str(input_path),
            output=str(output_path),
        )

        document = self.load_document(input_path)
        result = self.process_document(
            document,
            bridge_width_mm=bridge_width_mm,
            source=str(input_path),
        )

        if write:
            result.output_path = DocumentWriter(output_path).save(result.document)
            self.logger.info("Stencil saved", output=str(output_path))

        return result
