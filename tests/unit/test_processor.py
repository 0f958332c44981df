"""Tests for processing orchestration."""

import shutil
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from stencilbridge.config import (
    ClassificationMode,
    ClassifierConfig,
    RenderConfig,
    StencilBridgeSettings,
)
from stencilbridge.core.processor import StencilProcessor
from stencilbridge.exceptions import DocumentLoadError

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
RING_PATH = FIXTURES_DIR / "ring.svg"


@pytest.fixture
def ring_document() -> str:
    return RING_PATH.read_text(encoding="utf-8")


@pytest.fixture
def processor() -> StencilProcessor:
    return StencilProcessor(StencilBridgeSettings(), logger=MagicMock())


class TestProcessDocument:
    """Tests for the in-memory pipeline."""

    def test_ring(self, processor, ring_document):
        """Test a square with one hole."""
        result = processor.process_document(ring_document)

        assert [s.id for s in result.subpaths] == ["0_0", "0_1"]
        assert [s.id for s in result.islands] == ["0_1"]
        assert result.islands[0].parent_id == "0_0"
        assert (result.canvas_width, result.canvas_height) == (100.0, 100.0)
        assert len(result.bridges) == 2
        assert {b.width for b in result.bridges} == {20.0}
        assert result.source_document == ring_document
        assert result.output_path is None

    def test_stats(self, processor, ring_document):
        """Test that stats reflect every step."""
        stats = processor.process_document(ring_document).stats
        assert stats.shapes_count == 1
        assert stats.contours_count == 2
        assert stats.degenerate_count == 0
        assert stats.islands_count == 1
        assert stats.unresolved_count == 0
        assert stats.bridges_count == 2
        assert set(stats.step_timings_ms) == {"extract", "classify", "plan", "compose"}
        assert stats.duration_seconds >= 0.0

    def test_bridge_width_override(self, processor, ring_document):
        result = processor.process_document(ring_document, bridge_width_mm=1.0)
        assert {b.width for b in result.bridges} == {10.0}

    def test_render_override(self, processor, ring_document):
        """Test that bridges are still planned when hidden from the output."""
        result = processor.process_document(
            ring_document, render=RenderConfig(show_bridges=False)
        )
        assert len(result.bridges) == 2
        assert 'id="bridges"' not in result.document

    def test_output_layers(self, processor, ring_document):
        document = processor.process_document(ring_document).document
        assert '<g id="stencil" class="stencil-paths">' in document
        assert document.count('class="bridge"') == 2

    def test_containment_mode(self, ring_document):
        """Test that containment mode gives the same island for nested boxes."""
        settings = StencilBridgeSettings(
            classifier=ClassifierConfig(mode=ClassificationMode.CONTAINMENT)
        )
        result = StencilProcessor(settings, logger=MagicMock()).process_document(ring_document)
        assert [s.id for s in result.islands] == ["0_1"]

    def test_unresolved_islands_are_logged(self):
        """Test that islands without a parent produce a warning."""
        logger = MagicMock()
        document = '<svg><path d="M5 5 Z M10 10 L20 10 L20 20 Z"/></svg>'
        result = StencilProcessor(logger=logger).process_document(document)

        assert result.stats.unresolved_count == 1
        assert result.stats.degenerate_count == 1
        assert len(result.bridges) == 2
        logger.warning.assert_called_once()

    def test_classification_logged_once(self, ring_document):
        """Test that one run reports classification results a single time."""
        logger = MagicMock()
        StencilProcessor(logger=logger).process_document(ring_document)

        events = [c.args[0] for c in logger.info.call_args_list]
        assert events.count("Islands classified") == 1

    def test_empty_document(self, processor):
        result = processor.process_document("")
        assert result.subpaths == []
        assert result.bridges == []
        assert result.stats.shapes_count == 0

    def test_analyze(self, processor, ring_document):
        subpaths = processor.analyze(ring_document)
        assert [s.is_inner for s in subpaths] == [False, True]


class TestFileProcessing:
    """Tests for file-level processing."""

    def test_process_file_default_output(self, processor, tmp_path):
        """Test that output lands next to the input with the stencil suffix."""
        input_path = tmp_path / "ring.svg"
        shutil.copy(RING_PATH, input_path)

        result = processor.process_file(input_path)

        expected = tmp_path / "ring_stencil.svg"
        assert result.output_path == expected
        assert expected.read_text(encoding="utf-8") == result.document

    def test_process_file_explicit_output(self, processor, tmp_path):
        output = tmp_path / "out" / "stencil.svg"
        result = processor.process_file(RING_PATH, output_path=output)
        assert result.output_path == output
        assert output.exists()

    def test_process_file_without_writing(self, processor, tmp_path):
        input_path = tmp_path / "ring.svg"
        shutil.copy(RING_PATH, input_path)

        result = processor.process_file(input_path, write=False)

        assert result.output_path is None
        assert not (tmp_path / "ring_stencil.svg").exists()

    def test_missing_input(self, processor, tmp_path):
        """Test that a missing document raises DocumentLoadError."""
        with pytest.raises(DocumentLoadError):
            processor.load_document(tmp_path / "missing.svg")

    @patch("stencilbridge.core.processor.RasterTracer")
    def test_raster_input_is_traced(self, mock_tracer_cls, processor, ring_document, tmp_path):
        """Test that raster input goes through the tracer."""
        mock_tracer_cls.return_value.trace.return_value = ring_document
        image_path = tmp_path / "logo.png"

        result = processor.process_file(image_path, write=False)

        mock_tracer_cls.assert_called_once_with(processor.config.trace)
        mock_tracer_cls.return_value.trace.assert_called_once_with(image_path)
        assert len(result.bridges) == 2
