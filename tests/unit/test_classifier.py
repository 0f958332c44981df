"""Unit tests for island classification."""

from unittest.mock import patch

import pytest

from stencilbridge.config import ClassificationMode
from stencilbridge.core.classifier import IslandClassifier, get_islands, summarize
from stencilbridge.domain import Bounds, SubPath


def _sub(
    id: str,
    bounds: Bounds,
    drawable_index: int | None = None,
    contour_index: int = 0,
) -> SubPath:
    return SubPath(
        id=id,
        path_data="",
        bounds=bounds,
        drawable_index=drawable_index,
        contour_index=contour_index,
    )


@pytest.fixture
def letter_b() -> list[SubPath]:
    """One element with an outline and two holes."""
    return [
        _sub("0_0", Bounds(0, 0, 100, 200), 0, 0),
        _sub("0_1", Bounds(20, 20, 60, 60), 0, 1),
        _sub("0_2", Bounds(20, 110, 60, 60), 0, 2),
    ]


class TestGroupedClassification:
    """Tests for the element-grouping heuristic."""

    def test_later_contours_are_inner(self, letter_b):
        """Test that contours after the first are islands of contour 0."""
        IslandClassifier(ClassificationMode.GROUPED).classify(letter_b)
        assert [s.is_inner for s in letter_b] == [False, True, True]
        assert letter_b[1].parent_id == "0_0"
        assert letter_b[2].parent_id == "0_0"

    def test_grouping_ignores_geometry(self):
        """Test that a later contour is inner even when outside contour 0."""
        subpaths = [
            _sub("0_0", Bounds(0, 0, 10, 10), 0, 0),
            _sub("0_1", Bounds(500, 500, 10, 10), 0, 1),
        ]
        IslandClassifier(ClassificationMode.GROUPED).classify(subpaths)
        assert subpaths[1].is_inner
        assert subpaths[1].parent_id == "0_0"

    def test_degenerate_parent_is_unresolved(self):
        """Test that a degenerate contour 0 is never a parent."""
        subpaths = [
            _sub("0_0", Bounds(0, 0, 0, 0), 0, 0),
            _sub("0_1", Bounds(10, 10, 10, 10), 0, 1),
        ]
        IslandClassifier(ClassificationMode.GROUPED).classify(subpaths)
        assert subpaths[1].is_inner
        assert subpaths[1].parent_id is None

    def test_separate_elements_are_not_grouped(self):
        subpaths = [
            _sub("0_0", Bounds(0, 0, 100, 100), 0, 0),
            _sub("1_0", Bounds(10, 10, 10, 10), 1, 0),
        ]
        IslandClassifier(ClassificationMode.GROUPED).classify(subpaths)
        assert not any(s.is_inner for s in subpaths)


class TestContainmentClassification:
    """Tests for the bounding-box containment heuristic."""

    def test_contained_box_is_inner(self):
        subpaths = [
            _sub("a", Bounds(0, 0, 100, 100)),
            _sub("b", Bounds(10, 10, 20, 20)),
        ]
        IslandClassifier(ClassificationMode.CONTAINMENT).classify(subpaths)
        assert subpaths[0].is_inner is False
        assert subpaths[1].is_inner is True
        assert subpaths[1].parent_id == "a"

    def test_equal_boxes_are_both_outer(self):
        """Test that identical boxes do not contain each other."""
        subpaths = [
            _sub("a", Bounds(0, 0, 50, 50)),
            _sub("b", Bounds(0, 0, 50, 50)),
        ]
        IslandClassifier(ClassificationMode.CONTAINMENT).classify(subpaths)
        assert not any(s.is_inner for s in subpaths)

    def test_shared_edge_is_outer(self):
        subpaths = [
            _sub("a", Bounds(0, 0, 100, 100)),
            _sub("b", Bounds(0, 10, 20, 20)),
        ]
        IslandClassifier(ClassificationMode.CONTAINMENT).classify(subpaths)
        assert subpaths[1].is_inner is False

    def test_first_container_wins(self):
        """Test that the parent is the first container in list order."""
        subpaths = [
            _sub("big", Bounds(0, 0, 1000, 1000)),
            _sub("mid", Bounds(100, 100, 500, 500)),
            _sub("small", Bounds(200, 200, 10, 10)),
        ]
        IslandClassifier(ClassificationMode.CONTAINMENT).classify(subpaths)
        assert subpaths[1].parent_id == "big"
        assert subpaths[2].parent_id == "big"

    def test_degenerate_neither_contains_nor_is_contained(self):
        subpaths = [
            _sub("a", Bounds(0, 0, 100, 100)),
            _sub("line", Bounds(10, 10, 50, 0)),
            _sub("c", Bounds(20, 20, 10, 10)),
        ]
        IslandClassifier(ClassificationMode.CONTAINMENT).classify(subpaths)
        assert subpaths[1].is_inner is False
        assert subpaths[1].parent_id is None
        assert subpaths[2].parent_id == "a"


class TestAutoMode:
    """Tests for AUTO mode selection."""

    def test_auto_groups_known_elements(self, letter_b):
        IslandClassifier().classify(letter_b)
        assert [s.is_inner for s in letter_b] == [False, True, True]

    def test_auto_uses_containment_without_element(self):
        """Test the fallback for sub-paths without a drawable index."""
        subpaths = [
            _sub("a", Bounds(0, 0, 100, 100)),
            _sub("b", Bounds(10, 10, 20, 20)),
        ]
        IslandClassifier(ClassificationMode.AUTO).classify(subpaths)
        assert subpaths[1].is_inner
        assert subpaths[1].parent_id == "a"

    def test_auto_does_not_nest_separate_elements(self):
        """Test that a separate element inside another is not an island."""
        subpaths = [
            _sub("0_0", Bounds(0, 0, 100, 100), 0, 0),
            _sub("1_0", Bounds(10, 10, 10, 10), 1, 0),
        ]
        IslandClassifier().classify(subpaths)
        assert not any(s.is_inner for s in subpaths)


class TestClassifierBehavior:
    """Tests for general classifier behavior."""

    def test_returns_same_list(self, letter_b):
        assert IslandClassifier().classify(letter_b) is letter_b

    def test_idempotent(self, letter_b):
        """Test that classifying twice gives the same result."""
        classifier = IslandClassifier()
        classifier.classify(letter_b)
        first = [(s.is_inner, s.parent_id) for s in letter_b]
        classifier.classify(letter_b)
        assert [(s.is_inner, s.parent_id) for s in letter_b] == first

    def test_stale_flags_are_cleared(self):
        """Test that earlier results do not leak into a new pass."""
        subpath = _sub("a", Bounds(0, 0, 10, 10))
        subpath.is_inner = True
        subpath.parent_id = "ghost"
        IslandClassifier().classify([subpath])
        assert subpath.is_inner is False
        assert subpath.parent_id is None

    def test_empty_list(self):
        assert IslandClassifier().classify([]) == []


class TestSummaryAndIslands:
    """Tests for summarize and get_islands."""

    def test_summarize(self):
        subpaths = [
            _sub("0_0", Bounds(0, 0, 0, 0), 0, 0),
            _sub("0_1", Bounds(10, 10, 10, 10), 0, 1),
            _sub("1_0", Bounds(0, 0, 100, 100), 1, 0),
            _sub("1_1", Bounds(10, 10, 10, 10), 1, 1),
        ]
        IslandClassifier().classify(subpaths)
        summary = summarize(subpaths)
        assert summary.total == 4
        assert summary.degenerate == 1
        assert summary.inner == 2
        assert summary.unresolved == 1
        assert summary.outer == 1

    def test_get_islands_skips_degenerate(self, letter_b):
        letter_b.append(_sub("0_3", Bounds(5, 5, 0, 10), 0, 3))
        IslandClassifier().classify(letter_b)
        assert [s.id for s in get_islands(letter_b)] == ["0_1", "0_2"]

    @patch("stencilbridge.core.classifier.logger")
    def test_pass_logs_under_own_event(self, mock_logger, letter_b):
        """Test that the classifier's debug event differs from the pipeline's info event."""
        IslandClassifier().classify(letter_b)
        mock_logger.debug.assert_called_once()
        assert mock_logger.debug.call_args.args[0] == "Classification pass complete"
        assert mock_logger.debug.call_args.kwargs["inner"] == 2
