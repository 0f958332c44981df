"""Island classification for extracted sub-paths.

This module decides which sub-paths are islands (enclosed, "inner") and which
enclose them. Two heuristics are available:

- Grouping: tracers write a shape's holes as extra contours of the shape's own
  path element, so every contour after the first of an element is inner and
  its parent is contour 0 of that element.
- Containment: a sub-path is inner if its bounding box is strictly inside the
  bounding box of another sub-path. The first container in list order wins.

Both work on bounding boxes and element structure only. No point-in-polygon
or fill-rule analysis is attempted.
"""

from dataclasses import dataclass

import structlog

from stencilbridge.config import ClassificationMode
from stencilbridge.domain import SubPath

logger = structlog.get_logger(__name__)


@dataclass
class IslandSummary:
    """Result counts of a classification pass.

    Attributes:
        total: Number of sub-paths classified
        degenerate: Sub-paths ignored for having zero-area bounds
        inner: Sub-paths marked inner
        unresolved: Inner sub-paths with no parent found
    """

    total: int
    degenerate: int
    inner: int
    unresolved: int

    @property
    def outer(self) -> int:
        return self.total - self.degenerate - self.inner


class IslandClassifier:
    """Marks sub-paths as inner or outer and records their parents.

    The classifier is stateless apart from its mode and safe to share.
    Classification happens in place; the same list is returned.
    """

    def __init__(self, mode: ClassificationMode = ClassificationMode.AUTO) -> None:
        """Initialize the classifier.

        Args:
            mode: GROUPED uses element grouping only, CONTAINMENT uses
                bounding-box containment only, AUTO uses grouping for
                sub-paths that know their element and containment otherwise
        """
        self.mode = mode

    def classify(self, subpaths: list[SubPath]) -> list[SubPath]:
        """Classify sub-paths in place.

        Previous classification results are cleared first, so classifying
        the same list twice gives the same result.

        Args:
            subpaths: Sub-paths to classify, in document order

        Returns:
            The same list, with is_inner and parent_id set
        """
        for subpath in subpaths:
            subpath.is_inner = False
            subpath.parent_id = None

        for subpath in subpaths:
            if subpath.is_degenerate():
                continue

            if self._uses_grouping(subpath):
                self._classify_grouped(subpath, subpaths)
            else:
                self._classify_contained(subpath, subpaths)

        summary = summarize(subpaths)
        logger.debug(
            "Classification pass complete",
            mode=self.mode.value,
            total=summary.total,
            inner=summary.inner,
            unresolved=summary.unresolved,
            degenerate=summary.degenerate,
        )
        return subpaths

    def _uses_grouping(self, subpath: SubPath) -> bool:
        if self.mode == ClassificationMode.GROUPED:
            return True
        if self.mode == ClassificationMode.CONTAINMENT:
            return False
        return subpath.drawable_index is not None

    def _classify_grouped(self, subpath: SubPath, subpaths: list[SubPath]) -> None:
        """Apply the element-grouping heuristic to one sub-path.

        Contour 0 of an element stays outer. Later contours are inner, with
        contour 0 of the same element as parent when it exists and is not
        degenerate.
        """
        if subpath.contour_index == 0:
            return

        subpath.is_inner = True
        subpath.parent_id = None

        for candidate in subpaths:
            if (
                candidate.contour_index == 0
                and candidate.same_drawable(subpath)
                and not candidate.is_degenerate()
            ):
                subpath.parent_id = candidate.id
                break

    def _classify_contained(self, subpath: SubPath, subpaths: list[SubPath]) -> None:
        """Apply the bounding-box containment test to one sub-path."""
        for candidate in subpaths:
            if candidate is subpath or candidate.is_degenerate():
                continue
            if candidate.bounds.strictly_contains(subpath.bounds):
                subpath.is_inner = True
                subpath.parent_id = candidate.id
                return


def summarize(subpaths: list[SubPath]) -> IslandSummary:
    """Count the outcome of a classification pass.

    Args:
        subpaths: Classified sub-paths

    Returns:
        IslandSummary with totals
    """
    degenerate = sum(1 for s in subpaths if s.is_degenerate())
    inner = [s for s in subpaths if s.is_inner]
    return IslandSummary(
        total=len(subpaths),
        degenerate=degenerate,
        inner=len(inner),
        unresolved=sum(1 for s in inner if s.parent_id is None),
    )


def get_islands(subpaths: list[SubPath]) -> list[SubPath]:
    """Filter classified sub-paths to the islands that need bridges.

    Args:
        subpaths: Classified sub-paths

    Returns:
        Inner, non-degenerate sub-paths in their original order
    """
    return [s for s in subpaths if s.is_inner and not s.is_degenerate()]
