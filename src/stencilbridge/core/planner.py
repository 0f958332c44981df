"""Bridge planning for classified islands.

This module implements the bridge placement policy:
- Bridge count by bounding-box area tier
- Fixed direction priority (left, right, top, bottom)
- Fixed outward extension, clamped to the canvas
- Physical width converted to document units with a fixed scale

The policy does not look at surrounding geometry. Bridges are not steered
around other islands and do not search for the nearest container edge.

Key classes:
- BridgePlanner: Computes Bridge segments for the islands of a document
"""

import structlog

from stencilbridge.config import BridgeConfig
from stencilbridge.core.classifier import get_islands
from stencilbridge.domain import Bridge, BridgeDirection, Point, SubPath

logger = structlog.get_logger(__name__)

DIRECTION_PRIORITY: tuple[BridgeDirection, ...] = (
    BridgeDirection.LEFT,
    BridgeDirection.RIGHT,
    BridgeDirection.TOP,
    BridgeDirection.BOTTOM,
)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class BridgePlanner:
    """Plans straight connectors from each island toward its surroundings.

    Output is deterministic: the same islands, parameters and canvas always
    give the same bridges in the same order.
    """

    def __init__(self, config: BridgeConfig | None = None) -> None:
        """Initialize bridge planner with configuration.

        Args:
            config: Bridge configuration with tiers, offset and unit scale
        """
        self.config = config or BridgeConfig()

    def bridge_count(self, area: float) -> int:
        """Number of bridges for an island of the given bounding-box area.

        Args:
            area: Bounding-box area in document units

        Returns:
            large_count above large_area, medium_count above medium_area,
            small_count otherwise
        """
        if area > self.config.large_area:
            return self.config.large_count
        if area > self.config.medium_area:
            return self.config.medium_count
        return self.config.small_count

    def plan(
        self,
        subpaths: list[SubPath],
        bridge_width_mm: float | None = None,
        canvas_width: float = 500.0,
        canvas_height: float = 500.0,
    ) -> list[Bridge]:
        """Plan bridges for every island among classified sub-paths.

        Args:
            subpaths: Classified sub-paths (only inner, non-degenerate ones
                are bridged)
            bridge_width_mm: Physical bridge width (defaults to config)
            canvas_width: Canvas width in document units
            canvas_height: Canvas height in document units

        Returns:
            Bridges grouped by island, islands in input order
        """
        width = self.config.document_width(bridge_width_mm)
        bridges: list[Bridge] = []

        for island in get_islands(subpaths):
            island_bridges = self.plan_island(island, width, canvas_width, canvas_height)
            bridges.extend(island_bridges)
            logger.debug(
                "Island bridged",
                island=island.id,
                parent=island.parent_id,
                area=round(island.area, 2),
                bridges=len(island_bridges),
            )

        return bridges

    def plan_island(
        self,
        island: SubPath,
        width: float,
        canvas_width: float,
        canvas_height: float,
    ) -> list[Bridge]:
        """Plan the bridges of a single island.

        Args:
            island: Inner sub-path
            width: Bridge thickness in document units
            canvas_width: Canvas width in document units
            canvas_height: Canvas height in document units

        Returns:
            The first N candidates in direction priority order
        """
        count = min(self.bridge_count(island.area), len(DIRECTION_PRIORITY))
        bridges: list[Bridge] = []

        for index, direction in enumerate(DIRECTION_PRIORITY[:count]):
            start, end = self._segment(island, direction)
            end = Point(
                _clamp(end.x, 0.0, canvas_width),
                _clamp(end.y, 0.0, canvas_height),
            )
            bridges.append(
                Bridge(
                    id=f"bridge_{island.id}_{index}",
                    start=start,
                    end=end,
                    width=width,
                    direction=direction,
                    island_id=island.id,
                )
            )

        return bridges

    def _segment(self, island: SubPath, direction: BridgeDirection) -> tuple[Point, Point]:
        """Unclamped segment from an edge midpoint outward."""
        bounds = island.bounds
        center = bounds.center
        offset = self.config.offset

        if direction == BridgeDirection.LEFT:
            return Point(bounds.x, center.y), Point(bounds.x - offset, center.y)
        if direction == BridgeDirection.RIGHT:
            return Point(bounds.right, center.y), Point(bounds.right + offset, center.y)
        if direction == BridgeDirection.TOP:
            return Point(center.x, bounds.y), Point(center.x, bounds.y - offset)
        return Point(center.x, bounds.bottom), Point(center.x, bounds.bottom + offset)
