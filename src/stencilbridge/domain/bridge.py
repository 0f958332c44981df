"""Bridge types for connecting islands to their surroundings.

This module defines the bridge domain model: a straight connector running from
an island's edge outward, drawn as a strip of uncut material.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from stencilbridge.domain.bounds import Point


class BridgeDirection(str, Enum):
    """Direction a bridge extends away from its island.

    Declaration order is the placement priority.
    """

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Bridge:
    """One connector segment.

    Attributes:
        id: Identifier derived from the island id and a sequence index
        start: Point on the island boundary
        end: Point further out, clamped to the canvas
        width: Stroke thickness in document units
        direction: Direction the bridge extends
        island_id: Id of the island the bridge belongs to
    """

    id: str
    start: Point
    end: Point
    width: float
    direction: BridgeDirection
    island_id: str = ""

    @property
    def length(self) -> float:
        """Euclidean distance from start to end."""
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    @property
    def angle_degrees(self) -> float:
        """Angle of the start->end vector, as atan2(dy, dx) in degrees."""
        return math.degrees(math.atan2(self.end.y - self.start.y, self.end.x - self.start.x))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation using "from"/"to" keys
        """
        return {
            "id": self.id,
            "from": self.start.to_dict(),
            "to": self.end.to_dict(),
            "width": self.width,
            "direction": self.direction.value,
            "island_id": self.island_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bridge":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a bridge

        Returns:
            Bridge instance
        """
        return cls(
            id=data["id"],
            start=Point.from_dict(data["from"]),
            end=Point.from_dict(data["to"]),
            width=data["width"],
            direction=BridgeDirection(data["direction"]),
            island_id=data.get("island_id", ""),
        )
