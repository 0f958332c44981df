"""Core geometric value types.

This module defines the small geometric types shared by the pipeline:
- Point: A 2D point in document coordinates
- Bounds: An axis-aligned bounding box
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D document space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in document units
        y: Y coordinate in document units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box of a contour.

    The box is an approximation of shape extent. Area and containment are
    computed on the box, not on the true outline.

    Attributes:
        x: Minimum x coordinate
        y: Minimum y coordinate
        width: Extent along x (never negative)
        height: Extent along y (never negative)
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def empty(cls) -> "Bounds":
        """Zero-sized, zero-positioned bounds used for degenerate contours."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_points(cls, points: list[tuple[float, float]]) -> "Bounds":
        """Build the smallest box enclosing the given points.

        Args:
            points: Sequence of (x, y) pairs

        Returns:
            Enclosing bounds, or empty bounds when no points are given
        """
        if not points:
            return cls.empty()

        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        min_x, min_y = min(xs), min(ys)
        return cls(min_x, min_y, max(xs) - min_x, max(ys) - min_y)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        """Bounding-box area (width * height)."""
        return self.width * self.height

    @property
    def center(self) -> Point:
        """Center of the box."""
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def is_degenerate(self) -> bool:
        """Check if the box has no area.

        Degenerate boxes come from contours without usable coordinates, or
        from straight lines. They can neither contain nor be contained.
        """
        return self.width <= 0 or self.height <= 0

    def strictly_contains(self, other: "Bounds") -> bool:
        """Check if other lies strictly inside this box on all four sides.

        Boxes that share an edge, or are equal, do not contain each other.

        Args:
            other: Candidate inner box

        Returns:
            True if other is strictly inside this box
        """
        return (
            other.x > self.x
            and other.y > self.y
            and other.right < self.right
            and other.bottom < self.bottom
        )

    def offset(self, dx: float, dy: float) -> "Bounds":
        """Return a copy translated by (dx, dy)."""
        return Bounds(self.x + dx, self.y + dy, self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bounds":
        """Deserialize from dictionary."""
        return cls(
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
        )
