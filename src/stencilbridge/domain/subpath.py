"""Sub-path representation.

A sub-path is one contour extracted from a drawable path element of an
outline document. It keeps its raw command text so the composer can write it
back out unchanged.
"""

from dataclasses import dataclass, field
from typing import Any

from stencilbridge.domain.bounds import Bounds


@dataclass
class SubPath:
    """One drawable contour with its bounding box and island classification.

    Only ``is_inner`` and ``parent_id`` change after construction; they are
    set by the island classifier.

    Attributes:
        id: Identifier unique within a run ("{drawable}_{contour}")
        path_data: Raw drawing-command text of this contour
        bounds: Axis-aligned bounding box in document coordinates
        drawable_index: Index of the originating path element (None if unknown)
        contour_index: Index of this contour within its path element
        is_relative: True if the contour starts with a relative move command
        is_inner: True if classified as enclosed by another sub-path
        parent_id: Id of the presumed enclosing sub-path (None if unresolved)
    """

    id: str
    path_data: str
    bounds: Bounds = field(default_factory=Bounds.empty)
    drawable_index: int | None = None
    contour_index: int = 0
    is_relative: bool = False
    is_inner: bool = False
    parent_id: str | None = None

    @classmethod
    def make_id(cls, drawable_index: int, contour_index: int) -> str:
        """Build the id for a contour of a drawable."""
        return f"{drawable_index}_{contour_index}"

    @property
    def area(self) -> float:
        """Bounding-box area, not the true area enclosed by the path."""
        return self.bounds.area

    def is_degenerate(self) -> bool:
        """Check if this sub-path must be ignored by classification and bridging."""
        return self.bounds.is_degenerate()

    def same_drawable(self, other: "SubPath") -> bool:
        """Check if both sub-paths were split from the same path element."""
        return self.drawable_index is not None and self.drawable_index == other.drawable_index

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the sub-path
        """
        return {
            "id": self.id,
            "path_data": self.path_data,
            "bounds": self.bounds.to_dict(),
            "area": self.area,
            "drawable_index": self.drawable_index,
            "contour_index": self.contour_index,
            "is_relative": self.is_relative,
            "is_inner": self.is_inner,
            "parent_id": self.parent_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SubPath":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a sub-path

        Returns:
            SubPath instance
        """
        return cls(
            id=data["id"],
            path_data=data["path_data"],
            bounds=Bounds.from_dict(data["bounds"]),
            drawable_index=data.get("drawable_index"),
            contour_index=data.get("contour_index", 0),
            is_relative=data.get("is_relative", False),
            is_inner=data.get("is_inner", False),
            parent_id=data.get("parent_id"),
        )
