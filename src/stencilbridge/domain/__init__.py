"""Domain models for stencilbridge.

This module contains the domain models representing outline contours and the
bridges generated for them. All models are:

- Plain dataclasses, immutable where possible
- Serializable to dictionaries for reporting
- Independent of the document text format

Key classes:
- Point: A 2D point in document coordinates
- Bounds: An axis-aligned bounding box
- SubPath: One contour of a drawable path element
- Bridge: One connector segment
"""

from stencilbridge.domain.bounds import Bounds, Point
from stencilbridge.domain.bridge import Bridge, BridgeDirection
from stencilbridge.domain.subpath import SubPath

__all__: list[str] = [
    # Enums
    "BridgeDirection",
    # Core types
    "Point",
    "Bounds",
    "SubPath",
    "Bridge",
]
