"""Path extraction from outline documents.

This module scans an SVG outline document for drawable path elements and
splits each element's drawing commands into contours. Each contour becomes a
SubPath with an estimated bounding box.

Tracers such as potrace write one path element per shape, with the shape's
holes as further contours of the same element. Holes are frequently written
with a relative move command, so their bounds are offset by a cursor taken
from the preceding absolute contour of the same element.
"""

import re

import structlog

from stencilbridge.core.pathdata import coordinate_pairs, split_contours, starts_relative
from stencilbridge.domain import Bounds, SubPath

logger = structlog.get_logger(__name__)

# Quoted attribute values may contain ">" without ending the tag.
PATH_TAG_RE = re.compile(r"""<path\b(?:[^>"']|"[^"]*"|'[^']*')*>""")
ATTRIBUTE_RE = re.compile(r"""([^\s=/<>"']+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")


def find_path_tags(document: str) -> list[str]:
    """Find every path start tag in a document, verbatim.

    Args:
        document: Outline document text

    Returns:
        Tag strings in document order
    """
    return PATH_TAG_RE.findall(document)


def read_attributes(tag: str) -> dict[str, str]:
    """Read the quoted attributes of a start tag.

    Attributes are scanned left to right as ``name="value"`` or
    ``name='value'`` pairs, so text inside one attribute's value is never
    read as another attribute. The first occurrence of a name wins.

    Args:
        tag: A start tag such as ``<path d="M0 0"/>``

    Returns:
        Mapping of attribute name to value
    """
    attributes: dict[str, str] = {}
    for match in ATTRIBUTE_RE.finditer(tag):
        name, double, single = match.groups()
        attributes.setdefault(name, double if double is not None else single)
    return attributes


def read_path_data(tag: str) -> str | None:
    """Read the ``d`` attribute of a path tag.

    Args:
        tag: A path start tag

    Returns:
        The drawing-command text, or None if the tag has no ``d`` attribute
    """
    return read_attributes(tag).get("d")


class PathExtractor:
    """Extracts contours from the path elements of an outline document.

    The extractor is stateless and never raises: a malformed document yields
    an empty list, and a contour without coordinates yields a SubPath with
    zero bounds.
    """

    def extract(self, document: str) -> list[SubPath]:
        """Extract all contours of all drawable path elements.

        Args:
            document: Outline document text

        Returns:
            SubPaths in document order, ids encoding element and contour index
        """
        subpaths: list[SubPath] = []
        drawable_index = 0

        for tag in find_path_tags(document):
            path_data = read_path_data(tag)
            if path_data is None:
                continue
            subpaths.extend(self.extract_drawable(path_data, drawable_index))
            drawable_index += 1

        logger.debug(
            "Paths extracted",
            drawables=drawable_index,
            contours=len(subpaths),
        )
        return subpaths

    def extract_drawable(self, path_data: str, drawable_index: int) -> list[SubPath]:
        """Split one element's drawing commands into SubPaths.

        The cursor starts at the origin for every element. Absolute contours
        (and the first contour) set it to their bounds origin; later relative
        contours with coordinates are offset by it.

        Args:
            path_data: Drawing-command text of the element
            drawable_index: Index of the element among drawables

        Returns:
            One SubPath per contour
        """
        subpaths: list[SubPath] = []
        current_x, current_y = 0.0, 0.0

        for contour_index, contour in enumerate(split_contours(path_data)):
            is_relative = starts_relative(contour)
            pairs = coordinate_pairs(contour)
            bounds = Bounds.from_points(pairs)

            if is_relative and contour_index > 0:
                # contours without coordinates keep zero bounds at the origin
                if pairs:
                    bounds = bounds.offset(current_x, current_y)
            else:
                current_x, current_y = bounds.x, bounds.y

            subpaths.append(
                SubPath(
                    id=SubPath.make_id(drawable_index, contour_index),
                    path_data=contour,
                    bounds=bounds,
                    drawable_index=drawable_index,
                    contour_index=contour_index,
                    is_relative=is_relative,
                )
            )

        return subpaths


def extract_subpaths(document: str) -> list[SubPath]:
    """Extract SubPaths from a document with a default extractor."""
    return PathExtractor().extract(document)
