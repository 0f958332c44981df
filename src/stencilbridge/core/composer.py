"""Stencil document composition.

This module writes the final stencil document: the original path elements in
a "stencil" layer and the planned bridges as material-colored rectangles in a
separate "bridges" layer, so downstream tools can toggle or strip bridges by
removing one group.

It also reads the canvas description (viewBox, width, height) from the root
element of the input, falling back to fixed defaults when it is missing.
"""

import re
from dataclasses import dataclass

from stencilbridge.config import CanvasConfig, RenderConfig
from stencilbridge.core.extractor import find_path_tags, read_attributes
from stencilbridge.domain import Bridge

_SVG_TAG_RE = re.compile(r"""<svg\b(?:[^>"']|"[^"]*"|'[^']*')*>""")
_LEADING_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")


@dataclass(frozen=True)
class CanvasInfo:
    """Canvas attributes of an outline document, as text.

    Attributes:
        view_box: viewBox attribute value
        width: width attribute value (may carry a unit suffix)
        height: height attribute value (may carry a unit suffix)
    """

    view_box: str
    width: str
    height: str


def _root_attribute(document: str, name: str) -> str | None:
    root = _SVG_TAG_RE.search(document)
    if root is None:
        return None
    return read_attributes(root.group()).get(name)


def read_canvas(document: str, config: CanvasConfig | None = None) -> CanvasInfo:
    """Read viewBox, width and height from the root element.

    Only the root ``<svg>`` tag is consulted, so attributes such as
    ``stroke-width`` on inner elements are never mistaken for the canvas size.

    Args:
        document: Outline document text
        config: Fallback values for missing attributes

    Returns:
        CanvasInfo with attribute text or defaults
    """
    config = config or CanvasConfig()
    view_box = _root_attribute(document, "viewBox")
    width = _root_attribute(document, "width")
    height = _root_attribute(document, "height")
    return CanvasInfo(
        view_box=view_box if view_box is not None else config.default_view_box,
        width=width if width is not None else config.default_size_text,
        height=height if height is not None else config.default_size_text,
    )


def parse_length(value: str | None, default: float) -> float:
    """Read the leading numeric portion of a length attribute.

    Unit suffixes ("pt", "mm", "px") are ignored. Missing, unparsable or
    non-positive values give the default.

    Args:
        value: Attribute text such as "210mm"
        default: Fallback value

    Returns:
        Parsed length or default
    """
    if value is None:
        return default
    match = _LEADING_NUMBER_RE.match(value)
    if match is None:
        return default
    number = float(match.group(1))
    return number if number > 0 else default


def canvas_size(document: str, config: CanvasConfig | None = None) -> tuple[float, float]:
    """Canvas width and height used to clamp bridges.

    Args:
        document: Outline document text
        config: Fallback dimensions

    Returns:
        Tuple of (width, height) in document units
    """
    config = config or CanvasConfig()
    return (
        parse_length(_root_attribute(document, "width"), config.default_width),
        parse_length(_root_attribute(document, "height"), config.default_height),
    )


def format_number(value: float) -> str:
    """Format a coordinate compactly without losing precision ("40", "-90", "12.5")."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _attr(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;").replace("<", "&lt;")


class StencilComposer:
    """Serializes original paths and planned bridges into one document.

    Output depends only on its inputs, so composing twice gives identical
    text.
    """

    def __init__(
        self,
        render: RenderConfig | None = None,
        canvas: CanvasConfig | None = None,
    ) -> None:
        """Initialize the composer.

        Args:
            render: Bridge visibility and colors
            canvas: Fallback canvas description
        """
        self.render = render or RenderConfig()
        self.canvas = canvas or CanvasConfig()

    def render_bridge(self, bridge: Bridge, color: str) -> str:
        """Render one bridge as a rotated rectangle.

        The rectangle starts at the bridge's start point, runs along the
        start->end vector for the bridge length, and is centered across that
        axis.

        Args:
            bridge: Bridge to render
            color: Fill color

        Returns:
            A ``<rect>`` element
        """
        x = format_number(bridge.start.x)
        y = format_number(bridge.start.y)
        return (
            f'<rect x="{x}" y="{format_number(bridge.start.y - bridge.width / 2.0)}" '
            f'width="{format_number(bridge.length)}" height="{format_number(bridge.width)}" '
            f'transform="rotate({format_number(bridge.angle_degrees)} {x} {y})" '
            f'fill="{_attr(color)}" stroke="none" class="bridge" '
            f'data-bridge-id="{_attr(bridge.id)}"/>'
        )

    def compose(
        self,
        original_document: str,
        bridges: list[Bridge],
        render: RenderConfig | None = None,
    ) -> str:
        """Compose the stencil document.

        Args:
            original_document: The traced outline document
            bridges: Planned bridges
            render: Overrides the composer's render options for this call

        Returns:
            A complete SVG document string
        """
        render = render or self.render
        canvas = read_canvas(original_document, self.canvas)

        paths = "\n    ".join(find_path_tags(original_document))
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            (
                f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{_attr(canvas.view_box)}" '
                f'width="{_attr(canvas.width)}" height="{_attr(canvas.height)}">'
            ),
            "  <style>",
            f"    path {{ fill: {render.path_color}; }}",
            f"    .bridge {{ fill: {render.bridge_color}; }}",
            "  </style>",
            '  <g id="stencil" class="stencil-paths">',
            f"    {paths}",
            "  </g>",
        ]

        if render.show_bridges:
            rects = "\n    ".join(self.render_bridge(b, render.bridge_color) for b in bridges)
            lines.extend(
                [
                    '  <g id="bridges" class="bridges">',
                    f"    {rects}",
                    "  </g>",
                ]
            )

        lines.append("</svg>")
        return "\n".join(lines) + "\n"
