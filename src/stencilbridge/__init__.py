"""Stencilbridge - Turn traced outlines into laser-cuttable stencils.

Stencilbridge is a CLI tool that takes a vectorized outline (an SVG produced by
a tracer such as potrace) and detects enclosed sub-shapes (islands) that would
fall out of the material once cut. Each island gets small bridges of uncut
material connecting it to its surroundings.

Example:
    $ stencilbridge logo.svg

This will create logo_stencil.svg with a "stencil" layer holding the original
paths and a "bridges" layer holding the generated connectors.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
