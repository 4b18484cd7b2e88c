"""
Graph layout and render geometry.
"""

from versegraph.core.layout.radial import (
    LineStyle,
    RadialLayout,
    RenderedLine,
    RenderedNode,
    Viewport,
    line_style,
)

__all__ = [
    "RadialLayout",
    "Viewport",
    "LineStyle",
    "RenderedNode",
    "RenderedLine",
    "line_style",
]
