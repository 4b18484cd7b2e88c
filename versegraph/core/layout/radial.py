"""
Radial layout and screen projection for cross-reference graphs.

Positions are stored in layout space, where the center verse sits at
``center``. Screen space shifts layout space so that ``center`` lands in
the middle of the viewport.
"""

from dataclasses import dataclass

import numpy as np

from versegraph.models.graph import (
    ConnectionType,
    CrossReferenceGraph,
    Position,
    VerseConnection,
    VerseNode,
)


@dataclass(frozen=True)
class Viewport:
    """Size of the drawing surface."""

    width: float
    height: float


@dataclass(frozen=True)
class LineStyle:
    """Stroke style of a rendered connection."""

    width: float
    opacity: float
    dash: tuple[float, ...] = ()

    @property
    def is_dashed(self) -> bool:
        return bool(self.dash)


@dataclass(frozen=True)
class RenderedNode:
    reference: str
    position: Position
    is_center: bool


@dataclass(frozen=True)
class RenderedLine:
    connection_id: str
    start: Position
    end: Position
    style: LineStyle


THEMATIC_DASH = (5.0, 5.0)


class RadialLayout:
    """
    Places the center verse at ``center`` and every other node evenly on a
    circle of ``radius`` around it, starting from the top (-π/2).

    Nodes are ordered by reference so layouts are reproducible.
    """

    def __init__(self, center: tuple[float, float] = (200.0, 200.0), radius: float = 150.0):
        self.center = Position(x=center[0], y=center[1])
        self.radius = radius

    def apply(self, graph: CrossReferenceGraph) -> CrossReferenceGraph:
        """Assign positions in place and return the graph."""
        center_ref = graph.center_verse
        if center_ref is None or center_ref not in graph.nodes:
            return graph

        graph.nodes[center_ref].position = self.center

        others = sorted(ref for ref in graph.nodes if ref != center_ref)
        if not others:
            return graph

        angles = np.arange(len(others)) * (2 * np.pi / len(others)) - np.pi / 2
        xs = self.center.x + self.radius * np.cos(angles)
        ys = self.center.y + self.radius * np.sin(angles)

        for ref, x, y in zip(others, xs, ys, strict=True):
            graph.nodes[ref].position = Position(x=float(x), y=float(y))

        return graph

    def to_screen(self, position: Position, viewport: Viewport) -> Position:
        """Project a layout position into viewport coordinates."""
        return Position(
            x=position.x + viewport.width / 2 - self.center.x,
            y=position.y + viewport.height / 2 - self.center.y,
        )

    def render_nodes(
        self, graph: CrossReferenceGraph, viewport: Viewport
    ) -> list[RenderedNode]:
        return [
            RenderedNode(
                reference=node.reference,
                position=self.to_screen(node.position, viewport),
                is_center=node.reference == graph.center_verse,
            )
            for node in _sorted_nodes(graph)
        ]

    def render_lines(
        self,
        graph: CrossReferenceGraph,
        connections: list[VerseConnection],
        viewport: Viewport,
    ) -> list[RenderedLine]:
        """Straight segments between endpoints; connections with a missing endpoint are skipped."""
        lines = []
        for connection in connections:
            source = graph.nodes.get(connection.source_reference)
            target = graph.nodes.get(connection.target_reference)
            if source is None or target is None:
                continue
            lines.append(
                RenderedLine(
                    connection_id=connection.id,
                    start=self.to_screen(source.position, viewport),
                    end=self.to_screen(target.position, viewport),
                    style=line_style(connection),
                )
            )
        return lines


def line_style(connection: VerseConnection) -> LineStyle:
    """Dashed for thematic links, solid otherwise; width and opacity from strength."""
    return LineStyle(
        width=connection.strength.line_width,
        opacity=connection.strength.opacity,
        dash=THEMATIC_DASH if connection.connection_type == ConnectionType.THEMATIC_LINK else (),
    )


def _sorted_nodes(graph: CrossReferenceGraph) -> list[VerseNode]:
    return [graph.nodes[ref] for ref in sorted(graph.nodes)]
