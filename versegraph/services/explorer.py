"""
Cross-reference explorer session.

Holds the interaction state of one explorer: the current graph snapshot,
selection, zoom and pan, and the connection-type filter.

States:
    LOADING -> POPULATED | EMPTY
    POPULATED -> LOADING (explore from node) -> POPULATED | EMPTY
    any -> DISMISSED (terminal)

Every graph request is tagged with a monotonic sequence number. A response
arriving after a newer request was issued is dropped, so a slow build can
never overwrite the graph of a later one.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from versegraph.config import ExplorerConfig
from versegraph.core.layout.radial import RadialLayout, RenderedLine, RenderedNode, Viewport
from versegraph.models.graph import (
    ConnectionType,
    CrossReferenceGraph,
    Position,
    VerseConnection,
    VerseNode,
)
from versegraph.services.filters import ConnectionFilter
from versegraph.services.graph_builder import CrossReferenceGraphBuilder
from versegraph.utils.exceptions import NotFoundError
from versegraph.utils.logger import get_logger

logger = get_logger(__name__)


class ExplorerState(str, Enum):
    """Lifecycle state of an explorer session."""

    LOADING = "loading"
    POPULATED = "populated"
    EMPTY = "empty"
    DISMISSED = "dismissed"


@dataclass(frozen=True)
class NodeConnection:
    """A connection seen from one node, with the reference at its other end."""

    other_reference: str
    connection: VerseConnection


@dataclass(frozen=True)
class NodeDetails:
    node: VerseNode
    connections: list[NodeConnection]
    can_explore: bool


@dataclass(frozen=True)
class ExplorerFrame:
    """Everything needed to draw the explorer once."""

    nodes: list[RenderedNode]
    lines: list[RenderedLine]
    scale: float
    offset: Position


class ExplorerSession:
    """Interaction state machine for the cross-reference explorer."""

    def __init__(
        self,
        builder: CrossReferenceGraphBuilder,
        initial_verse: str,
        config: ExplorerConfig | None = None,
        connection_filter: ConnectionFilter | None = None,
        depth: int = 1,
        on_navigate: Callable[[str], None] | None = None,
    ):
        """
        Initialize explorer session.

        Args:
            builder: Graph builder used for every (re)load
            initial_verse: Verse the explorer opens on
            config: Zoom and pan limits
            connection_filter: Filter state, shareable between sessions
            depth: Traversal depth for every build
            on_navigate: Called with a reference when the user opens a verse
        """
        self.builder = builder
        self.initial_verse = initial_verse
        self.config = config or ExplorerConfig()
        self.filter = connection_filter or ConnectionFilter()
        self.depth = depth
        self.on_navigate = on_navigate

        self.state = ExplorerState.LOADING
        self.graph = CrossReferenceGraph()
        self.selected_node: VerseNode | None = None
        self.selected_connection: VerseConnection | None = None
        self.scale = 1.0
        self.offset = Position()

        self._latest_request = 0

    @property
    def layout(self) -> RadialLayout:
        return self.builder.layout

    @property
    def is_dismissed(self) -> bool:
        return self.state == ExplorerState.DISMISSED

    # ═══════════════════════════════════════════════════════════
    # LOADING
    # ═══════════════════════════════════════════════════════════

    async def load(self) -> bool:
        """Load the graph for the initial verse."""
        return await self._load(self.initial_verse)

    async def explore_from_node(self, reference: str) -> bool:
        """
        Re-center the explorer on another node of the current graph.

        Returns:
            False if ``reference`` is already the center or the response
            was superseded, True if the new graph was installed

        Raises:
            NotFoundError: If ``reference`` is not a node of the current graph
        """
        if reference not in self.graph.nodes:
            raise NotFoundError(f"Node not in graph: {reference}", context={"reference": reference})
        if reference == self.graph.center_verse:
            return False
        return await self._load(reference)

    async def _load(self, reference: str) -> bool:
        if self.is_dismissed:
            return False

        self._latest_request += 1
        request_id = self._latest_request
        self.state = ExplorerState.LOADING

        graph = await self.builder.build_graph(reference, depth=self.depth)

        if self.is_dismissed or request_id != self._latest_request:
            logger.debug(
                f"Discarding stale graph for '{reference}' "
                f"(request {request_id}, latest {self._latest_request})"
            )
            return False

        self._install(graph)
        return True

    def _install(self, graph: CrossReferenceGraph) -> None:
        self.graph = graph
        self.selected_node = None
        self.selected_connection = None
        self.scale = 1.0
        self.offset = Position()
        self.state = ExplorerState.EMPTY if graph.is_empty else ExplorerState.POPULATED
        logger.info(
            f"Explorer showing '{graph.center_verse}' "
            f"({len(graph.nodes)} nodes, {len(graph.connections)} connections)"
        )

    # ═══════════════════════════════════════════════════════════
    # SELECTION
    # ═══════════════════════════════════════════════════════════

    def select_node(self, reference: str) -> VerseNode | None:
        """
        Toggle selection of a node. Selecting a node clears the connection selection.

        Returns:
            The selected node, or None if the node was deselected
        """
        node = self.graph.nodes.get(reference)
        if node is None:
            raise NotFoundError(f"Node not in graph: {reference}", context={"reference": reference})

        if self.selected_node is not None and self.selected_node.reference == reference:
            self.selected_node = None
        else:
            self.selected_node = node
            self.selected_connection = None
        return self.selected_node

    def select_connection(self, connection_id: str) -> VerseConnection:
        """Select a connection. Selecting a connection clears the node selection."""
        connection = self.graph.get_connection(connection_id)
        if connection is None:
            raise NotFoundError(
                f"Connection not in graph: {connection_id}",
                context={"connection_id": connection_id},
            )
        self.selected_connection = connection
        self.selected_node = None
        return connection

    def clear_selection(self) -> None:
        self.selected_node = None
        self.selected_connection = None

    def node_details(self, reference: str) -> NodeDetails:
        node = self.graph.nodes.get(reference)
        if node is None:
            raise NotFoundError(f"Node not in graph: {reference}", context={"reference": reference})
        return NodeDetails(
            node=node,
            connections=[
                NodeConnection(other_reference=c.other_end(reference), connection=c)
                for c in self.graph.connections_for(reference)
            ],
            can_explore=reference != self.graph.center_verse,
        )

    # ═══════════════════════════════════════════════════════════
    # ZOOM, PAN, FILTER
    # ═══════════════════════════════════════════════════════════

    def apply_magnification(self, value: float) -> float:
        """Set zoom scale, clamped to the configured bounds. Non-finite input is ignored."""
        if math.isfinite(value):
            self.scale = min(max(value, self.config.min_scale), self.config.max_scale)
        return self.scale

    def apply_drag(self, dx: float, dy: float) -> Position:
        """Set pan offset to the drag translation."""
        if not (math.isfinite(dx) and math.isfinite(dy)):
            return self.offset
        limit = self.config.pan_limit
        if limit is not None:
            dx = min(max(dx, -limit), limit)
            dy = min(max(dy, -limit), limit)
        self.offset = Position(x=dx, y=dy)
        return self.offset

    def toggle_connection_type(self, connection_type: ConnectionType) -> bool:
        visible = self.filter.toggle(connection_type)
        if (
            not visible
            and self.selected_connection is not None
            and self.selected_connection.connection_type == connection_type
        ):
            self.selected_connection = None
        return visible

    @property
    def filtered_connections(self) -> list[VerseConnection]:
        return self.filter.apply(self.graph.connections)

    # ═══════════════════════════════════════════════════════════
    # NAVIGATION & RENDERING
    # ═══════════════════════════════════════════════════════════

    def read_verse(self, reference: str) -> None:
        """Hand the reference to the navigation callback and close the explorer."""
        if reference not in self.graph.nodes:
            raise NotFoundError(f"Node not in graph: {reference}", context={"reference": reference})
        if self.on_navigate is not None:
            self.on_navigate(reference)
        self.dismiss()

    def dismiss(self) -> None:
        """Close the session and discard all local state. Later responses are ignored."""
        self.state = ExplorerState.DISMISSED
        self.graph = CrossReferenceGraph()
        self.selected_node = None
        self.selected_connection = None
        self.scale = 1.0
        self.offset = Position()

    def render(self, viewport: Viewport) -> ExplorerFrame:
        return ExplorerFrame(
            nodes=self.layout.render_nodes(self.graph, viewport),
            lines=self.layout.render_lines(self.graph, self.filtered_connections, viewport),
            scale=self.scale,
            offset=self.offset,
        )
