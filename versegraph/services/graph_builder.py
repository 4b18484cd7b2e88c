"""
Cross-reference graph builder.

Builds a CrossReferenceGraph around a center verse by breadth-first
traversal of the cross-reference store, then lays it out radially.
"""

from versegraph.core.crossref_store.base import CrossReferenceStore
from versegraph.core.layout.radial import RadialLayout
from versegraph.core.reference_parser.parser import ReferenceParser
from versegraph.models.graph import CrossReferenceGraph, VerseNode
from versegraph.utils.exceptions import CrossReferenceStoreError
from versegraph.utils.logger import get_logger

logger = get_logger(__name__)


class CrossReferenceGraphBuilder:
    """
    Builds graph snapshots for the explorer.

    A failed build never raises: the caller receives an empty graph with
    ``center_verse`` set and shows the empty state.
    """

    def __init__(
        self,
        store: CrossReferenceStore,
        parser: ReferenceParser | None = None,
        layout: RadialLayout | None = None,
        max_depth: int = 3,
    ):
        """
        Initialize graph builder.

        Args:
            store: Cross-reference catalogue to traverse
            parser: Reference parser used to describe nodes
            layout: Layout applied to every built graph
            max_depth: Upper bound for the traversal depth
        """
        self.store = store
        self.parser = parser or ReferenceParser()
        self.layout = layout or RadialLayout()
        self.max_depth = max_depth

    async def build_graph(self, center_verse: str, depth: int = 1) -> CrossReferenceGraph:
        """
        Build a graph of everything within ``depth`` hops of ``center_verse``.

        Args:
            center_verse: Reference the graph is centered on
            depth: Traversal depth, clamped to [1, max_depth]

        Returns:
            Laid-out graph; empty if the center is unparseable or the store fails
        """
        depth = max(1, min(depth, self.max_depth))
        graph = CrossReferenceGraph(center_verse=center_verse)

        center_node = self.make_node(center_verse)
        if center_node is None:
            logger.warning(f"Cannot build graph: unrecognised center verse '{center_verse}'")
            return graph
        graph.add_node(center_node)

        try:
            await self._expand(graph, center_verse, depth)
        except CrossReferenceStoreError as e:
            logger.warning(f"Graph build for '{center_verse}' failed: {e.message}")
            return CrossReferenceGraph(center_verse=center_verse)

        self.layout.apply(graph)
        logger.debug(
            f"Built graph for '{center_verse}' (depth={depth}): "
            f"{len(graph.nodes)} nodes, {len(graph.connections)} connections"
        )
        return graph

    def make_node(self, reference: str) -> VerseNode | None:
        """Describe a reference as a graph node, or None if it cannot be parsed."""
        parsed = self.parser.parse(reference)
        if parsed is None:
            return None
        return VerseNode(
            reference=reference,
            book_name=parsed.book_display_name,
            chapter=parsed.chapter,
            verse_start=parsed.verse_start or 1,
            verse_end=parsed.verse_end,
            testament=parsed.testament,
        )

    async def _expand(self, graph: CrossReferenceGraph, center_verse: str, depth: int) -> None:
        frontier = [center_verse]
        visited = {center_verse}

        for _ in range(depth):
            next_frontier: list[str] = []
            for reference in frontier:
                for connection in await self.store.get_cross_references(reference):
                    other = connection.other_end(reference)
                    if other not in graph.nodes:
                        node = self.make_node(other)
                        if node is None:
                            logger.debug(f"Skipping connection {connection.id}: cannot parse '{other}'")
                            continue
                        graph.add_node(node)
                    graph.add_connection(connection)
                    if other not in visited:
                        visited.add(other)
                        next_frontier.append(other)
            frontier = next_frontier
            if not frontier:
                break
