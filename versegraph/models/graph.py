"""
Cross-reference graph models.

A graph snapshot is built for one center verse and replaced wholesale when
the explorer re-centers; nodes are keyed by their reference string.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from versegraph.models.reference import Testament
from versegraph.utils.exceptions import GraphIntegrityError
from versegraph.utils.id_generator import generate_connection_id


class ConnectionType(str, Enum):
    """Types of connections between Bible verses."""

    PROPHECY_FULFILLMENT = "prophecy_fulfillment"
    PARALLEL_PASSAGE = "parallel_passage"
    DIRECT_QUOTE = "direct_quote"
    THEMATIC_LINK = "thematic_link"
    HISTORICAL_CONTEXT = "historical_context"
    TYPOLOGY = "typology"

    @property
    def display_name(self) -> str:
        return _CONNECTION_DISPLAY_NAMES[self]

    @property
    def description(self) -> str:
        return _CONNECTION_DESCRIPTIONS[self]


_CONNECTION_DISPLAY_NAMES = {
    ConnectionType.PROPHECY_FULFILLMENT: "Prophecy & Fulfillment",
    ConnectionType.PARALLEL_PASSAGE: "Parallel Passage",
    ConnectionType.DIRECT_QUOTE: "Direct Quote",
    ConnectionType.THEMATIC_LINK: "Thematic Link",
    ConnectionType.HISTORICAL_CONTEXT: "Historical Context",
    ConnectionType.TYPOLOGY: "Type & Antitype",
}

_CONNECTION_DESCRIPTIONS = {
    ConnectionType.PROPHECY_FULFILLMENT: "Old Testament prophecies fulfilled in the New Testament",
    ConnectionType.PARALLEL_PASSAGE: "Similar accounts in different books (e.g., Synoptic Gospels)",
    ConnectionType.DIRECT_QUOTE: "One passage directly quoting another",
    ConnectionType.THEMATIC_LINK: "Passages sharing common themes or topics",
    ConnectionType.HISTORICAL_CONTEXT: "Historical events referenced across passages",
    ConnectionType.TYPOLOGY: "Old Testament figures/events prefiguring New Testament realities",
}


class ConnectionStrength(str, Enum):
    """Ordinal weight of a connection, driving line width and opacity."""

    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def line_width(self) -> float:
        return {"strong": 3.0, "moderate": 2.0, "weak": 1.0}[self.value]

    @property
    def opacity(self) -> float:
        return {"strong": 1.0, "moderate": 0.7, "weak": 0.4}[self.value]


class Position(BaseModel):
    """2D layout position."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0


class VerseConnection(BaseModel):
    """A typed, weighted link between two verse references."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_connection_id)
    source_reference: str
    target_reference: str
    connection_type: ConnectionType
    strength: ConnectionStrength = ConnectionStrength.MODERATE
    explanation: str = ""
    ai_generated: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def involves(self, reference: str) -> bool:
        return reference in (self.source_reference, self.target_reference)

    def other_end(self, reference: str) -> str:
        """Return the endpoint opposite ``reference``."""
        if reference == self.source_reference:
            return self.target_reference
        if reference == self.target_reference:
            return self.source_reference
        raise ValueError(f"{reference} is not an endpoint of connection {self.id}")


class VerseNode(BaseModel):
    """A single verse (or verse range) in the cross-reference graph."""

    reference: str
    book_name: str
    chapter: int
    verse_start: int
    verse_end: int | None = None
    testament: Testament
    position: Position = Field(default_factory=Position)

    @property
    def id(self) -> str:
        return self.reference

    @property
    def display_reference(self) -> str:
        if self.verse_end is not None and self.verse_end != self.verse_start:
            return f"{self.book_name} {self.chapter}:{self.verse_start}-{self.verse_end}"
        return f"{self.book_name} {self.chapter}:{self.verse_start}"


class CrossReferenceGraph(BaseModel):
    """
    Graph snapshot centered on one verse.

    Invariant: every connection's endpoints are keys of ``nodes``.
    """

    center_verse: str | None = None
    nodes: dict[str, VerseNode] = Field(default_factory=dict)
    connections: list[VerseConnection] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def add_node(self, node: VerseNode) -> None:
        """Add a node, replacing any node with the same reference."""
        self.nodes[node.reference] = node

    def has_connection(self, connection_id: str) -> bool:
        return any(c.id == connection_id for c in self.connections)

    def add_connection(self, connection: VerseConnection) -> None:
        """
        Add a connection between two existing nodes.

        Raises:
            GraphIntegrityError: If either endpoint is not a node of this graph
        """
        missing = [
            ref
            for ref in (connection.source_reference, connection.target_reference)
            if ref not in self.nodes
        ]
        if missing:
            raise GraphIntegrityError(
                f"Connection {connection.id} references unknown nodes: {', '.join(missing)}",
                context={"connection_id": connection.id, "missing": missing},
            )
        if self.has_connection(connection.id):
            return
        self.connections.append(connection)

    def get_connection(self, connection_id: str) -> VerseConnection | None:
        return next((c for c in self.connections if c.id == connection_id), None)

    def connections_for(self, reference: str) -> list[VerseConnection]:
        return [c for c in self.connections if c.involves(reference)]

    def connected_nodes(self, reference: str) -> list[VerseNode]:
        """Nodes sharing a connection with ``reference``, in connection order."""
        seen: dict[str, VerseNode] = {}
        for connection in self.connections_for(reference):
            other = connection.other_end(reference)
            if other in self.nodes and other not in seen:
                seen[other] = self.nodes[other]
        return list(seen.values())

    def connections_of_type(self, connection_type: ConnectionType) -> list[VerseConnection]:
        return [c for c in self.connections if c.connection_type == connection_type]
