"""
In-memory cross-reference store.
"""

from versegraph.core.crossref_store.base import CrossReferenceStore
from versegraph.core.crossref_store.catalogue import BUILTIN_CROSS_REFERENCES
from versegraph.models.graph import ConnectionType, VerseConnection
from versegraph.utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryCrossReferenceStore(CrossReferenceStore):
    """
    Cross-reference store backed by a Python list.

    Used as the default backend and in tests. Seeded with the built-in
    catalogue unless ``seed_catalogue`` is False.
    """

    def __init__(self, seed_catalogue: bool = True):
        self.seed_catalogue = seed_catalogue
        self._connections: dict[str, VerseConnection] = {}

    async def initialize(self) -> None:
        if self.seed_catalogue:
            for connection in BUILTIN_CROSS_REFERENCES:
                self._connections.setdefault(connection.id, connection)
        logger.info(f"In-memory cross-reference store ready ({len(self._connections)} connections)")

    async def add_connection(self, connection: VerseConnection) -> str:
        self._connections[connection.id] = connection
        return connection.id

    async def get_cross_references(self, reference: str) -> list[VerseConnection]:
        return [c for c in self._connections.values() if c.involves(reference)]

    async def get_connections_by_type(
        self, connection_type: ConnectionType
    ) -> list[VerseConnection]:
        return [c for c in self._connections.values() if c.connection_type == connection_type]

    async def count_connections(self, connection_type: ConnectionType | None = None) -> int:
        if connection_type is None:
            return len(self._connections)
        return len(await self.get_connections_by_type(connection_type))

    async def close(self) -> None:
        self._connections.clear()
