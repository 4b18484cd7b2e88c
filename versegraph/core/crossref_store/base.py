"""
Base interface for cross-reference storage.
"""

from abc import ABC, abstractmethod

from versegraph.models.graph import ConnectionType, VerseConnection


class CrossReferenceStore(ABC):
    """Abstract base class for cross-reference catalogue implementations."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the store (create schema, seed catalogue)."""
        pass

    # ═══════════════════════════════════════════════════════════
    # CONNECTION OPERATIONS
    # ═══════════════════════════════════════════════════════════

    @abstractmethod
    async def add_connection(self, connection: VerseConnection) -> str:
        """
        Add a connection to the catalogue.

        Args:
            connection: Connection to store

        Returns:
            Connection ID
        """
        pass

    @abstractmethod
    async def get_cross_references(self, reference: str) -> list[VerseConnection]:
        """
        Get every connection touching a reference.

        Args:
            reference: Verse reference, matched against source or target

        Returns:
            Connections in catalogue order
        """
        pass

    @abstractmethod
    async def get_connections_by_type(
        self, connection_type: ConnectionType
    ) -> list[VerseConnection]:
        """
        Get all connections of one type.

        Args:
            connection_type: Type to filter by

        Returns:
            Matching connections
        """
        pass

    # ═══════════════════════════════════════════════════════════
    # UTILITY METHODS
    # ═══════════════════════════════════════════════════════════

    @abstractmethod
    async def count_connections(self, connection_type: ConnectionType | None = None) -> int:
        """
        Count connections.

        Args:
            connection_type: Optional filter by type

        Returns:
            Count of connections
        """
        pass

    async def connection_stats(self) -> dict[str, int]:
        """Total count plus a count per connection type."""
        stats = {"total": await self.count_connections()}
        for connection_type in ConnectionType:
            stats[connection_type.value] = await self.count_connections(connection_type)
        return stats

    @abstractmethod
    async def close(self) -> None:
        """Release store resources."""
        pass
