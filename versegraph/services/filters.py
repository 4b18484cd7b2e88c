"""
Connection-type filter state.
"""

from collections.abc import Iterable

from versegraph.models.graph import ConnectionType, VerseConnection


class ConnectionFilter:
    """
    Set of connection types currently visible.

    Filtering never mutates the graph; ``apply`` returns a new list in the
    original order.
    """

    def __init__(self, visible: Iterable[ConnectionType] | None = None):
        self._visible: set[ConnectionType] = (
            set(ConnectionType) if visible is None else set(visible)
        )

    @property
    def visible_types(self) -> frozenset[ConnectionType]:
        return frozenset(self._visible)

    def toggle(self, connection_type: ConnectionType) -> bool:
        """
        Show the type if hidden, hide it if shown.

        Returns:
            True if the type is visible after the toggle
        """
        if connection_type in self._visible:
            self._visible.remove(connection_type)
            return False
        self._visible.add(connection_type)
        return True

    def is_visible(self, connection_type: ConnectionType) -> bool:
        return connection_type in self._visible

    def apply(self, connections: Iterable[VerseConnection]) -> list[VerseConnection]:
        return [c for c in connections if c.connection_type in self._visible]

    def reset(self) -> None:
        self._visible = set(ConnectionType)
