"""
Fixtures for service tests.
"""

import asyncio

import pytest

from versegraph.core.crossref_store import CrossReferenceStore
from versegraph.models import ConnectionType, CrossReferenceGraph, VerseConnection
from versegraph.services import CrossReferenceGraphBuilder, Navigator
from versegraph.utils.exceptions import CrossReferenceStoreError


class FailingStore(CrossReferenceStore):
    """Store whose reads always fail."""

    async def initialize(self) -> None:
        pass

    async def add_connection(self, connection: VerseConnection) -> str:
        raise CrossReferenceStoreError("read-only")

    async def get_cross_references(self, reference: str) -> list[VerseConnection]:
        raise CrossReferenceStoreError("database unavailable")

    async def get_connections_by_type(
        self, connection_type: ConnectionType
    ) -> list[VerseConnection]:
        raise CrossReferenceStoreError("database unavailable")

    async def count_connections(self, connection_type: ConnectionType | None = None) -> int:
        return 0

    async def close(self) -> None:
        pass


class GatedBuilder(CrossReferenceGraphBuilder):
    """
    Builder whose builds wait until released, so tests can control the
    order in which responses arrive.
    """

    def __init__(self, store: CrossReferenceStore):
        super().__init__(store)
        self.gates: dict[str, asyncio.Event] = {}

    def gate(self, reference: str) -> asyncio.Event:
        return self.gates.setdefault(reference, asyncio.Event())

    async def build_graph(self, center_verse: str, depth: int = 1) -> CrossReferenceGraph:
        await self.gate(center_verse).wait()
        return await super().build_graph(center_verse, depth)


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def builder(memory_store) -> CrossReferenceGraphBuilder:
    return CrossReferenceGraphBuilder(memory_store)


@pytest.fixture
def gated_builder(memory_store) -> GatedBuilder:
    return GatedBuilder(memory_store)


@pytest.fixture
def navigator() -> Navigator:
    return Navigator()
