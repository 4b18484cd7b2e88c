"""
Shared test fixtures.
"""

from collections.abc import AsyncGenerator

import pytest

from versegraph.core.crossref_store import InMemoryCrossReferenceStore
from versegraph.core.reference_parser import ReferenceParser
from versegraph.models import (
    ConnectionStrength,
    ConnectionType,
    CrossReferenceGraph,
    Testament,
    VerseConnection,
    VerseNode,
)


@pytest.fixture
def parser() -> ReferenceParser:
    return ReferenceParser()


@pytest.fixture
async def memory_store() -> AsyncGenerator[InMemoryCrossReferenceStore, None]:
    """In-memory store seeded with the built-in catalogue."""
    store = InMemoryCrossReferenceStore()
    await store.initialize()
    yield store
    await store.close()


def make_node(reference: str, book: str, chapter: int, verse: int, testament: Testament) -> VerseNode:
    return VerseNode(
        reference=reference,
        book_name=book,
        chapter=chapter,
        verse_start=verse,
        testament=testament,
    )


@pytest.fixture
def sample_graph() -> CrossReferenceGraph:
    """Three-node graph centered on John 3:16."""
    graph = CrossReferenceGraph(center_verse="John 3:16")
    graph.add_node(make_node("John 3:16", "John", 3, 16, Testament.NEW))
    graph.add_node(make_node("Romans 5:8", "Romans", 5, 8, Testament.NEW))
    graph.add_node(make_node("Isaiah 53:5", "Isaiah", 53, 5, Testament.OLD))
    graph.add_connection(
        VerseConnection(
            id="xref_love",
            source_reference="John 3:16",
            target_reference="Romans 5:8",
            connection_type=ConnectionType.THEMATIC_LINK,
            strength=ConnectionStrength.MODERATE,
        )
    )
    graph.add_connection(
        VerseConnection(
            id="xref_servant",
            source_reference="Isaiah 53:5",
            target_reference="John 3:16",
            connection_type=ConnectionType.PROPHECY_FULFILLMENT,
            strength=ConnectionStrength.STRONG,
        )
    )
    return graph


@pytest.fixture
def node_factory():
    """Build VerseNode instances without going through the parser."""
    return make_node
