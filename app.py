"""
VerseGraph FastAPI Application

A REST API server for the VerseGraph cross-reference explorer.
Provides endpoints for building verse graphs, resolving deep links,
and exporting or importing the conversation archive.
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel, Field

from versegraph.config import Config
from versegraph.core.factory import CrossReferenceStoreFactory
from versegraph.core.layout import RadialLayout, line_style
from versegraph.core.reference_parser import ReferenceParser
from versegraph.models.graph import ConnectionType, CrossReferenceGraph, VerseConnection
from versegraph.services import (
    ConnectionFilter,
    ConversationArchive,
    CrossReferenceGraphBuilder,
    DeepLinkHandler,
    Navigator,
)
from versegraph.utils.exceptions import (
    ArchiveImportError,
    CrossReferenceStoreError,
    NotFoundError,
)
from versegraph.utils.logger import get_logger, setup_logging_from_config

# Global component instances
config: Config | None = None
store = None
builder: CrossReferenceGraphBuilder | None = None
archive: ConversationArchive | None = None
navigator: Navigator | None = None
deep_links: DeepLinkHandler | None = None
logger = get_logger(__name__)


# Pydantic models for API
class NodeResult(BaseModel):
    """Graph node as returned by the API."""

    reference: str
    display_reference: str
    book_name: str
    testament: str
    x: float
    y: float
    is_center: bool


class ConnectionResult(BaseModel):
    """Cross-reference connection as returned by the API."""

    id: str
    source_reference: str
    target_reference: str
    connection_type: str
    connection_type_name: str
    strength: str
    explanation: str
    line_width: float
    opacity: float
    dashed: bool


class GraphResponse(BaseModel):
    """Response model for a built graph."""

    center_verse: str | None
    depth: int
    is_empty: bool
    nodes: list[NodeResult]
    connections: list[ConnectionResult]


class ParseReferencesRequest(BaseModel):
    """Request model for extracting references from text."""

    text: str = Field(..., description="Free text containing verse references")


class ParsedReferenceResult(BaseModel):
    """One reference found in text."""

    raw_input: str
    canonical_reference: str
    osis_book_id: str
    testament: str
    chapter: int
    verse_start: int | None
    verse_end: int | None
    is_valid: bool
    reason: str | None = None


class ResolveDeepLinkRequest(BaseModel):
    """Request model for resolving a deep link."""

    url: str


class ResolveDeepLinkResponse(BaseModel):
    """Deep link resolution result. Malformed links resolve to ``handled=False``."""

    handled: bool
    translation: str | None = None
    book: str | None = None
    chapter: int | None = None
    verse: int | None = None
    link: str | None = None


class ImportResponse(BaseModel):
    imported: int
    total_conversations: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    store_initialized: bool
    store_backend: str
    connection_count: int


def _connection_result(connection: VerseConnection) -> ConnectionResult:
    style = line_style(connection)
    return ConnectionResult(
        id=connection.id,
        source_reference=connection.source_reference,
        target_reference=connection.target_reference,
        connection_type=connection.connection_type.value,
        connection_type_name=connection.connection_type.display_name,
        strength=connection.strength.value,
        explanation=connection.explanation,
        line_width=connection.strength.line_width,
        opacity=connection.strength.opacity,
        dashed=style.is_dashed,
    )


def _graph_response(
    graph: CrossReferenceGraph, depth: int, connections: list[VerseConnection]
) -> GraphResponse:
    return GraphResponse(
        center_verse=graph.center_verse,
        depth=depth,
        is_empty=graph.is_empty,
        nodes=[
            NodeResult(
                reference=node.reference,
                display_reference=node.display_reference,
                book_name=node.book_name,
                testament=node.testament.value,
                x=node.position.x,
                y=node.position.y,
                is_center=node.reference == graph.center_verse,
            )
            for node in graph.nodes.values()
        ],
        connections=[_connection_result(c) for c in connections],
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    global config, store, builder, archive, navigator, deep_links

    # Load configuration from environment or use defaults
    config = Config.from_env()
    setup_logging_from_config(config.logging)

    logger.info("Starting VerseGraph server")
    logger.info(
        f"Configuration: backend={config.cross_references.backend}, "
        f"default_depth={config.cross_references.default_depth}, "
        f"max_depth={config.cross_references.max_depth}"
    )

    logger.info("Creating cross-reference store")
    store = CrossReferenceStoreFactory.create(config.cross_references)
    await store.initialize()

    layout = RadialLayout(
        center=(config.layout.center_x, config.layout.center_y),
        radius=config.layout.radius,
    )
    builder = CrossReferenceGraphBuilder(
        store=store,
        parser=ReferenceParser(),
        layout=layout,
        max_depth=config.cross_references.max_depth,
    )
    archive = ConversationArchive()
    navigator = Navigator()
    deep_links = DeepLinkHandler(navigator, config.deep_links)
    logger.info("VerseGraph components initialized")

    yield

    # Cleanup
    logger.info("Shutting down VerseGraph server")
    await store.close()
    logger.info("Cleanup complete")


# Create FastAPI app
app = FastAPI(
    title="VerseGraph API",
    description="Bible cross-reference graphs, verse deep links and conversation archives",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check endpoint
@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    if not store:
        return HealthResponse(
            status="initializing", store_initialized=False, store_backend="", connection_count=0
        )
    try:
        connection_count = await store.count_connections()
    except CrossReferenceStoreError as e:
        logger.error(f"Health check failed: {e}")
        return HealthResponse(
            status="unhealthy",
            store_initialized=True,
            store_backend=config.cross_references.backend,
            connection_count=0,
        )
    return HealthResponse(
        status="healthy",
        store_initialized=True,
        store_backend=config.cross_references.backend,
        connection_count=connection_count,
    )


# Graph endpoints
@app.get("/graph", response_model=GraphResponse)
async def get_graph(
    verse: str = Query(..., description="Center verse, e.g. 'John 3:16'"),
    depth: int | None = Query(default=None, ge=1, description="Traversal depth"),
    types: list[ConnectionType] | None = Query(default=None, description="Visible types"),
):
    """
    Build the cross-reference graph around a verse.

    Nodes carry radial layout positions. An unrecognised verse or a store
    failure yields an empty graph, not an error. ``types`` limits the
    returned connections without changing the nodes.
    """
    if not builder:
        raise HTTPException(status_code=503, detail="Graph builder not initialized")

    effective_depth = min(depth or config.cross_references.default_depth, builder.max_depth)
    graph = await builder.build_graph(verse, depth=effective_depth)
    connection_filter = ConnectionFilter(visible=types)
    return _graph_response(graph, effective_depth, connection_filter.apply(graph.connections))


@app.get("/cross-references", response_model=list[ConnectionResult])
async def get_cross_references(verse: str = Query(..., description="Verse reference")):
    """Get every connection touching a verse."""
    if not store:
        raise HTTPException(status_code=503, detail="Store not initialized")

    try:
        connections = await store.get_cross_references(verse)
    except CrossReferenceStoreError as e:
        logger.error(f"Error getting cross-references: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e
    return [_connection_result(c) for c in connections]


@app.get("/connections/{connection_type}", response_model=list[ConnectionResult])
async def get_connections_by_type(connection_type: ConnectionType):
    """Get all connections of one type."""
    if not store:
        raise HTTPException(status_code=503, detail="Store not initialized")

    try:
        connections = await store.get_connections_by_type(connection_type)
    except CrossReferenceStoreError as e:
        logger.error(f"Error getting connections: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e
    return [_connection_result(c) for c in connections]


# Reference endpoints
@app.post("/references/parse", response_model=list[ParsedReferenceResult])
async def parse_references(request: ParseReferencesRequest):
    """Extract verse references from free text and validate each one."""
    parser = builder.parser if builder else ReferenceParser()
    results = []
    for reference in parser.parse_all(request.text):
        validation = parser.validate(reference)
        results.append(
            ParsedReferenceResult(
                raw_input=reference.raw_input,
                canonical_reference=reference.canonical_reference,
                osis_book_id=reference.osis_book_id,
                testament=reference.testament.value,
                chapter=reference.chapter,
                verse_start=reference.verse_start,
                verse_end=reference.verse_end,
                is_valid=validation.is_valid,
                reason=validation.reason,
            )
        )
    return results


@app.post("/deep-links/resolve", response_model=ResolveDeepLinkResponse)
async def resolve_deep_link(request: ResolveDeepLinkRequest):
    """
    Resolve a verse deep link.

    Malformed links are not errors: they report ``handled=False``.
    """
    if not deep_links:
        raise HTTPException(status_code=503, detail="Deep link handler not initialized")

    if not deep_links.handle(request.url):
        return ResolveDeepLinkResponse(handled=False)

    reference = navigator.consume()
    return ResolveDeepLinkResponse(
        handled=True,
        translation=reference.translation,
        book=reference.book,
        chapter=reference.chapter,
        verse=reference.verse,
        link=deep_links.build(reference),
    )


# Conversation endpoints
@app.get("/conversations/export")
async def export_conversations():
    """Export every conversation as a JSON array."""
    if archive is None:
        raise HTTPException(status_code=503, detail="Archive not initialized")
    return Response(content=archive.export_all_json(), media_type="application/json")


@app.post("/conversations/import", response_model=ImportResponse)
async def import_conversations(request: Request):
    """
    Import conversations from a JSON export.

    Conversations already present are skipped.
    """
    if archive is None:
        raise HTTPException(status_code=503, detail="Archive not initialized")

    try:
        imported = archive.import_json(await request.body())
    except ArchiveImportError as e:
        logger.warning(f"Rejected conversation import: {e}")
        raise HTTPException(status_code=400, detail=e.message) from e
    return ImportResponse(imported=imported, total_conversations=len(archive.conversations))


@app.get("/conversations/{conversation_id}/text", response_class=PlainTextResponse)
async def export_conversation_text(conversation_id: str):
    """Render one conversation as readable text."""
    if archive is None:
        raise HTTPException(status_code=503, detail="Archive not initialized")

    try:
        conversation = archive.get(conversation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail="Conversation not found") from e
    return archive.export_conversation_text(conversation)


# Statistics endpoint
@app.get("/stats")
async def get_stats() -> dict[str, Any]:
    """
    Get system statistics.

    Returns connection counts per type and conversation archive totals.
    """
    if not store:
        raise HTTPException(status_code=503, detail="Store not initialized")

    try:
        connections = await store.connection_stats()
    except CrossReferenceStoreError as e:
        logger.error(f"Error getting stats: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e
    return {"connections": connections, "conversations": archive.statistics()}


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "VerseGraph API",
        "version": "1.0.0",
        "description": "Bible cross-reference graphs, verse deep links and conversation archives",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
