"""
Tests for the explorer session state machine.
"""

import asyncio
import math

import pytest

from versegraph.config import ExplorerConfig
from versegraph.core.layout import Viewport
from versegraph.models import ConnectionType, Position
from versegraph.services import (
    ConnectionFilter,
    CrossReferenceGraphBuilder,
    ExplorerSession,
    ExplorerState,
)
from versegraph.utils.exceptions import NotFoundError


@pytest.fixture
async def session(builder) -> ExplorerSession:
    explorer = ExplorerSession(builder, "John 3:16")
    await explorer.load()
    return explorer


@pytest.mark.unit
@pytest.mark.asyncio
class TestLoading:
    """Test state transitions while loading graphs."""

    async def test_initial_state_is_loading(self, builder):
        assert ExplorerSession(builder, "John 3:16").state == ExplorerState.LOADING

    async def test_load_populates(self, session):
        assert session.state == ExplorerState.POPULATED
        assert session.graph.center_verse == "John 3:16"
        assert len(session.graph.nodes) == 3

    async def test_unparseable_verse_is_empty(self, builder):
        explorer = ExplorerSession(builder, "Xyzzy 1:1")

        assert await explorer.load() is True
        assert explorer.state == ExplorerState.EMPTY

    async def test_store_failure_is_empty(self, failing_store):
        explorer = ExplorerSession(CrossReferenceGraphBuilder(failing_store), "John 3:16")
        await explorer.load()

        assert explorer.state == ExplorerState.EMPTY

    async def test_explore_from_node_replaces_graph(self, session):
        assert await session.explore_from_node("Romans 5:8") is True

        assert session.graph.center_verse == "Romans 5:8"
        assert set(session.graph.nodes) == {"Romans 5:8", "John 3:16", "1 John 4:10"}
        assert session.state == ExplorerState.POPULATED

    async def test_explore_resets_view_state(self, session):
        session.select_node("Romans 5:8")
        session.apply_magnification(1.8)
        session.apply_drag(40.0, -25.0)

        await session.explore_from_node("Romans 5:8")

        assert session.selected_node is None
        assert session.selected_connection is None
        assert session.scale == 1.0
        assert session.offset == Position()

    async def test_explore_from_center_is_noop(self, session):
        assert await session.explore_from_node("John 3:16") is False
        assert session.graph.center_verse == "John 3:16"

    async def test_explore_from_unknown_node(self, session):
        with pytest.raises(NotFoundError):
            await session.explore_from_node("Jude 1:3")

    async def test_depth_passed_to_builder(self, builder):
        explorer = ExplorerSession(builder, "John 3:16", depth=2)
        await explorer.load()

        assert "1 John 4:10" in explorer.graph.nodes


@pytest.mark.unit
@pytest.mark.asyncio
class TestStaleResponses:
    """Test that superseded graph responses are dropped."""

    async def test_older_response_discarded(self, gated_builder):
        explorer = ExplorerSession(gated_builder, "John 3:16")
        gated_builder.gate("John 3:16").set()
        await explorer.load()

        first = asyncio.create_task(explorer.explore_from_node("Romans 5:8"))
        await asyncio.sleep(0)
        assert explorer.state == ExplorerState.LOADING
        second = asyncio.create_task(explorer.explore_from_node("1 John 4:9"))
        await asyncio.sleep(0)

        gated_builder.gate("1 John 4:9").set()
        assert await second is True
        gated_builder.gate("Romans 5:8").set()
        assert await first is False

        assert explorer.graph.center_verse == "1 John 4:9"
        assert explorer.state == ExplorerState.POPULATED

    async def test_response_after_dismiss_ignored(self, gated_builder):
        explorer = ExplorerSession(gated_builder, "John 3:16")

        pending = asyncio.create_task(explorer.load())
        await asyncio.sleep(0)
        explorer.dismiss()
        gated_builder.gate("John 3:16").set()

        assert await pending is False
        assert explorer.state == ExplorerState.DISMISSED
        assert explorer.graph.is_empty

    async def test_load_after_dismiss_is_noop(self, session):
        session.dismiss()

        assert await session.load() is False
        assert session.is_dismissed


@pytest.mark.unit
@pytest.mark.asyncio
class TestSelection:
    """Test node and connection selection."""

    async def test_select_node_toggles(self, session):
        assert session.select_node("Romans 5:8").reference == "Romans 5:8"
        assert session.select_node("Romans 5:8") is None
        assert session.selected_node is None

    async def test_node_and_connection_selection_exclusive(self, session):
        connection_id = session.graph.connections[0].id

        session.select_node("Romans 5:8")
        session.select_connection(connection_id)
        assert session.selected_node is None
        assert session.selected_connection.id == connection_id

        session.select_node("1 John 4:9")
        assert session.selected_connection is None
        assert session.selected_node.reference == "1 John 4:9"

    async def test_select_unknown(self, session):
        with pytest.raises(NotFoundError):
            session.select_node("Jude 1:3")
        with pytest.raises(NotFoundError):
            session.select_connection("xref_missing")

    async def test_clear_selection(self, session):
        session.select_node("Romans 5:8")

        session.clear_selection()

        assert session.selected_node is None
        assert session.selected_connection is None

    async def test_node_details(self, session):
        details = session.node_details("John 3:16")

        assert details.node.reference == "John 3:16"
        assert {c.other_reference for c in details.connections} == {"Romans 5:8", "1 John 4:9"}
        assert details.can_explore is False
        assert session.node_details("Romans 5:8").can_explore is True


@pytest.mark.unit
@pytest.mark.asyncio
class TestViewport:
    """Test zoom, pan and filtering."""

    @pytest.mark.parametrize(
        "value,expected",
        [(1.5, 1.5), (3.0, 2.0), (0.1, 0.5), (0.5, 0.5), (2.0, 2.0)],
    )
    async def test_magnification_clamped(self, session, value, expected):
        assert session.apply_magnification(value) == expected
        assert 0.5 <= session.scale <= 2.0

    async def test_magnification_ignores_non_finite(self, session):
        session.apply_magnification(1.2)

        session.apply_magnification(math.nan)
        session.apply_magnification(math.inf)

        assert session.scale == 1.2

    async def test_drag_unclamped_by_default(self, session):
        assert session.apply_drag(1000.0, -750.0) == Position(x=1000.0, y=-750.0)

    async def test_drag_with_pan_limit(self, builder):
        explorer = ExplorerSession(builder, "John 3:16", config=ExplorerConfig(pan_limit=100.0))
        await explorer.load()

        assert explorer.apply_drag(250.0, -40.0) == Position(x=100.0, y=-40.0)

    async def test_toggle_type_filters_connections(self, session):
        assert session.toggle_connection_type(ConnectionType.THEMATIC_LINK) is False
        assert session.filtered_connections == []
        assert len(session.graph.connections) == 2

        session.toggle_connection_type(ConnectionType.THEMATIC_LINK)
        assert len(session.filtered_connections) == 2

    async def test_hiding_type_clears_selected_connection(self, session):
        session.select_connection(session.graph.connections[0].id)

        session.toggle_connection_type(ConnectionType.THEMATIC_LINK)

        assert session.selected_connection is None

    async def test_shared_filter(self, builder):
        shared = ConnectionFilter()
        shared.toggle(ConnectionType.THEMATIC_LINK)
        explorer = ExplorerSession(builder, "John 3:16", connection_filter=shared)
        await explorer.load()

        assert explorer.filtered_connections == []

    async def test_render(self, session):
        session.toggle_connection_type(ConnectionType.THEMATIC_LINK)
        session.apply_magnification(1.5)

        frame = session.render(Viewport(width=400, height=400))

        assert len(frame.nodes) == 3
        assert frame.lines == []
        assert frame.scale == 1.5


@pytest.mark.unit
@pytest.mark.asyncio
class TestNavigationAndDismiss:
    """Test leaving the explorer."""

    async def test_read_verse(self, builder):
        opened = []
        explorer = ExplorerSession(builder, "John 3:16", on_navigate=opened.append)
        await explorer.load()

        explorer.read_verse("Romans 5:8")

        assert opened == ["Romans 5:8"]
        assert explorer.is_dismissed

    async def test_dismiss_discards_state(self, session):
        session.select_node("Romans 5:8")
        session.apply_magnification(2.0)

        session.dismiss()

        assert session.state == ExplorerState.DISMISSED
        assert session.graph.is_empty
        assert session.selected_node is None
        assert session.scale == 1.0
