"""
Services for VerseGraph.

High-level services:
- CrossReferenceGraphBuilder: Builds laid-out graphs around a verse
- ConnectionFilter: Connection-type visibility state
- ExplorerSession: Interaction state machine for the graph explorer
- Navigator, DeepLinkHandler: Verse navigation and deep link parsing
- ConversationArchive: Chat history with JSON export/import
"""

from versegraph.services.conversation_archive import ConversationArchive
from versegraph.services.deep_link import DeepLinkHandler
from versegraph.services.explorer import (
    ExplorerFrame,
    ExplorerSession,
    ExplorerState,
    NodeConnection,
    NodeDetails,
)
from versegraph.services.filters import ConnectionFilter
from versegraph.services.graph_builder import CrossReferenceGraphBuilder
from versegraph.services.navigation import Navigator

__all__ = [
    "CrossReferenceGraphBuilder",
    "ConnectionFilter",
    "ExplorerSession",
    "ExplorerState",
    "ExplorerFrame",
    "NodeConnection",
    "NodeDetails",
    "Navigator",
    "DeepLinkHandler",
    "ConversationArchive",
]
