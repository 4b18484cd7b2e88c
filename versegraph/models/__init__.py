"""
Data models for VerseGraph.

Core models:
- Testament, ParsedReference, VerseReference: Verse addressing
- ConnectionType, ConnectionStrength: Cross-reference classification
- VerseNode, VerseConnection, CrossReferenceGraph: Graph snapshot
- ChatMessage, ChatConversation, Citation: Conversation archive records
"""

from versegraph.models.conversation import (
    AIMode,
    ChatConversation,
    ChatMessage,
    Citation,
    MessageRole,
)
from versegraph.models.graph import (
    ConnectionStrength,
    ConnectionType,
    CrossReferenceGraph,
    Position,
    VerseConnection,
    VerseNode,
)
from versegraph.models.reference import ParsedReference, Testament, VerseReference

__all__ = [
    # Reference models
    "Testament",
    "ParsedReference",
    "VerseReference",
    # Graph models
    "ConnectionType",
    "ConnectionStrength",
    "Position",
    "VerseNode",
    "VerseConnection",
    "CrossReferenceGraph",
    # Conversation models
    "MessageRole",
    "AIMode",
    "Citation",
    "ChatMessage",
    "ChatConversation",
]
