"""
ID generation utilities for VerseGraph.

Provides consistent ID generation for all entity types:
- Connections: xref_xxx
- Conversations: conv_xxx
- Messages: msg_xxx
"""

from uuid import uuid4


def generate_connection_id() -> str:
    """
    Generate unique cross-reference connection ID.

    Returns:
        ID in format "xref_xxx" where xxx is 12 hex characters
    """
    return f"xref_{uuid4().hex[:12]}"


def generate_conversation_id() -> str:
    """
    Generate unique conversation ID.

    Returns:
        ID in format "conv_xxx" where xxx is 12 hex characters
    """
    return f"conv_{uuid4().hex[:12]}"


def generate_message_id() -> str:
    """
    Generate unique chat message ID.

    Returns:
        ID in format "msg_xxx" where xxx is 12 hex characters
    """
    return f"msg_{uuid4().hex[:12]}"
