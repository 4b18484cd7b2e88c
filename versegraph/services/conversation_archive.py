"""
Conversation archive: in-memory chat history with JSON export/import.

Conversations are kept most-recent-first. Imports skip conversations whose
id already exists.
"""

from datetime import datetime
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from versegraph.models.conversation import AIMode, ChatConversation, ChatMessage, MessageRole
from versegraph.utils.exceptions import ArchiveExportError, ArchiveImportError, NotFoundError
from versegraph.utils.logger import get_logger

logger = get_logger(__name__)

_CONVERSATION_LIST = TypeAdapter(list[ChatConversation])


class ConversationArchive:
    """Stores chat conversations and moves them in and out of JSON."""

    def __init__(self, conversations: list[ChatConversation] | None = None):
        self.conversations: list[ChatConversation] = list(conversations or [])
        self.current_conversation_id: str | None = (
            self.conversations[0].id if self.conversations else None
        )

    # ═══════════════════════════════════════════════════════════
    # CRUD
    # ═══════════════════════════════════════════════════════════

    def get(self, conversation_id: str) -> ChatConversation:
        for conversation in self.conversations:
            if conversation.id == conversation_id:
                return conversation
        raise NotFoundError(
            f"Conversation not found: {conversation_id}",
            context={"conversation_id": conversation_id},
        )

    @property
    def current(self) -> ChatConversation | None:
        if self.current_conversation_id is None:
            return None
        return next((c for c in self.conversations if c.id == self.current_conversation_id), None)

    def add_conversation(self, conversation: ChatConversation) -> None:
        self.conversations.insert(0, conversation)

    def update_conversation(self, conversation: ChatConversation) -> None:
        """Replace a conversation and move it to the top of the list."""
        existing = self.get(conversation.id)
        self.conversations.remove(existing)
        self.conversations.insert(0, conversation)

    def delete_conversation(self, conversation_id: str) -> None:
        self.conversations = [c for c in self.conversations if c.id != conversation_id]
        if self.current_conversation_id == conversation_id:
            self.current_conversation_id = self.conversations[0].id if self.conversations else None

    def delete_all(self) -> None:
        self.conversations.clear()
        self.current_conversation_id = None

    def start_new_conversation(
        self, mode: AIMode = AIMode.STUDY, translation_id: str = "engKJV"
    ) -> ChatConversation:
        conversation = ChatConversation(current_mode=mode, translation_id=translation_id)
        self.add_conversation(conversation)
        self.current_conversation_id = conversation.id
        return conversation

    def add_message(self, conversation_id: str, message: ChatMessage) -> ChatConversation:
        conversation = self.get(conversation_id)
        conversation.add_message(message)
        self.update_conversation(conversation)
        return conversation

    # ═══════════════════════════════════════════════════════════
    # ARCHIVING & SEARCH
    # ═══════════════════════════════════════════════════════════

    def archive(self, conversation_id: str) -> None:
        self.get(conversation_id).archive()
        if self.current_conversation_id == conversation_id:
            active = self.active_conversations
            self.current_conversation_id = active[0].id if active else None

    def unarchive(self, conversation_id: str) -> None:
        conversation = self.get(conversation_id)
        conversation.unarchive()
        self.update_conversation(conversation)

    @property
    def active_conversations(self) -> list[ChatConversation]:
        return [c for c in self.conversations if not c.is_archived]

    @property
    def archived_conversations(self) -> list[ChatConversation]:
        return [c for c in self.conversations if c.is_archived]

    def search(self, query: str, include_archived: bool = False) -> list[ChatConversation]:
        """Case-insensitive search over titles and message content."""
        base = self.conversations if include_archived else self.active_conversations
        if not query:
            return base
        needle = query.lower()
        return [
            c
            for c in base
            if needle in c.title.lower() or any(needle in m.content.lower() for m in c.messages)
        ]

    def statistics(self) -> dict[str, int]:
        messages = [m for c in self.conversations for m in c.messages]
        return {
            "total_conversations": len(self.conversations),
            "active_conversations": len(self.active_conversations),
            "archived_conversations": len(self.archived_conversations),
            "total_messages": len(messages),
            "user_messages": sum(1 for m in messages if m.role == MessageRole.USER),
            "assistant_messages": sum(1 for m in messages if m.role == MessageRole.ASSISTANT),
            "total_citations": sum(len(m.citations) for m in messages),
        }

    # ═══════════════════════════════════════════════════════════
    # EXPORT / IMPORT
    # ═══════════════════════════════════════════════════════════

    def export_all_json(self) -> str:
        """Serialize every conversation as a JSON array."""
        return _CONVERSATION_LIST.dump_json(self.conversations, indent=2).decode("utf-8")

    def import_json(self, data: str | bytes) -> int:
        """
        Merge conversations from a JSON export.

        Conversations whose id is already present are skipped. The list is
        re-sorted by modification time, newest first.

        Returns:
            Number of conversations imported

        Raises:
            ArchiveImportError: If the data is not a conversation export
        """
        try:
            imported = _CONVERSATION_LIST.validate_json(data)
        except PydanticValidationError as e:
            raise ArchiveImportError(
                f"Invalid conversation export: {e.error_count()} validation error(s)",
                context={"errors": e.errors(include_url=False)[:5]},
            ) from e

        existing_ids = {c.id for c in self.conversations}
        new_conversations = []
        for conversation in imported:
            if conversation.id not in existing_ids:
                existing_ids.add(conversation.id)
                new_conversations.append(conversation)

        self.conversations = sorted(
            self.conversations + new_conversations, key=lambda c: c.modified_at, reverse=True
        )
        if self.current_conversation_id is None and self.conversations:
            self.current_conversation_id = self.conversations[0].id

        skipped = len(imported) - len(new_conversations)
        logger.info(f"Imported {len(new_conversations)} conversations ({skipped} duplicates skipped)")
        return len(new_conversations)

    def export_conversation_text(self, conversation: ChatConversation) -> str:
        """Render one conversation as human-readable text for the clipboard."""
        lines = [
            f"# {conversation.title}",
            f"Mode: {conversation.current_mode.display_name}",
            f"Date: {conversation.formatted_date}",
            "",
        ]
        for message in conversation.messages:
            role = "You" if message.role == MessageRole.USER else "Assistant"
            lines.append(f"**{role}** ({message.formatted_time}):")
            lines.append(message.content)
            lines.append("")
            if message.citations:
                lines.append("Citations: " + ", ".join(c.reference for c in message.citations))
                lines.append("")
        return "\n".join(lines)

    def save_export(self, directory: str | Path) -> Path:
        """
        Write all conversations to a timestamped JSON file.

        Raises:
            ArchiveExportError: If the file cannot be written
        """
        stamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
        path = Path(directory) / f"Conversations_Backup_{stamp}.json"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.export_all_json(), encoding="utf-8")
        except OSError as e:
            raise ArchiveExportError(
                f"Could not write export: {e.strerror or e}", context={"path": str(path)}
            ) from e
        logger.info(f"Exported {len(self.conversations)} conversations to {path}")
        return path

    def load_import(self, path: str | Path) -> int:
        """
        Import conversations from a JSON export file.

        Raises:
            ArchiveImportError: If the file cannot be read or parsed
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise ArchiveImportError(
                f"Cannot access file: {e.strerror or e}", context={"path": str(path)}
            ) from e
        return self.import_json(data)
