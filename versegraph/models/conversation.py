"""
Chat conversation models used by the conversation archive.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from versegraph.utils.id_generator import generate_conversation_id, generate_message_id

DEFAULT_TITLE = "New Conversation"


def utc_now() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime | None) -> datetime | None:
    """Normalise a timestamp to aware UTC; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class MessageRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class AIMode(str, Enum):
    """Interaction modes of the assistant."""

    STUDY = "study"
    DEVOTIONAL = "devotional"
    PRAYER = "prayer"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Citation(BaseModel):
    """A Bible verse cited in an assistant response."""

    reference: str
    translation_id: str = "engKJV"
    book_id: str | None = None
    book_name: str | None = None
    chapter: int | None = None
    verse_start: int | None = None
    verse_end: int | None = None
    text: str | None = None


class ChatMessage(BaseModel):
    """Single message in a conversation."""

    id: str = Field(default_factory=generate_message_id)
    role: MessageRole
    content: str
    timestamp: datetime = Field(default_factory=utc_now)
    title: str | None = None
    citations: list[Citation] = Field(default_factory=list)
    follow_ups: list[str] = Field(default_factory=list)
    mode: AIMode | None = None
    # Transient streaming state, never persisted
    is_streaming: bool = Field(default=False, exclude=True)

    @field_validator("timestamp")
    @classmethod
    def normalise_timestamp(cls, value: datetime) -> datetime:
        return as_utc(value)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role=MessageRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str, citations: list[Citation] | None = None) -> "ChatMessage":
        return cls(role=MessageRole.ASSISTANT, content=content, citations=citations or [])

    @property
    def formatted_time(self) -> str:
        return self.timestamp.strftime("%H:%M")


class ChatConversation(BaseModel):
    """
    A complete chat conversation.

    The title is derived from the first user message while it still holds
    the default value.
    """

    id: str = Field(default_factory=generate_conversation_id)
    title: str = DEFAULT_TITLE
    messages: list[ChatMessage] = Field(default_factory=list)
    current_mode: AIMode = AIMode.STUDY
    created_at: datetime = Field(default_factory=utc_now)
    modified_at: datetime = Field(default_factory=utc_now)
    translation_id: str = "engKJV"
    is_archived: bool = False
    archived_at: datetime | None = None

    @field_validator("created_at", "modified_at", "archived_at")
    @classmethod
    def normalise_timestamps(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)

    @property
    def message_count(self) -> int:
        return len(self.messages)

    @property
    def last_user_message(self) -> ChatMessage | None:
        return next((m for m in reversed(self.messages) if m.role == MessageRole.USER), None)

    @property
    def last_assistant_message(self) -> ChatMessage | None:
        return next(
            (m for m in reversed(self.messages) if m.role == MessageRole.ASSISTANT), None
        )

    @property
    def preview_text(self) -> str:
        if not self.messages:
            return "No messages yet"
        text = self.messages[-1].content
        return text[:60] + "..." if len(text) > 60 else text

    @property
    def formatted_date(self) -> str:
        return self.modified_at.strftime("%Y-%m-%d %H:%M")

    def add_message(self, message: ChatMessage) -> None:
        self.messages.append(message)
        self.modified_at = utc_now()
        if self.title == DEFAULT_TITLE and message.role == MessageRole.USER and message.content:
            self.title = self._title_from(message.content)

    def update_message(self, message: ChatMessage) -> bool:
        """Replace the message with the same id. Returns False if absent."""
        for index, existing in enumerate(self.messages):
            if existing.id == message.id:
                self.messages[index] = message
                self.modified_at = utc_now()
                return True
        return False

    def remove_last_message(self) -> None:
        if self.messages:
            self.messages.pop()
            self.modified_at = utc_now()

    def archive(self) -> None:
        now = utc_now()
        self.is_archived = True
        self.archived_at = now
        self.modified_at = now

    def unarchive(self) -> None:
        self.is_archived = False
        self.archived_at = None
        self.modified_at = utc_now()

    def build_context_messages(self, limit: int = 10) -> list[dict[str, str]]:
        """Last ``limit`` messages as role/content dicts, system messages dropped."""
        recent = self.messages[-limit:] if limit > 0 else []
        return [
            {"role": m.role.value, "content": m.content}
            for m in recent
            if m.role != MessageRole.SYSTEM
        ]

    @staticmethod
    def _title_from(content: str) -> str:
        title = " ".join(content.split()[:6])
        if len(title) > 40:
            return title[:40] + "..."
        return title or DEFAULT_TITLE
