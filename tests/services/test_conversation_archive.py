"""
Tests for the conversation archive.

Tests cover:
1. CRUD and ordering
2. Archiving and search
3. JSON export/import with de-duplication
4. Text export and file I/O errors
"""

import json
import re
from datetime import UTC, datetime, timedelta

import pytest

from versegraph.models import AIMode, ChatConversation, ChatMessage, Citation
from versegraph.services import ConversationArchive
from versegraph.utils.exceptions import ArchiveExportError, ArchiveImportError, NotFoundError


@pytest.fixture
def archive() -> ConversationArchive:
    return ConversationArchive()


def _conversation(title: str, minutes_ago: int = 0) -> ChatConversation:
    stamp = datetime(2024, 5, 1, 12, 0) - timedelta(minutes=minutes_ago)
    conversation = ChatConversation(title=title, created_at=stamp, modified_at=stamp)
    return conversation


@pytest.mark.unit
class TestArchiveCrud:
    """Test conversation management."""

    def test_start_new_conversation(self, archive):
        conversation = archive.start_new_conversation(mode=AIMode.PRAYER)

        assert archive.current is conversation
        assert conversation.current_mode == AIMode.PRAYER

    def test_most_recent_first(self, archive):
        first = archive.start_new_conversation()
        second = archive.start_new_conversation()

        assert archive.conversations == [second, first]

    def test_add_message_moves_to_top(self, archive):
        first = archive.start_new_conversation()
        archive.start_new_conversation()

        archive.add_message(first.id, ChatMessage.user("Tell me about grace"))

        assert archive.conversations[0].id == first.id
        assert archive.conversations[0].title == "Tell me about grace"

    def test_get_missing(self, archive):
        with pytest.raises(NotFoundError):
            archive.get("conv_missing")

    def test_delete_current_repoints(self, archive):
        first = archive.start_new_conversation()
        second = archive.start_new_conversation()

        archive.delete_conversation(second.id)

        assert archive.current_conversation_id == first.id
        archive.delete_conversation(first.id)
        assert archive.current is None

    def test_delete_all(self, archive):
        archive.start_new_conversation()
        archive.start_new_conversation()

        archive.delete_all()

        assert archive.conversations == []
        assert archive.current is None


@pytest.mark.unit
class TestArchiveAndSearch:
    """Test archiving and search."""

    def test_archive_splits_lists(self, archive):
        kept = archive.start_new_conversation()
        hidden = archive.start_new_conversation()

        archive.archive(hidden.id)

        assert archive.active_conversations == [kept]
        assert archive.archived_conversations == [hidden]
        assert archive.current_conversation_id == kept.id

    def test_unarchive(self, archive):
        conversation = archive.start_new_conversation()
        archive.archive(conversation.id)

        archive.unarchive(conversation.id)

        assert archive.archived_conversations == []

    def test_search_titles_and_content(self, archive):
        grace = archive.start_new_conversation()
        archive.add_message(grace.id, ChatMessage.user("What is GRACE?"))
        other = archive.start_new_conversation()
        archive.add_message(other.id, ChatMessage.user("Psalms of David"))
        archive.add_message(other.id, ChatMessage.assistant("Many mention grace too"))

        results = archive.search("grace")

        assert {c.id for c in results} == {grace.id, other.id}
        assert [c.id for c in archive.search("david")] == [other.id]

    def test_search_excludes_archived_by_default(self, archive):
        conversation = archive.start_new_conversation()
        archive.add_message(conversation.id, ChatMessage.user("hidden topic"))
        archive.archive(conversation.id)

        assert archive.search("hidden") == []
        assert archive.search("hidden", include_archived=True) == [conversation]

    def test_statistics(self, archive):
        conversation = archive.start_new_conversation()
        archive.add_message(conversation.id, ChatMessage.user("Q"))
        archive.add_message(
            conversation.id,
            ChatMessage.assistant("A", citations=[Citation(reference="John 3:16")]),
        )
        archived = archive.start_new_conversation()
        archive.archive(archived.id)

        assert archive.statistics() == {
            "total_conversations": 2,
            "active_conversations": 1,
            "archived_conversations": 1,
            "total_messages": 2,
            "user_messages": 1,
            "assistant_messages": 1,
            "total_citations": 1,
        }


@pytest.mark.unit
class TestJsonExportImport:
    """Test JSON round trips."""

    def test_export_is_json_array(self, archive):
        archive.add_conversation(_conversation("Grace"))

        data = json.loads(archive.export_all_json())

        assert isinstance(data, list)
        assert data[0]["title"] == "Grace"

    def test_import_into_empty_archive(self, archive):
        source = ConversationArchive()
        source.add_conversation(_conversation("Old", minutes_ago=30))
        source.add_conversation(_conversation("New", minutes_ago=5))

        imported = archive.import_json(source.export_all_json())

        assert imported == 2
        assert [c.title for c in archive.conversations] == ["New", "Old"]

    def test_import_skips_existing_ids(self, archive):
        existing = _conversation("Existing", minutes_ago=10)
        archive.add_conversation(existing)
        source = ConversationArchive([existing, _conversation("Fresh", minutes_ago=1)])

        imported = archive.import_json(source.export_all_json())

        assert imported == 1
        assert [c.title for c in archive.conversations] == ["Fresh", "Existing"]

    def test_reimport_is_noop(self, archive):
        archive.add_conversation(_conversation("Once"))
        payload = archive.export_all_json()

        assert archive.import_json(payload) == 0
        assert len(archive.conversations) == 1

    def test_round_trip_preserves_messages(self, archive):
        conversation = archive.start_new_conversation()
        archive.add_message(conversation.id, ChatMessage.user("Who wrote Romans?"))
        archive.add_message(
            conversation.id,
            ChatMessage.assistant("Paul", citations=[Citation(reference="Romans 1:1", chapter=1)]),
        )

        restored = ConversationArchive()
        restored.import_json(archive.export_all_json())

        copy = restored.get(conversation.id)
        assert [m.content for m in copy.messages] == ["Who wrote Romans?", "Paul"]
        assert copy.messages[1].citations[0].reference == "Romans 1:1"
        assert copy.title == "Who wrote Romans?"

    def test_import_offset_timestamps_into_local_archive(self, archive):
        local = archive.start_new_conversation()
        payload = json.dumps(
            [
                {
                    "id": "conv_imported",
                    "title": "From another device",
                    "created_at": "2024-01-01T00:00:00Z",
                    "modified_at": "2024-01-01T02:00:00+02:00",
                }
            ]
        )

        imported = archive.import_json(payload)

        assert imported == 1
        assert [c.id for c in archive.conversations] == [local.id, "conv_imported"]
        copy = archive.get("conv_imported")
        assert copy.modified_at == datetime(2024, 1, 1, tzinfo=UTC)
        assert copy.modified_at.utcoffset() == timedelta(0)

    def test_naive_timestamps_read_as_utc(self):
        conversation = ChatConversation(modified_at=datetime(2024, 5, 1, 12, 0))

        assert conversation.modified_at.tzinfo is UTC
        assert conversation.formatted_date == "2024-05-01 12:00"

    @pytest.mark.parametrize("payload", ["not json", '{"id": "conv_1"}', '[{"title": 5}]'])
    def test_malformed_import(self, archive, payload):
        with pytest.raises(ArchiveImportError) as exc_info:
            archive.import_json(payload)

        assert "Invalid conversation export" in exc_info.value.message
        assert archive.conversations == []


@pytest.mark.unit
class TestTextExport:
    """Test human-readable export."""

    def test_text_format(self, archive):
        conversation = archive.start_new_conversation()
        archive.add_message(conversation.id, ChatMessage.user("Explain John 3:16"))
        archive.add_message(
            conversation.id,
            ChatMessage.assistant(
                "God's love for the world.",
                citations=[Citation(reference="John 3:16"), Citation(reference="Romans 5:8")],
            ),
        )

        text = archive.export_conversation_text(archive.get(conversation.id))
        lines = text.splitlines()

        assert lines[0] == "# Explain John 3:16"
        assert lines[1] == "Mode: Study"
        assert lines[2].startswith("Date: ")
        assert re.search(r"^\*\*You\*\* \(\d{2}:\d{2}\):$", text, re.MULTILINE)
        assert re.search(r"^\*\*Assistant\*\* \(\d{2}:\d{2}\):$", text, re.MULTILINE)
        assert "Citations: John 3:16, Romans 5:8" in lines


@pytest.mark.unit
class TestFileExport:
    """Test export and import through files."""

    def test_save_and_load(self, archive, tmp_path):
        archive.add_conversation(_conversation("Saved"))

        path = archive.save_export(tmp_path / "exports")

        assert re.fullmatch(r"Conversations_Backup_\d{4}-\d{2}-\d{2}_\d{6}\.json", path.name)
        restored = ConversationArchive()
        assert restored.load_import(path) == 1
        assert restored.conversations[0].title == "Saved"

    def test_load_missing_file(self, archive, tmp_path):
        with pytest.raises(ArchiveImportError, match="Cannot access file"):
            archive.load_import(tmp_path / "missing.json")

    def test_save_to_unwritable_location(self, archive, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(ArchiveExportError):
            archive.save_export(blocker / "exports")
