"""
Verse reference models.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Testament(str, Enum):
    """Old/New Testament classification of a book."""

    OLD = "old"
    NEW = "new"

    @property
    def display_name(self) -> str:
        return "Old Testament" if self is Testament.OLD else "New Testament"


class ParsedReference(BaseModel):
    """
    A parsed and normalized Bible reference.

    Book names are resolved to OSIS ids (e.g. "JHN") and a canonical
    display name. A reference without ``verse_start`` addresses a whole
    chapter.
    """

    model_config = ConfigDict(frozen=True)

    raw_input: str
    osis_book_id: str
    book_display_name: str
    testament: Testament
    chapter: int = Field(..., ge=1)
    verse_start: int | None = None
    verse_end: int | None = None

    @property
    def is_chapter_only(self) -> bool:
        return self.verse_start is None

    @property
    def is_range(self) -> bool:
        return (
            self.verse_start is not None
            and self.verse_end is not None
            and self.verse_end > self.verse_start
        )

    @property
    def canonical_reference(self) -> str:
        """Canonical form, e.g. "John 3:16" or "1 Corinthians 13:4-7"."""
        ref = f"{self.book_display_name} {self.chapter}"
        if self.verse_start is not None:
            ref += f":{self.verse_start}"
            if self.is_range:
                ref += f"-{self.verse_end}"
        return ref


class VerseReference(BaseModel):
    """A single verse addressed by (translation, book, chapter, verse)."""

    model_config = ConfigDict(frozen=True)

    translation: str
    book: str
    chapter: int
    verse: int
    book_id: str = ""

    @property
    def short_reference(self) -> str:
        return f"{self.book} {self.chapter}:{self.verse}"
