"""
Pending verse navigation.
"""

from versegraph.models.conversation import Citation
from versegraph.models.reference import VerseReference
from versegraph.utils.logger import get_logger

logger = get_logger(__name__)


class Navigator:
    """
    Holds the verse the reader should open next.

    Producers (deep links, citations, the explorer) call
    ``navigate_to_verse``; the reader calls ``consume`` once it has moved.
    """

    def __init__(self):
        self.pending_verse: VerseReference | None = None
        self.should_navigate_to_reader = False

    def navigate_to_verse(self, reference: VerseReference) -> None:
        logger.debug(f"Navigation requested to {reference.short_reference} ({reference.translation})")
        self.pending_verse = reference
        self.should_navigate_to_reader = True

    def navigate_to_citation(self, citation: Citation) -> bool:
        """
        Navigate to the verse a citation points at.

        Citations without a chapter cannot be navigated to. A missing verse
        falls back to verse 1.
        """
        if citation.chapter is None:
            return False
        self.navigate_to_verse(
            VerseReference(
                translation=citation.translation_id,
                book=citation.book_name or citation.reference,
                book_id=citation.book_id or "",
                chapter=citation.chapter,
                verse=citation.verse_start or 1,
            )
        )
        return True

    def consume(self) -> VerseReference | None:
        """Return the pending verse and clear it."""
        reference = self.pending_verse
        self.clear()
        return reference

    def clear(self) -> None:
        self.pending_verse = None
        self.should_navigate_to_reader = False
