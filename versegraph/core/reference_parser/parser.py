"""
Bible reference parser.

Parses references such as "John 3:16", "1 Corinthians 13:4-7", "Rom 8",
"Genesis 1:1–3", "see John 3:16" and "John chapter 3" into
ParsedReference objects, and validates them against the book catalogue.
"""

import re
from dataclasses import dataclass

from versegraph.core.reference_parser.books import (
    BOOK_ALIASES,
    CHAPTER_COUNTS,
    DISPLAY_NAMES,
    MAX_VERSE,
    OLD_TESTAMENT_BOOKS,
)
from versegraph.models.reference import ParsedReference, Testament
from versegraph.utils.logger import get_logger

logger = get_logger(__name__)

_BOOK = r"(\d?\s?[IViv]{0,3}\s?[A-Za-z]+\.?(?:\s+[A-Za-z]+\.?)?)"

PREFIX_PATTERN = re.compile(r"^(?:see|cf\.?|compare|read|also)\s+", re.IGNORECASE)
STANDARD_PATTERN = re.compile(
    rf"^{_BOOK}\s+(\d+)(?:\s*[:.]\s*(\d+)(?:\s*[-,]\s*(\d+))?)?$", re.IGNORECASE
)
CHAPTER_PATTERN = re.compile(rf"^{_BOOK}\s+chapter\s+(\d+)$", re.IGNORECASE)

# Candidate patterns for free-text extraction, tried in order
TEXT_PATTERNS = [
    re.compile(rf"\b{_BOOK}\s+(\d+)(?:\s*[:.]\s*(\d+)(?:\s*[-,]\s*(\d+))?)?", re.IGNORECASE),
    re.compile(rf"{_BOOK}\s+chapter\s+(\d+)", re.IGNORECASE),
    re.compile(rf"\({_BOOK}\s+(\d+)(?:\s*[:.]\s*(\d+)(?:\s*-\s*(\d+))?)?\)", re.IGNORECASE),
]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a parsed reference."""

    is_valid: bool
    reason: str | None = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(False, reason)


class ReferenceParser:
    """Parser and validator for Bible references."""

    def parse(self, text: str) -> ParsedReference | None:
        """
        Parse a reference string.

        Args:
            text: Raw reference, e.g. "1 Cor 13:4-7"

        Returns:
            ParsedReference, or None if the text is not a known reference
        """
        trimmed = text.strip()
        if not trimmed:
            return None

        normalized = trimmed.replace("–", "-").replace("—", "-")
        normalized = re.sub(r"\s{2,}", " ", normalized)
        normalized = PREFIX_PATTERN.sub("", normalized)

        match = STANDARD_PATTERN.match(normalized)
        if match:
            book, chapter, verse_start, verse_end = match.groups()
            return self._build(text, book, chapter, verse_start, verse_end)

        match = CHAPTER_PATTERN.match(normalized)
        if match:
            book, chapter = match.groups()
            return self._build(text, book, chapter, None, None)

        return None

    def parse_all(self, text: str) -> list[ParsedReference]:
        """
        Extract every distinct reference mentioned in free text.

        Results are deduplicated by canonical reference and kept in
        discovery order.
        """
        results: dict[str, ParsedReference] = {}
        for pattern in TEXT_PATTERNS:
            for match in pattern.finditer(text):
                candidate = match.group(0).strip("()")
                parsed = self.parse(candidate)
                if parsed is None and " " in candidate:
                    # Leading word may be prose ("and Romans 8:28")
                    parsed = self.parse(candidate.split(" ", 1)[1])
                if parsed and parsed.canonical_reference not in results:
                    results[parsed.canonical_reference] = parsed
        return list(results.values())

    def normalize_book_name(self, name: str) -> str | None:
        """Resolve a book name or abbreviation to its OSIS id."""
        normalized = name.lower().strip().replace(".", "")
        if not normalized:
            return None

        if normalized in BOOK_ALIASES:
            return BOOK_ALIASES[normalized]

        no_spaces = normalized.replace(" ", "")
        if no_spaces in BOOK_ALIASES:
            return BOOK_ALIASES[no_spaces]

        # Prefix match, e.g. "revel" -> "revelation"
        for alias, osis_id in BOOK_ALIASES.items():
            if alias.startswith(normalized) or normalized.startswith(alias):
                return osis_id

        return None

    def display_name(self, osis_id: str) -> str | None:
        return DISPLAY_NAMES.get(osis_id.upper())

    def testament_for(self, osis_id: str) -> Testament:
        return Testament.OLD if osis_id.upper() in OLD_TESTAMENT_BOOKS else Testament.NEW

    def validate(self, reference: ParsedReference) -> ValidationResult:
        """Validate a reference against known chapter and verse limits."""
        if reference.osis_book_id not in DISPLAY_NAMES:
            return ValidationResult.invalid("Unknown book")

        max_chapters = CHAPTER_COUNTS.get(reference.osis_book_id, 150)
        if not 1 <= reference.chapter <= max_chapters:
            return ValidationResult.invalid(
                f"Invalid chapter number. {reference.book_display_name} has {max_chapters} chapters."
            )

        start, end = reference.verse_start, reference.verse_end
        if start is not None and not 1 <= start <= MAX_VERSE:
            return ValidationResult.invalid("Invalid verse number")

        if start is not None and end is not None:
            if end < start:
                return ValidationResult.invalid("End verse cannot be before start verse")
            if end > MAX_VERSE:
                return ValidationResult.invalid("Invalid verse range")

        return ValidationResult.valid()

    def validate_citation(self, text: str) -> ValidationResult:
        parsed = self.parse(text)
        if parsed is None:
            return ValidationResult.invalid("Could not parse reference")
        return self.validate(parsed)

    def filter_valid(self, references: list[str]) -> list[str]:
        """Drop citations that fail to parse or validate."""
        kept = []
        for ref in references:
            result = self.validate_citation(ref)
            if result.is_valid:
                kept.append(ref)
            else:
                logger.debug(f"Filtering out invalid citation '{ref}': {result.reason}")
        return kept

    def _build(
        self,
        raw_input: str,
        book: str,
        chapter: str,
        verse_start: str | None,
        verse_end: str | None,
    ) -> ParsedReference | None:
        osis_id = self.normalize_book_name(book)
        if osis_id is None:
            return None

        chapter_number = int(chapter)
        if chapter_number < 1:
            return None

        return ParsedReference(
            raw_input=raw_input,
            osis_book_id=osis_id,
            book_display_name=DISPLAY_NAMES[osis_id],
            testament=self.testament_for(osis_id),
            chapter=chapter_number,
            verse_start=int(verse_start) if verse_start else None,
            verse_end=int(verse_end) if verse_end else None,
        )
