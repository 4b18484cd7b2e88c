"""
Tests for the Bible reference parser.

Tests cover:
1. Parsing single references in common formats
2. Book name normalization
3. Validation against chapter and verse limits
4. Free-text extraction
"""

import pytest

from versegraph.models import Testament


@pytest.mark.unit
class TestParse:
    """Test parsing of single references."""

    def test_standard_reference(self, parser):
        parsed = parser.parse("John 3:16")

        assert parsed.osis_book_id == "JHN"
        assert parsed.book_display_name == "John"
        assert parsed.testament == Testament.NEW
        assert parsed.chapter == 3
        assert parsed.verse_start == 16
        assert parsed.verse_end is None
        assert parsed.canonical_reference == "John 3:16"

    def test_numbered_book_with_range(self, parser):
        parsed = parser.parse("1 Corinthians 13:4-7")

        assert parsed.osis_book_id == "1CO"
        assert parsed.is_range
        assert parsed.canonical_reference == "1 Corinthians 13:4-7"

    def test_en_dash_range(self, parser):
        parsed = parser.parse("Genesis 1:1–3")

        assert parsed.verse_start == 1
        assert parsed.verse_end == 3
        assert parsed.testament == Testament.OLD

    def test_chapter_only(self, parser):
        parsed = parser.parse("Romans 8")

        assert parsed.is_chapter_only
        assert parsed.canonical_reference == "Romans 8"

    def test_abbreviation(self, parser):
        parsed = parser.parse("Ps 23:1")

        assert parsed.osis_book_id == "PSA"
        assert parsed.canonical_reference == "Psalms 23:1"

    def test_leading_prefix_stripped(self, parser):
        parsed = parser.parse("see John 3:16")

        assert parsed.canonical_reference == "John 3:16"
        assert parsed.raw_input == "see John 3:16"

    @pytest.mark.parametrize("text", ["", "   ", "not a reference", "Xyzzy 1:1"])
    def test_unparseable(self, parser, text):
        assert parser.parse(text) is None

    def test_chapter_zero_rejected(self, parser):
        assert parser.parse("John 0:1") is None


@pytest.mark.unit
class TestNormalizeBookName:
    """Test book name resolution."""

    @pytest.mark.parametrize(
        "name,osis_id",
        [
            ("Genesis", "GEN"),
            ("gen.", "GEN"),
            ("1 John", "1JN"),
            ("1John", "1JN"),
            ("Revel", "REV"),
        ],
    )
    def test_known_names(self, parser, name, osis_id):
        assert parser.normalize_book_name(name) == osis_id

    def test_unknown_name(self, parser):
        assert parser.normalize_book_name("Xyzzy") is None
        assert parser.normalize_book_name("") is None

    def test_testament_for(self, parser):
        assert parser.testament_for("MAL") == Testament.OLD
        assert parser.testament_for("MAT") == Testament.NEW


@pytest.mark.unit
class TestValidate:
    """Test validation against the book catalogue."""

    def test_valid_reference(self, parser):
        result = parser.validate_citation("John 3:16")

        assert result.is_valid
        assert result.reason is None

    def test_chapter_out_of_range(self, parser):
        result = parser.validate_citation("John 22:1")

        assert not result.is_valid
        assert result.reason == "Invalid chapter number. John has 21 chapters."

    def test_reversed_range(self, parser):
        result = parser.validate_citation("Romans 8:30-28")

        assert not result.is_valid
        assert result.reason == "End verse cannot be before start verse"

    def test_verse_out_of_range(self, parser):
        assert not parser.validate_citation("Psalm 119:500").is_valid

    def test_unparseable_citation(self, parser):
        result = parser.validate_citation("Xyzzy 1:1")

        assert not result.is_valid
        assert result.reason == "Could not parse reference"

    def test_filter_valid(self, parser):
        kept = parser.filter_valid(["John 3:16", "John 22:1", "Xyzzy 1:1", "Romans 8:28"])

        assert kept == ["John 3:16", "Romans 8:28"]


@pytest.mark.unit
class TestParseAll:
    """Test extraction of references from free text."""

    def test_extracts_references_in_order(self, parser):
        text = "For God so loved the world (John 3:16), and Romans 8:28 says"

        found = [p.canonical_reference for p in parser.parse_all(text)]

        assert found == ["John 3:16", "Romans 8:28"]

    def test_deduplicates(self, parser):
        found = parser.parse_all("John 3:16 is loved; John 3:16 again")

        assert [p.canonical_reference for p in found] == ["John 3:16"]

    def test_no_references(self, parser):
        assert parser.parse_all("") == []
