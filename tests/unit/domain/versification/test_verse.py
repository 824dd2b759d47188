"""Tests for BibleBook, VerseRef and VerseRange."""

import pytest

from versemark.domain.versification import KJV, MT, BibleBook, VerseRange, VerseRef
from versemark.exceptions import ConstraintError


class TestBibleBook:
    def test_canonical_order(self) -> None:
        assert BibleBook.GEN < BibleBook.MAL < BibleBook.MATT < BibleBook.REV
        assert len(BibleBook) == 66

    def test_from_osis_is_case_insensitive(self) -> None:
        assert BibleBook.from_osis("1sam") is BibleBook.SAM1
        assert BibleBook.from_osis("John") is BibleBook.JOHN
        assert BibleBook.from_osis("1John") is BibleBook.JOHN1

    def test_from_osis_unknown(self) -> None:
        with pytest.raises(ConstraintError):
            BibleBook.from_osis("Tobit")

    def test_testament(self) -> None:
        assert BibleBook.MAL.is_old_testament
        assert not BibleBook.MATT.is_old_testament


class TestVerseRef:
    def test_parse_and_format(self) -> None:
        verse = VerseRef.parse("2Kgs.2.11")

        assert verse == VerseRef(book=BibleBook.KGS2, chapter=2, verse=11)
        assert str(verse) == "2Kgs.2.11"

    @pytest.mark.parametrize("text", ["Gen 1:1", "Gen.1", "Gen.x.1", ""])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ConstraintError):
            VerseRef.parse(text)

    @pytest.mark.parametrize(("chapter", "verse"), [(0, 1), (1, 0)])
    def test_numbers_start_at_one(self, chapter: int, verse: int) -> None:
        with pytest.raises(ConstraintError):
            VerseRef(book=BibleBook.GEN, chapter=chapter, verse=verse)

    def test_document_order(self) -> None:
        assert VerseRef.parse("Gen.50.26") < VerseRef.parse("Exod.1.1")
        assert VerseRef.parse("Ps.9.1") < VerseRef.parse("Ps.10.1")

    def test_is_frozen(self) -> None:
        verse = VerseRef.parse("Gen.1.1")
        with pytest.raises(AttributeError):
            verse.verse = 2  # type: ignore[misc]


class TestVerseRange:
    def test_parse_range(self) -> None:
        verse_range = VerseRange.parse("Gen.1.1-Gen.1.5")

        assert verse_range.start == VerseRef.parse("Gen.1.1")
        assert verse_range.end == VerseRef.parse("Gen.1.5")
        assert str(verse_range) == "Gen.1.1-Gen.1.5"

    def test_single_verse(self) -> None:
        verse_range = VerseRange.parse("Jude.1.3")

        assert verse_range == VerseRange.single(VerseRef.parse("Jude.1.3"))
        assert str(verse_range) == "Jude.1.3"

    def test_may_span_books(self) -> None:
        verse_range = VerseRange.parse("Mal.4.6-Matt.1.1")
        assert verse_range.start.book is BibleBook.MAL

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ConstraintError):
            VerseRange.parse("Gen.1.5-Gen.1.1")


class TestVersificationTables:
    def test_kjv_counts(self) -> None:
        assert KJV.chapter_count(BibleBook.PS) == 150
        assert KJV.verse_count(BibleBook.PS, 119) == 176
        assert KJV.verse_count(BibleBook.PS, 117) == 2
        assert KJV.last_verse(BibleBook.REV) == VerseRef.parse("Rev.22.21")

    def test_mt_differs_only_in_shifted_books(self) -> None:
        assert MT.chapter_count(BibleBook.MAL) == 3
        assert MT.chapter_count(BibleBook.JOEL) == 4
        differing = [book for book in BibleBook if MT.chapters[book] != KJV.chapters[book]]
        assert differing == [BibleBook.JOEL, BibleBook.MAL]

    def test_contains(self) -> None:
        assert KJV.contains(VerseRef.parse("Mal.4.6"))
        assert not MT.contains(VerseRef.parse("Mal.4.1"))
        assert MT.contains(VerseRef.parse("Mal.3.24"))
