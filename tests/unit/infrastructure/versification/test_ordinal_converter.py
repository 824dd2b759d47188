"""Tests for OrdinalConverter."""

import pytest

from versemark.domain.common.value_objects import OrdinalRange
from versemark.domain.versification import (
    KJV,
    BibleBook,
    ChapterShift,
    VerseRange,
    VerseRef,
    Versification,
)
from versemark.exceptions import ConstraintError, UnsupportedSchemeError
from versemark.infrastructure.versification import OrdinalConverter


def ref(osis_ref: str) -> VerseRef:
    return VerseRef.parse(osis_ref)


@pytest.fixture
def converter() -> OrdinalConverter:
    return OrdinalConverter()


class TestCanonicalOrdinals:
    @pytest.mark.parametrize(
        ("osis_ref", "ordinal"),
        [
            ("Gen.1.1", 1),
            ("Gen.1.31", 31),
            ("Gen.2.1", 32),
            ("Gen.50.26", 1533),
            ("Exod.1.1", 1534),
            ("Mal.4.6", 23145),
            ("Matt.1.1", 23146),
            ("John.3.16", 26137),
            ("Rev.1.1", 30699),
            ("Rev.22.21", 31102),
        ],
    )
    def test_known_ordinals(self, converter: OrdinalConverter, osis_ref: str, ordinal: int) -> None:
        assert converter.to_canonical_ordinal(ref(osis_ref), "KJV") == ordinal
        assert converter.from_canonical_ordinal(ordinal, "KJV") == ref(osis_ref)

    def test_total_verses(self, converter: OrdinalConverter) -> None:
        assert converter.total_verses == 31102

    def test_every_ordinal_round_trips(self, converter: OrdinalConverter) -> None:
        for ordinal in range(1, converter.total_verses + 1, 97):
            verse = converter.from_canonical_ordinal(ordinal, "KJV")
            assert converter.to_canonical_ordinal(verse, "KJV") == ordinal

    def test_ordinals_follow_document_order(self, converter: OrdinalConverter) -> None:
        verses = [ref("Ps.119.176"), ref("Ps.117.2"), ref("Ps.117.1"), ref("Gen.1.1")]
        ordinals = [converter.to_canonical_ordinal(v, "KJV") for v in verses]
        assert ordinals == sorted(ordinals, reverse=True)
        assert sorted(verses) == list(reversed(verses))

    @pytest.mark.parametrize("osis_ref", ["Gen.51.1", "Gen.1.32", "Ps.119.177", "Jude.2.1"])
    def test_verse_outside_scheme_rejected(
        self, converter: OrdinalConverter, osis_ref: str
    ) -> None:
        with pytest.raises(ConstraintError):
            converter.to_canonical_ordinal(ref(osis_ref), "KJV")

    @pytest.mark.parametrize("ordinal", [0, -1, 31103])
    def test_ordinal_outside_canon_rejected(
        self, converter: OrdinalConverter, ordinal: int
    ) -> None:
        with pytest.raises(ConstraintError):
            converter.from_canonical_ordinal(ordinal, "KJV")

    def test_range(self, converter: OrdinalConverter) -> None:
        verse_range = VerseRange.parse("Gen.1.1-Gen.2.1")

        ordinal_range = converter.to_canonical_range(verse_range, "KJV")

        assert ordinal_range == OrdinalRange(start=1, end=32)
        assert converter.from_canonical_range(ordinal_range, "KJV") == verse_range

    def test_book_range(self, converter: OrdinalConverter) -> None:
        assert converter.book_range(BibleBook.GEN) == OrdinalRange(start=1, end=1533)
        assert converter.book_range(BibleBook.OBAD) == OrdinalRange(start=22512, end=22532)
        assert converter.book_range(BibleBook.REV) == OrdinalRange(start=30699, end=31102)


class TestMasoreticScheme:
    @pytest.mark.parametrize(
        ("mt_ref", "kjv_ref"),
        [
            ("Joel.2.27", "Joel.2.27"),
            ("Joel.3.1", "Joel.2.28"),
            ("Joel.3.5", "Joel.2.32"),
            ("Joel.4.1", "Joel.3.1"),
            ("Joel.4.21", "Joel.3.21"),
            ("Mal.3.18", "Mal.3.18"),
            ("Mal.3.19", "Mal.4.1"),
            ("Mal.3.24", "Mal.4.6"),
            ("Gen.1.1", "Gen.1.1"),
        ],
    )
    def test_mt_verse_maps_to_kjv_verse(
        self, converter: OrdinalConverter, mt_ref: str, kjv_ref: str
    ) -> None:
        ordinal = converter.to_canonical_ordinal(ref(mt_ref), "MT")

        assert ordinal == converter.to_canonical_ordinal(ref(kjv_ref), "KJV")
        assert converter.from_canonical_ordinal(ordinal, "MT") == ref(mt_ref)

    @pytest.mark.parametrize("mt_ref", ["Joel.2.28", "Mal.4.1", "Mal.3.25"])
    def test_kjv_only_verses_absent_from_mt(
        self, converter: OrdinalConverter, mt_ref: str
    ) -> None:
        with pytest.raises(ConstraintError):
            converter.to_canonical_ordinal(ref(mt_ref), "MT")

    def test_range_across_shifted_chapter(self, converter: OrdinalConverter) -> None:
        ordinal_range = converter.to_canonical_range(VerseRange.parse("Mal.3.17-Mal.3.20"), "MT")
        assert ordinal_range == OrdinalRange(start=23138, end=23141)


class TestSchemes:
    def test_unknown_scheme(self, converter: OrdinalConverter) -> None:
        with pytest.raises(UnsupportedSchemeError) as exc_info:
            converter.to_canonical_ordinal(ref("Gen.1.1"), "Vulgate")

        assert exc_info.value.scheme == "Vulgate"
        assert exc_info.value.supported == ["KJV", "MT"]

    def test_unknown_scheme_on_inverse(self, converter: OrdinalConverter) -> None:
        with pytest.raises(UnsupportedSchemeError):
            converter.from_canonical_ordinal(1, "Vulgate")

    def test_canonical_only(self) -> None:
        converter = OrdinalConverter(versifications=())
        assert converter.supported_schemes() == ["KJV"]

    def test_register_custom_scheme(self, converter: OrdinalConverter) -> None:
        # Obadiah as a single verse-shifted chapter: verse n here is KJV verse n + 1
        custom = Versification(
            name="OBAD_SHIFTED",
            chapters={**KJV.chapters, BibleBook.OBAD: (20,)},
            shifts_to_canonical=(
                ChapterShift(BibleBook.OBAD, 1, 1, 20, target_chapter=1, target_first_verse=2),
            ),
        )

        converter.register(custom)

        assert "OBAD_SHIFTED" in converter.supported_schemes()
        assert converter.to_canonical_ordinal(ref("Obad.1.1"), "OBAD_SHIFTED") == 22513
        assert converter.from_canonical_ordinal(22532, "OBAD_SHIFTED") == ref("Obad.1.20")

    def test_cannot_replace_canonical(self, converter: OrdinalConverter) -> None:
        impostor = Versification(name="KJV", chapters=KJV.chapters)

        with pytest.raises(ConstraintError):
            converter.register(impostor)
