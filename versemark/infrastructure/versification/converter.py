"""
Table-driven conversion between verse references and canonical ordinals.

The canonical ordinal of a verse is its 1-based position in the KJV text:
Gen 1:1 is 1 and Rev 22:21 is 31102. A verse in another scheme is first
renumbered onto KJV by the scheme's chapter shifts, then counted.
"""

from bisect import bisect_right
from collections.abc import Iterable

import structlog

from versemark.domain.common.value_objects import OrdinalRange
from versemark.domain.versification import (
    KJV,
    MT,
    BibleBook,
    VerseRange,
    VerseRef,
    Versification,
)
from versemark.exceptions import ConstraintError, UnsupportedSchemeError

logger = structlog.get_logger(__name__)


class OrdinalConverter:
    """
    Converts verses of registered schemes to canonical ordinals and back.

    The canonical scheme is always registered. Chapter start ordinals are
    computed once, so lookups are a dict access one way and a binary search
    the other.
    """

    def __init__(
        self,
        versifications: Iterable[Versification] = (MT,),
        canonical: Versification = KJV,
    ) -> None:
        self.canonical = canonical
        self._schemes: dict[str, Versification] = {canonical.name: canonical}

        self._chapter_keys: list[tuple[BibleBook, int]] = []
        self._chapter_starts: list[int] = []
        self._chapter_index: dict[tuple[BibleBook, int], int] = {}
        next_ordinal = 1
        for book in BibleBook:
            for chapter, verse_count in enumerate(canonical.chapters[book], start=1):
                self._chapter_index[(book, chapter)] = len(self._chapter_keys)
                self._chapter_keys.append((book, chapter))
                self._chapter_starts.append(next_ordinal)
                next_ordinal += verse_count
        self.total_verses = next_ordinal - 1

        for versification in versifications:
            self.register(versification)

    def register(self, versification: Versification) -> None:
        """Make a scheme available for conversion, replacing any of the same name."""
        if versification.name == self.canonical.name and versification is not self.canonical:
            raise ConstraintError(
                f"Cannot replace the canonical scheme {self.canonical.name}",
                {"scheme": versification.name},
            )
        self._schemes[versification.name] = versification
        logger.debug("registered_versification", scheme=versification.name)

    def supported_schemes(self) -> list[str]:
        return sorted(self._schemes)

    def to_canonical_ordinal(self, verse: VerseRef, scheme: str) -> int:
        """
        Canonical ordinal of a verse numbered in the given scheme.

        Raises:
            UnsupportedSchemeError: If the scheme is not registered
            ConstraintError: If the verse does not exist in the scheme
        """
        versification = self._get_scheme(scheme)
        if not versification.contains(verse):
            raise ConstraintError(
                f"{verse} does not exist in {versification.name}",
                {"verse": str(verse), "scheme": versification.name},
            )

        canonical_verse = versification.to_canonical(verse)
        if not self.canonical.contains(canonical_verse):
            raise ConstraintError(
                f"{verse} in {versification.name} has no {self.canonical.name} equivalent",
                {"verse": str(verse), "scheme": versification.name},
            )

        index = self._chapter_index[(canonical_verse.book, canonical_verse.chapter)]
        return self._chapter_starts[index] + canonical_verse.verse - 1

    def to_canonical_range(self, verse_range: VerseRange, scheme: str) -> OrdinalRange:
        """Canonical ordinals of both ends of a verse range."""
        return OrdinalRange(
            start=self.to_canonical_ordinal(verse_range.start, scheme),
            end=self.to_canonical_ordinal(verse_range.end, scheme),
        )

    def from_canonical_ordinal(self, ordinal: int, scheme: str) -> VerseRef:
        """
        Verse at a canonical ordinal, numbered in the given scheme.

        Raises:
            UnsupportedSchemeError: If the scheme is not registered
            ConstraintError: If the ordinal is outside 1..total_verses
        """
        versification = self._get_scheme(scheme)
        if not 1 <= ordinal <= self.total_verses:
            raise ConstraintError(
                f"Ordinal {ordinal} is outside 1..{self.total_verses}",
                {"ordinal": ordinal},
            )

        index = bisect_right(self._chapter_starts, ordinal) - 1
        book, chapter = self._chapter_keys[index]
        canonical_verse = VerseRef(
            book=book,
            chapter=chapter,
            verse=ordinal - self._chapter_starts[index] + 1,
        )
        return versification.from_canonical(canonical_verse)

    def from_canonical_range(self, ordinal_range: OrdinalRange, scheme: str) -> VerseRange:
        return VerseRange(
            start=self.from_canonical_ordinal(ordinal_range.start, scheme),
            end=self.from_canonical_ordinal(ordinal_range.end, scheme),
        )

    def book_range(self, book: BibleBook) -> OrdinalRange:
        """Canonical ordinals from the first to the last verse of a book."""
        scheme = self.canonical.name
        return OrdinalRange(
            start=self.to_canonical_ordinal(self.canonical.first_verse(book), scheme),
            end=self.to_canonical_ordinal(self.canonical.last_verse(book), scheme),
        )

    def _get_scheme(self, scheme: str) -> Versification:
        try:
            return self._schemes[scheme]
        except KeyError:
            raise UnsupportedSchemeError(scheme, self.supported_schemes()) from None
