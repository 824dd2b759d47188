"""
Versification schemes.

A versification is the chapter/verse numbering a given Bible tradition uses.
Schemes agree on most of the text but split some chapters differently, e.g.
the Hebrew (MT) numbering places KJV Malachi 4:1-6 at Malachi 3:19-24.

A scheme is described by its verse counts per chapter plus a list of
``ChapterShift`` rules moving a run of its verses onto the canonical
numbering. Verses not covered by any rule keep their numbers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .bible_book import BibleBook
from .verse import VerseRef


@dataclass(frozen=True)
class ChapterShift:
    """Maps ``book chapter:first_verse-last_verse`` onto another chapter."""

    book: BibleBook
    chapter: int
    first_verse: int
    last_verse: int
    target_chapter: int
    target_first_verse: int

    def covers(self, verse: VerseRef) -> bool:
        return (
            verse.book == self.book
            and verse.chapter == self.chapter
            and self.first_verse <= verse.verse <= self.last_verse
        )

    def apply(self, verse: VerseRef) -> VerseRef:
        return VerseRef(
            book=self.book,
            chapter=self.target_chapter,
            verse=self.target_first_verse + (verse.verse - self.first_verse),
        )

    def inverted(self) -> ChapterShift:
        """The rule mapping the target verses back onto the source verses."""
        return ChapterShift(
            book=self.book,
            chapter=self.target_chapter,
            first_verse=self.target_first_verse,
            last_verse=self.target_first_verse + (self.last_verse - self.first_verse),
            target_chapter=self.chapter,
            target_first_verse=self.first_verse,
        )


@dataclass(frozen=True)
class Versification:
    """A named chapter/verse numbering scheme."""

    name: str
    chapters: Mapping[BibleBook, tuple[int, ...]]
    shifts_to_canonical: tuple[ChapterShift, ...] = ()
    _shifts_from_canonical: tuple[ChapterShift, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_shifts_from_canonical",
            tuple(shift.inverted() for shift in self.shifts_to_canonical),
        )

    def __hash__(self) -> int:
        return hash(self.name)

    def chapter_count(self, book: BibleBook) -> int:
        return len(self.chapters[book])

    def verse_count(self, book: BibleBook, chapter: int) -> int:
        return self.chapters[book][chapter - 1]

    def contains(self, verse: VerseRef) -> bool:
        """Check whether the verse exists in this scheme."""
        chapters = self.chapters.get(verse.book)
        if not chapters or verse.chapter > len(chapters):
            return False
        return verse.verse <= chapters[verse.chapter - 1]

    def first_verse(self, book: BibleBook) -> VerseRef:
        return VerseRef(book=book, chapter=1, verse=1)

    def last_verse(self, book: BibleBook) -> VerseRef:
        chapters = self.chapters[book]
        return VerseRef(book=book, chapter=len(chapters), verse=chapters[-1])

    def to_canonical(self, verse: VerseRef) -> VerseRef:
        """Renumber a verse of this scheme into the canonical scheme."""
        return _shift(verse, self.shifts_to_canonical)

    def from_canonical(self, verse: VerseRef) -> VerseRef:
        """Renumber a canonical verse into this scheme."""
        return _shift(verse, self._shifts_from_canonical)


def _shift(verse: VerseRef, shifts: tuple[ChapterShift, ...]) -> VerseRef:
    for shift in shifts:
        if shift.covers(verse):
            return shift.apply(verse)
    return verse
