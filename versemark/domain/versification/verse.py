"""Verse reference value objects.

A ``VerseRef`` names a verse by book, chapter and verse number. The numbers
only mean something together with a versification scheme, which is passed
alongside the reference wherever it is converted.

Supports natural ordering via @dataclass(order=True): book order first, then
chapter, then verse.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from versemark.domain.common.value_object import ValueObject
from versemark.exceptions import ConstraintError

from .bible_book import BibleBook

if TYPE_CHECKING:
    from typing import Self

_OSIS_REF = re.compile(r"^(?P<book>[1-3]?[A-Za-z]+)\.(?P<chapter>\d+)\.(?P<verse>\d+)$")


@dataclass(frozen=True, order=True)
class VerseRef(ValueObject):
    """A single verse, comparable in document order."""

    book: BibleBook
    chapter: int
    verse: int

    def __post_init__(self) -> None:
        if self.chapter < 1 or self.verse < 1:
            raise ConstraintError(
                "Chapter and verse numbers start at 1",
                {"chapter": self.chapter, "verse": self.verse},
            )

    def __str__(self) -> str:
        return self.osis_ref

    @property
    def osis_ref(self) -> str:
        """OSIS reference, e.g. ``Gen.1.1``."""
        return f"{self.book.osis_id}.{self.chapter}.{self.verse}"

    @classmethod
    def parse(cls, osis_ref: str) -> Self:
        """Parse an OSIS reference such as ``John.3.16``."""
        match = _OSIS_REF.match(osis_ref.strip())
        if not match:
            raise ConstraintError(f"Invalid verse reference '{osis_ref}'")
        return cls(
            book=BibleBook.from_osis(match["book"]),
            chapter=int(match["chapter"]),
            verse=int(match["verse"]),
        )


@dataclass(frozen=True)
class VerseRange(ValueObject):
    """Inclusive range of verses; may span chapters and books."""

    start: VerseRef
    end: VerseRef

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ConstraintError(
                "Verse range end must not come before its start",
                {"start": str(self.start), "end": str(self.end)},
            )

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"

    @classmethod
    def single(cls, verse: VerseRef) -> Self:
        """Range covering one verse."""
        return cls(start=verse, end=verse)

    @classmethod
    def parse(cls, osis_range: str) -> Self:
        """Parse ``Gen.1.1-Gen.1.5`` or a single OSIS reference."""
        start, _, end = osis_range.partition("-")
        first = VerseRef.parse(start)
        return cls(start=first, end=VerseRef.parse(end) if end else first)
