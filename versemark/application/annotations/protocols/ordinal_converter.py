"""Protocol for converting verse references to canonical ordinals."""

from typing import Protocol

from versemark.domain.common.value_objects import OrdinalRange
from versemark.domain.versification import BibleBook, VerseRange, VerseRef


class OrdinalConverterProtocol(Protocol):
    """
    Maps verses in any supported scheme to canonical (KJV) ordinals and back.

    Implementations raise UnsupportedSchemeError for an unknown scheme and
    ConstraintError for a verse the scheme does not contain.
    """

    def to_canonical_ordinal(self, verse: VerseRef, scheme: str) -> int: ...

    def to_canonical_range(self, verse_range: VerseRange, scheme: str) -> OrdinalRange: ...

    def from_canonical_ordinal(self, ordinal: int, scheme: str) -> VerseRef: ...

    def from_canonical_range(self, ordinal_range: OrdinalRange, scheme: str) -> VerseRange: ...

    def book_range(self, book: BibleBook) -> OrdinalRange: ...

    def supported_schemes(self) -> list[str]: ...
