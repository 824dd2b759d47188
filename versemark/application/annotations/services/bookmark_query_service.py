"""Application service answering bookmark questions phrased in verse references."""

import structlog

from versemark.application.annotations.protocols.bookmark_label_repository import (
    BookmarkLabelRepositoryProtocol,
)
from versemark.application.annotations.protocols.bookmark_repository import (
    BookmarkRepositoryProtocol,
)
from versemark.application.annotations.protocols.label_repository import LabelRepositoryProtocol
from versemark.application.annotations.protocols.ordinal_converter import (
    OrdinalConverterProtocol,
)
from versemark.domain.annotations.bookmark_style import BookmarkStyle
from versemark.domain.annotations.entities.bookmark import Bookmark
from versemark.domain.annotations.entities.label import Label
from versemark.domain.annotations.sort_order import BookmarkSortOrder
from versemark.domain.versification import CANONICAL_SCHEME, BibleBook, VerseRange, VerseRef

logger = structlog.get_logger(__name__)


class BookmarkQueryService:
    """
    Converts verse arguments to canonical ordinals and delegates to the repositories.

    Verse arguments are numbered in ``scheme``, which defaults to the scheme
    the service was built with. Holds no state besides its collaborators.
    """

    def __init__(
        self,
        bookmark_repository: BookmarkRepositoryProtocol,
        label_repository: LabelRepositoryProtocol,
        bookmark_label_repository: BookmarkLabelRepositoryProtocol,
        ordinal_converter: OrdinalConverterProtocol,
        default_scheme: str = CANONICAL_SCHEME,
    ) -> None:
        self.bookmark_repository = bookmark_repository
        self.label_repository = label_repository
        self.bookmark_label_repository = bookmark_label_repository
        self.ordinal_converter = ordinal_converter
        self.default_scheme = default_scheme

    # Range and position queries

    def bookmarks_for_verse_range(
        self, verse_range: VerseRange, scheme: str | None = None
    ) -> list[Bookmark]:
        """
        Get bookmarks overlapping a verse range, in document order.

        Raises:
            UnsupportedSchemeError: If the scheme is not registered
            ConstraintError: If a verse of the range does not exist in the scheme
        """
        ordinal_range = self.ordinal_converter.to_canonical_range(
            verse_range, scheme or self.default_scheme
        )
        return self.bookmark_repository.find_for_range(ordinal_range.start, ordinal_range.end)

    def bookmarks_in_book(self, book: BibleBook) -> list[Bookmark]:
        """Get bookmarks overlapping any verse of a book."""
        ordinal_range = self.ordinal_converter.book_range(book)
        return self.bookmark_repository.find_for_range(ordinal_range.start, ordinal_range.end)

    def bookmarks_for_verse(self, verse: VerseRef, scheme: str | None = None) -> list[Bookmark]:
        """Get bookmarks whose range includes the verse."""
        ordinal = self._ordinal(verse, scheme)
        return self.bookmark_repository.find_for_point(ordinal)

    def bookmarks_starting_at_verse(
        self, verse: VerseRef, scheme: str | None = None
    ) -> list[Bookmark]:
        ordinal = self._ordinal(verse, scheme)
        return self.bookmark_repository.find_for_exact_start(ordinal)

    def has_bookmarks_for_verse(self, verse: VerseRef, scheme: str | None = None) -> bool:
        ordinal = self._ordinal(verse, scheme)
        return self.bookmark_repository.has_any(ordinal)

    # Label-scoped queries

    def bookmarks_for_verse_start_with_label(
        self, verse: VerseRef, label: Label, scheme: str | None = None
    ) -> list[Bookmark]:
        """Get bookmarks with the label that start at the verse."""
        ordinal = self._ordinal(verse, scheme)
        return self.bookmark_repository.find_with_label_at_exact_start(label.id, ordinal)

    def bookmarks_in_range_with_label(
        self, verse_range: VerseRange, label: Label, scheme: str | None = None
    ) -> list[Bookmark]:
        """Get bookmarks with the label that overlap the verse range."""
        ordinal_range = self.ordinal_converter.to_canonical_range(
            verse_range, scheme or self.default_scheme
        )
        return self.bookmark_repository.find_with_label_in_range(
            label.id, ordinal_range.start, ordinal_range.end
        )

    # Listings

    def all_bookmarks(
        self, sort_order: BookmarkSortOrder = BookmarkSortOrder.BIBLE_ORDER
    ) -> list[Bookmark]:
        return self.bookmark_repository.find_all(BookmarkSortOrder.parse(sort_order))

    def unlabelled_bookmarks(
        self, sort_order: BookmarkSortOrder = BookmarkSortOrder.BIBLE_ORDER
    ) -> list[Bookmark]:
        return self.bookmark_repository.find_unlabelled(BookmarkSortOrder.parse(sort_order))

    def bookmarks_with_label(
        self, label: Label, sort_order: BookmarkSortOrder = BookmarkSortOrder.BIBLE_ORDER
    ) -> list[Bookmark]:
        return self.bookmark_label_repository.bookmarks_for(
            label.id, BookmarkSortOrder.parse(sort_order)
        )

    # Creation and rendering

    def create_bookmark(
        self, verse_range: VerseRange, scheme: str | None = None, notes: str | None = None
    ) -> Bookmark:
        """
        Create a bookmark over a verse range.

        The scheme is recorded on the bookmark so verse_range_of can show it
        back in the same numbering.

        Returns:
            The saved bookmark, carrying its assigned id
        """
        scheme = scheme or self.default_scheme
        ordinal_range = self.ordinal_converter.to_canonical_range(verse_range, scheme)
        bookmark = Bookmark.create(ordinal_range=ordinal_range, versification=scheme, notes=notes)
        saved = bookmark.with_id(self.bookmark_repository.insert(bookmark))

        logger.info(
            "bookmark_created_for_verses",
            bookmark_id=saved.id.value,
            verse_range=str(verse_range),
            scheme=scheme,
        )
        return saved

    def verse_range_of(self, bookmark: Bookmark) -> VerseRange:
        """Verse range of a bookmark, numbered in the scheme it was created in."""
        return self.ordinal_converter.from_canonical_range(
            bookmark.ordinal_range, bookmark.versification
        )

    def speak_label(self) -> Label:
        """The label marking bookmarks made during speech playback; created on first use."""
        return self.label_repository.get_or_create_reserved(BookmarkStyle.SPEAK)

    def _ordinal(self, verse: VerseRef, scheme: str | None) -> int:
        return self.ordinal_converter.to_canonical_ordinal(verse, scheme or self.default_scheme)
