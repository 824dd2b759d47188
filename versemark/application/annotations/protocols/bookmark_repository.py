"""Protocol for Bookmark repository operations."""

from collections.abc import Iterable
from typing import Protocol

from versemark.domain.annotations.entities.bookmark import Bookmark
from versemark.domain.annotations.sort_order import BookmarkSortOrder
from versemark.domain.common.value_objects import BookmarkId, LabelId


class BookmarkRepositoryProtocol(Protocol):
    """Protocol defining the interface for Bookmark repository operations."""

    def insert(self, bookmark: Bookmark) -> BookmarkId: ...

    def update(self, bookmark: Bookmark) -> None: ...

    def update_touching_date(self, bookmark: Bookmark) -> Bookmark: ...

    def delete(self, bookmark: Bookmark) -> None: ...

    def find_by_id(self, bookmark_id: BookmarkId) -> Bookmark | None: ...

    def get_by_id(self, bookmark_id: BookmarkId) -> Bookmark: ...

    def find_by_ids(self, bookmark_ids: Iterable[BookmarkId]) -> list[Bookmark]: ...

    def find_all(self, sort_order: BookmarkSortOrder = ...) -> list[Bookmark]: ...

    # Canonical ordinal queries

    def find_for_range(self, range_start: int, range_end: int) -> list[Bookmark]: ...

    def find_for_point(self, ordinal: int) -> list[Bookmark]: ...

    def find_for_exact_start(self, ordinal: int) -> list[Bookmark]: ...

    def has_any(self, ordinal: int) -> bool: ...

    # Label queries

    def find_unlabelled(self, sort_order: BookmarkSortOrder = ...) -> list[Bookmark]: ...

    def find_with_label(
        self, label_id: LabelId, sort_order: BookmarkSortOrder = ...
    ) -> list[Bookmark]: ...

    def find_with_label_at_exact_start(self, label_id: LabelId, ordinal: int) -> list[Bookmark]: ...

    def find_with_label_in_range(
        self, label_id: LabelId, range_start: int, range_end: int
    ) -> list[Bookmark]: ...
