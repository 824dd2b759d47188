"""Protocol for bookmark ↔ label association operations."""

from collections.abc import Iterable, Sequence
from typing import Protocol

from versemark.domain.annotations.entities.bookmark import Bookmark
from versemark.domain.annotations.entities.label import Label
from versemark.domain.annotations.sort_order import BookmarkSortOrder
from versemark.domain.common.value_objects import BookmarkId, LabelId


class BookmarkLabelRepositoryProtocol(Protocol):
    """Protocol defining the interface for association repository operations."""

    def insert(self, bookmark_id: BookmarkId, label_id: LabelId) -> int: ...

    def insert_batch(self, pairs: Sequence[tuple[BookmarkId, LabelId]]) -> list[int]: ...

    def delete(self, bookmark_id: BookmarkId, label_id: LabelId) -> int: ...

    def delete_batch(self, pairs: Sequence[tuple[BookmarkId, LabelId]]) -> int: ...

    def replace_labels(
        self, bookmark_id: BookmarkId, label_ids: Iterable[LabelId]
    ) -> list[Label]: ...

    def labels_for(self, bookmark_id: BookmarkId) -> list[Label]: ...

    def bookmarks_for(
        self, label_id: LabelId, sort_order: BookmarkSortOrder = ...
    ) -> list[Bookmark]: ...
