"""Protocol for Label repository operations."""

from typing import Protocol

from versemark.domain.annotations.bookmark_style import BookmarkStyle
from versemark.domain.annotations.entities.label import Label
from versemark.domain.common.value_objects import LabelId


class LabelRepositoryProtocol(Protocol):
    """Protocol defining the interface for Label repository operations."""

    def insert(self, label: Label) -> LabelId: ...

    def update(self, label: Label) -> None: ...

    def delete(self, label: Label) -> None: ...

    def find_by_id(self, label_id: LabelId) -> Label | None: ...

    def find_all_sorted_by_name(self) -> list[Label]: ...

    def find_by_style(self, bookmark_style: BookmarkStyle) -> Label | None: ...

    def get_or_create_reserved(self, bookmark_style: BookmarkStyle) -> Label: ...
