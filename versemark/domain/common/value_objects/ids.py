from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class BookmarkId(EntityId):
    """Strongly-typed bookmark identifier."""

    value: int


@dataclass(frozen=True)
class LabelId(EntityId):
    """Strongly-typed label identifier."""

    value: int
