"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states.

Identifiers are assigned by the store on insert. An unsaved entity carries
the placeholder id ``0``; the store returns the real id and callers rebuild
the entity with it instead of mutating the original object.

Example:
    @dataclass
    class Label(Entity[LabelId]):
        id: LabelId
        name: str

    label = Label(id=LabelId.generate(), name="Promises")
    saved = label.with_id(repository.insert(label))
"""

from abc import ABC
from dataclasses import dataclass, replace
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    They provide type safety to prevent mixing up IDs of different entities.

    Example:
        bookmark_id = BookmarkId(42)
        label_id = LabelId(42)
        # These are different types, preventing accidental mixing
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for entities not yet persisted."""
        return cls(0)

    def is_assigned(self) -> bool:
        """Whether the store has assigned this id."""
        return self.value != 0

    def to_primitive(self) -> int:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must be dataclasses with an 'id' attribute of type IdType.
    """

    id: IdType

    def with_id(self, id: IdType) -> Self:
        """Return a copy of this entity carrying the given identifier."""
        return replace(self, id=id)  # type: ignore[type-var]

    def is_persisted(self) -> bool:
        """Whether this entity has a store-assigned identifier."""
        return self.id.is_assigned()
