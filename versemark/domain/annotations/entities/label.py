"""
Label entity for grouping bookmarks.
"""

from __future__ import annotations

from dataclasses import dataclass

from versemark.domain.annotations.bookmark_style import BookmarkStyle
from versemark.domain.common.entity import Entity
from versemark.domain.common.value_objects import LabelId
from versemark.exceptions import ConstraintError


@dataclass
class Label(Entity[LabelId]):
    """
    User-defined label attached to any number of bookmarks.

    Business Rules:
    - Names are not unique
    - Reserved styles (SPEAK) belong to a single system label that is only
      created through create_reserved; user labels cannot take them
    """

    id: LabelId
    name: str
    bookmark_style: BookmarkStyle = BookmarkStyle.YELLOW_STARS

    @property
    def is_reserved(self) -> bool:
        return self.bookmark_style.is_reserved

    def rename(self, new_name: str) -> None:
        """
        Rename this label.

        Raises:
            ConstraintError: If the new name is empty on a user label
        """
        new_name = new_name.strip()
        if not new_name and not self.is_reserved:
            raise ConstraintError("Label name cannot be empty")
        self.name = new_name

    def restyle(self, style: BookmarkStyle) -> None:
        """
        Change the style of a user label.

        Raises:
            ConstraintError: If the label or the new style is reserved
        """
        style = BookmarkStyle(style)
        if self.is_reserved or style.is_reserved:
            raise ConstraintError(
                "Reserved styles cannot be assigned or changed",
                {"from": self.bookmark_style.value, "to": style.value},
            )
        self.bookmark_style = style

    @classmethod
    def create(cls, name: str, bookmark_style: BookmarkStyle = BookmarkStyle.YELLOW_STARS) -> Label:
        """
        Create a new user label.

        Raises:
            ConstraintError: If the name is empty or the style is reserved
        """
        bookmark_style = BookmarkStyle(bookmark_style)
        if bookmark_style.is_reserved:
            raise ConstraintError(
                f"Style {bookmark_style.value} is reserved",
                {"style": bookmark_style.value},
            )
        if not name or not name.strip():
            raise ConstraintError("Label name cannot be empty")
        return cls(id=LabelId.generate(), name=name.strip(), bookmark_style=bookmark_style)

    @classmethod
    def create_reserved(cls, bookmark_style: BookmarkStyle) -> Label:
        """Create the unnamed system label for a reserved style."""
        bookmark_style = BookmarkStyle(bookmark_style)
        if not bookmark_style.is_reserved:
            raise ConstraintError(
                f"Style {bookmark_style.value} is not reserved",
                {"style": bookmark_style.value},
            )
        return cls(id=LabelId.generate(), name="", bookmark_style=bookmark_style)

    @classmethod
    def create_with_id(cls, id: LabelId, name: str, bookmark_style: BookmarkStyle) -> Label:
        """Reconstitute a label from persistence."""
        return cls(id=id, name=name, bookmark_style=BookmarkStyle(bookmark_style))
