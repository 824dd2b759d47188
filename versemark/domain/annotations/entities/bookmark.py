"""Bookmark entity anchored to a canonical verse range."""

from __future__ import annotations

import datetime as dt_module
from dataclasses import dataclass, field, replace
from datetime import UTC

from versemark.domain.common.entity import Entity
from versemark.domain.common.value_objects import BookmarkId, OrdinalRange
from versemark.domain.versification import CANONICAL_SCHEME
from versemark.exceptions import ConstraintError


@dataclass
class Bookmark(Entity[BookmarkId]):
    """
    Annotation over a range of verses.

    Business Rules:
    - The range is stored as canonical (KJV) ordinals so bookmarks created
      under different versifications stay comparable
    - kjv_ordinal_start <= kjv_ordinal_end
    - versification records the scheme the bookmark was created in, used to
      show it back in that numbering
    """

    id: BookmarkId
    kjv_ordinal_start: int
    kjv_ordinal_end: int
    versification: str = CANONICAL_SCHEME
    notes: str | None = None
    created_at: dt_module.datetime = field(
        default_factory=lambda: dt_module.datetime.now(UTC)
    )

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.check_range()

    def check_range(self) -> None:
        """
        Raises:
            ConstraintError: If the start ordinal comes after the end ordinal
        """
        if self.kjv_ordinal_start > self.kjv_ordinal_end:
            raise ConstraintError(
                "Bookmark start must not come after its end",
                {"start": self.kjv_ordinal_start, "end": self.kjv_ordinal_end},
            )

    @property
    def ordinal_range(self) -> OrdinalRange:
        return OrdinalRange(start=self.kjv_ordinal_start, end=self.kjv_ordinal_end)

    def overlaps(self, ordinal_range: OrdinalRange) -> bool:
        return self.ordinal_range.overlaps(ordinal_range)

    def touched(self) -> Bookmark:
        """Copy of this bookmark with created_at set to now."""
        return replace(self, created_at=dt_module.datetime.now(UTC))

    def update_notes(self, notes: str | None) -> None:
        self.notes = notes.strip() if notes and notes.strip() else None

    @classmethod
    def create(
        cls,
        ordinal_range: OrdinalRange,
        versification: str = CANONICAL_SCHEME,
        notes: str | None = None,
    ) -> Bookmark:
        """
        Create a new, unsaved bookmark.

        Args:
            ordinal_range: Canonical ordinals covered by the bookmark
            versification: Scheme the user created the bookmark in
            notes: Optional free text

        Returns:
            New Bookmark instance with a placeholder id
        """
        return cls(
            id=BookmarkId.generate(),
            kjv_ordinal_start=ordinal_range.start,
            kjv_ordinal_end=ordinal_range.end,
            versification=versification,
            notes=notes,
        )

    @classmethod
    def create_with_id(
        cls,
        id: BookmarkId,
        kjv_ordinal_start: int,
        kjv_ordinal_end: int,
        versification: str,
        notes: str | None,
        created_at: dt_module.datetime,
    ) -> Bookmark:
        """Reconstitute a bookmark from persistence."""
        return cls(
            id=id,
            kjv_ordinal_start=kjv_ordinal_start,
            kjv_ordinal_end=kjv_ordinal_end,
            versification=versification,
            notes=notes,
            created_at=created_at,
        )
