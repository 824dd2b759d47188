"""Tests for the Bookmark entity."""

from datetime import UTC, datetime

import pytest

from versemark.domain.annotations.entities.bookmark import Bookmark
from versemark.domain.common.value_objects import BookmarkId, OrdinalRange
from versemark.exceptions import ConstraintError


class TestBookmark:
    def test_create_is_unsaved(self) -> None:
        bookmark = Bookmark.create(OrdinalRange(10, 20))

        assert bookmark.id == BookmarkId(0)
        assert not bookmark.is_persisted()
        assert bookmark.versification == "KJV"
        assert bookmark.created_at.tzinfo is not None

    def test_with_id_returns_new_entity(self) -> None:
        bookmark = Bookmark.create(OrdinalRange(10, 20))

        saved = bookmark.with_id(BookmarkId(7))

        assert saved.id == BookmarkId(7)
        assert saved.ordinal_range == bookmark.ordinal_range
        assert bookmark.id == BookmarkId(0)

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ConstraintError):
            Bookmark(id=BookmarkId(0), kjv_ordinal_start=21, kjv_ordinal_end=20)

    def test_overlaps(self) -> None:
        bookmark = Bookmark.create(OrdinalRange(100, 120))

        assert bookmark.overlaps(OrdinalRange(120, 150))
        assert not bookmark.overlaps(OrdinalRange(121, 150))

    def test_touched_copies_with_new_timestamp(self) -> None:
        long_ago = datetime(2000, 1, 1, tzinfo=UTC)
        bookmark = Bookmark(
            id=BookmarkId(1), kjv_ordinal_start=1, kjv_ordinal_end=1, created_at=long_ago
        )

        touched = bookmark.touched()

        assert touched.created_at > long_ago
        assert bookmark.created_at == long_ago

    @pytest.mark.parametrize(
        ("notes", "expected"), [("  note ", "note"), ("   ", None), (None, None)]
    )
    def test_update_notes(self, notes: str | None, expected: str | None) -> None:
        bookmark = Bookmark.create(OrdinalRange(1, 1), notes="before")
        bookmark.update_notes(notes)
        assert bookmark.notes == expected
