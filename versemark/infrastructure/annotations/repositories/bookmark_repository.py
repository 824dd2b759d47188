"""Repository for Bookmark domain entities."""

from collections.abc import Iterable

import structlog
from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from versemark.domain.annotations.entities.bookmark import Bookmark
from versemark.domain.annotations.sort_order import BookmarkSortOrder
from versemark.domain.common.value_objects import BookmarkId, LabelId, OrdinalRange
from versemark.exceptions import BookmarkNotFoundError
from versemark.infrastructure.annotations.mappers import BookmarkMapper
from versemark.infrastructure.common import SQLAlchemyRepository
from versemark.models import Bookmark as BookmarkORM
from versemark.models import BookmarkToLabel as BookmarkToLabelORM

from .bookmark_label_repository import BookmarkLabelRepository
from .statements import (
    bookmark_order_by,
    contains_ordinal,
    overlaps_range,
    select_bookmarks_with_label,
)

logger = structlog.get_logger(__name__)


class BookmarkRepository(SQLAlchemyRepository):
    """
    Repository for Bookmark domain entities.

    Every range and point query works on canonical ordinals; callers holding
    verse references in another scheme convert them first.
    """

    def __init__(self, db: Session) -> None:
        super().__init__(db)
        self.mapper = BookmarkMapper()
        self.associations = BookmarkLabelRepository(db)

    # Writes

    def insert(self, bookmark: Bookmark) -> BookmarkId:
        """
        Persist a new bookmark.

        The entity's own id is ignored; rebuild it with the returned id via
        ``bookmark.with_id(...)``.

        Returns:
            The id assigned by the database

        Raises:
            ConstraintError: If the bookmark starts after it ends
        """
        bookmark.check_range()

        with self._unit_of_work() as uow:
            orm_model = self.mapper.to_orm(bookmark)
            self.db.add(orm_model)
            self.db.flush()
            bookmark_id = BookmarkId(orm_model.id)
            uow.commit()

        logger.info(
            "created_bookmark",
            bookmark_id=bookmark_id.value,
            kjv_ordinal_start=bookmark.kjv_ordinal_start,
            kjv_ordinal_end=bookmark.kjv_ordinal_end,
        )
        return bookmark_id

    def update(self, bookmark: Bookmark) -> None:
        """
        Replace every stored field of a bookmark.

        Raises:
            BookmarkNotFoundError: If no bookmark has this id
            ConstraintError: If the bookmark starts after it ends
        """
        bookmark.check_range()

        with self._unit_of_work() as uow:
            orm_model = self.db.get(BookmarkORM, bookmark.id.value)
            if orm_model is None:
                raise BookmarkNotFoundError(bookmark.id.value)
            self.mapper.to_orm(bookmark, orm_model)
            uow.commit()

        logger.info("updated_bookmark", bookmark_id=bookmark.id.value)

    def update_touching_date(self, bookmark: Bookmark) -> Bookmark:
        """
        Update a bookmark and stamp its created_at with the current time.

        Returns:
            The stored bookmark, carrying the new timestamp
        """
        touched = bookmark.touched()
        self.update(touched)
        return touched

    def delete(self, bookmark: Bookmark) -> None:
        """
        Delete a bookmark together with all of its label associations.

        Raises:
            BookmarkNotFoundError: If no bookmark has this id
        """
        with self._unit_of_work() as uow:
            orm_model = self.db.get(BookmarkORM, bookmark.id.value)
            if orm_model is None:
                raise BookmarkNotFoundError(bookmark.id.value)
            unlinked = self.associations.delete_for_bookmark(bookmark.id)
            self.db.delete(orm_model)
            uow.commit()

        logger.info("deleted_bookmark", bookmark_id=bookmark.id.value, unlinked_labels=unlinked)

    # Lookups

    def find_by_id(self, bookmark_id: BookmarkId) -> Bookmark | None:
        stmt = select(BookmarkORM).where(BookmarkORM.id == bookmark_id.value)
        orm_model = self._execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def get_by_id(self, bookmark_id: BookmarkId) -> Bookmark:
        """
        Get a bookmark by id.

        Raises:
            BookmarkNotFoundError: If no bookmark has this id
        """
        bookmark = self.find_by_id(bookmark_id)
        if bookmark is None:
            raise BookmarkNotFoundError(bookmark_id.value)
        return bookmark

    def find_by_ids(self, bookmark_ids: Iterable[BookmarkId]) -> list[Bookmark]:
        """
        Get the bookmarks among the given ids.

        Repeated ids yield one bookmark; unknown ids are skipped.

        Returns:
            List of bookmark entities ordered by id
        """
        ids = sorted({bookmark_id.value for bookmark_id in bookmark_ids})
        if not ids:
            return []

        stmt = select(BookmarkORM).where(BookmarkORM.id.in_(ids)).order_by(BookmarkORM.id)
        return self._find(stmt)

    def find_all(
        self, sort_order: BookmarkSortOrder = BookmarkSortOrder.BIBLE_ORDER
    ) -> list[Bookmark]:
        stmt = select(BookmarkORM).order_by(*bookmark_order_by(sort_order))
        return self._find(stmt)

    # Range queries

    def find_for_range(self, range_start: int, range_end: int) -> list[Bookmark]:
        """
        Get every bookmark overlapping the closed range [range_start, range_end].

        A bookmark ending exactly at range_start, or starting exactly at
        range_end, overlaps.

        Returns:
            List of bookmark entities in document order

        Raises:
            ConstraintError: If range_start comes after range_end
        """
        query = OrdinalRange(start=range_start, end=range_end)
        stmt = (
            select(BookmarkORM)
            .where(overlaps_range(query.start, query.end))
            .order_by(*bookmark_order_by(BookmarkSortOrder.BIBLE_ORDER))
        )
        return self._find(stmt)

    def find_for_point(self, ordinal: int) -> list[Bookmark]:
        """Get every bookmark whose range contains the ordinal."""
        stmt = (
            select(BookmarkORM)
            .where(contains_ordinal(ordinal))
            .order_by(*bookmark_order_by(BookmarkSortOrder.BIBLE_ORDER))
        )
        return self._find(stmt)

    def find_for_exact_start(self, ordinal: int) -> list[Bookmark]:
        """Get every bookmark starting exactly at the ordinal."""
        stmt = (
            select(BookmarkORM)
            .where(BookmarkORM.kjv_ordinal_start == ordinal)
            .order_by(*bookmark_order_by(BookmarkSortOrder.BIBLE_ORDER))
        )
        return self._find(stmt)

    def has_any(self, ordinal: int) -> bool:
        """
        Check whether any bookmark contains the ordinal.

        Runs an EXISTS query, so no bookmark rows are loaded.
        """
        matching = select(BookmarkORM.id).where(contains_ordinal(ordinal))
        return bool(self._execute(select(matching.exists())).scalar())

    # Label queries

    def find_unlabelled(
        self, sort_order: BookmarkSortOrder = BookmarkSortOrder.BIBLE_ORDER
    ) -> list[Bookmark]:
        """Get every bookmark with no label attached."""
        has_label = (
            select(BookmarkToLabelORM.id)
            .where(BookmarkToLabelORM.bookmark_id == BookmarkORM.id)
            .exists()
        )
        stmt = select(BookmarkORM).where(~has_label).order_by(*bookmark_order_by(sort_order))
        return self._find(stmt)

    def find_with_label(
        self,
        label_id: LabelId,
        sort_order: BookmarkSortOrder = BookmarkSortOrder.BIBLE_ORDER,
    ) -> list[Bookmark]:
        stmt = select_bookmarks_with_label(label_id.value).order_by(
            *bookmark_order_by(sort_order)
        )
        return self._find(stmt)

    def find_with_label_at_exact_start(self, label_id: LabelId, ordinal: int) -> list[Bookmark]:
        """
        Get bookmarks carrying the label that start exactly at the ordinal.

        Used to spot a duplicate bookmark at the same anchor under the same label.
        """
        stmt = (
            select_bookmarks_with_label(label_id.value)
            .where(BookmarkORM.kjv_ordinal_start == ordinal)
            .order_by(*bookmark_order_by(BookmarkSortOrder.BIBLE_ORDER))
        )
        return self._find(stmt)

    def find_with_label_in_range(
        self, label_id: LabelId, range_start: int, range_end: int
    ) -> list[Bookmark]:
        """
        Get bookmarks carrying the label that overlap [range_start, range_end].

        Raises:
            ConstraintError: If range_start comes after range_end
        """
        query = OrdinalRange(start=range_start, end=range_end)
        stmt = (
            select_bookmarks_with_label(label_id.value)
            .where(overlaps_range(query.start, query.end))
            .order_by(*bookmark_order_by(BookmarkSortOrder.BIBLE_ORDER))
        )
        return self._find(stmt)

    def _find(self, stmt: Select[tuple[BookmarkORM]]) -> list[Bookmark]:
        orm_models = self._execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]
