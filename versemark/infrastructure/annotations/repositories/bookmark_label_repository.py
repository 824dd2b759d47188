"""Repository for the bookmark ↔ label association."""

from collections.abc import Iterable, Sequence

import structlog
from sqlalchemy import delete, select, tuple_
from sqlalchemy.orm import Session

from versemark.domain.annotations.entities.bookmark import Bookmark
from versemark.domain.annotations.entities.label import Label
from versemark.domain.annotations.sort_order import BookmarkSortOrder
from versemark.domain.common.value_objects import BookmarkId, LabelId
from versemark.exceptions import ConstraintError
from versemark.infrastructure.annotations.mappers import LabelMapper
from versemark.infrastructure.common import SQLAlchemyRepository
from versemark.models import Bookmark as BookmarkORM
from versemark.models import BookmarkToLabel as BookmarkToLabelORM
from versemark.models import Label as LabelORM

logger = structlog.get_logger(__name__)

BookmarkLabelPair = tuple[BookmarkId, LabelId]


class BookmarkLabelRepository(SQLAlchemyRepository):
    """
    Repository for BookmarkToLabel rows.

    Owns referential integrity of the association: inserts check that both
    endpoints exist, and the bookmark and label repositories call
    delete_for_bookmark / delete_for_label inside their own delete
    transaction so no row ever points at a missing entity.
    """

    def __init__(self, db: Session) -> None:
        super().__init__(db)
        self.label_mapper = LabelMapper()

    # Inserts

    def insert(self, bookmark_id: BookmarkId, label_id: LabelId) -> int:
        """
        Link a bookmark to a label.

        Returns:
            Id of the new association row

        Raises:
            ConstraintError: If either endpoint is missing or the pair already exists
        """
        return self.insert_batch([(bookmark_id, label_id)])[0]

    def insert_batch(self, pairs: Sequence[BookmarkLabelPair]) -> list[int]:
        """
        Link several (bookmark, label) pairs in one transaction.

        All-or-nothing: if any pair is invalid nothing is written.

        Args:
            pairs: (bookmark_id, label_id) pairs

        Returns:
            Ids of the new association rows, in input order

        Raises:
            ConstraintError: If an endpoint is missing, a pair is repeated in
                the batch, or a pair is already linked
        """
        if not pairs:
            return []

        with self._unit_of_work() as uow:
            keys = self._validate_new_pairs(pairs)
            orm_models = [
                BookmarkToLabelORM(bookmark_id=bookmark_id, label_id=label_id)
                for bookmark_id, label_id in keys
            ]
            self.db.add_all(orm_models)
            self.db.flush()
            ids = [orm.id for orm in orm_models]
            uow.commit()

        logger.info("inserted_bookmark_labels", count=len(ids))
        return ids

    # Deletes

    def delete(self, bookmark_id: BookmarkId, label_id: LabelId) -> int:
        """
        Unlink a bookmark from a label.

        Returns:
            1 if the pair was linked, 0 otherwise
        """
        return self.delete_batch([(bookmark_id, label_id)])

    def delete_batch(self, pairs: Sequence[BookmarkLabelPair]) -> int:
        """
        Unlink several pairs in one transaction.

        Missing pairs are not an error; they add 0 to the count.

        Returns:
            Number of association rows removed
        """
        keys = {(bookmark_id.value, label_id.value) for bookmark_id, label_id in pairs}
        if not keys:
            return 0

        with self._unit_of_work() as uow:
            result = self.db.execute(
                delete(BookmarkToLabelORM)
                .where(
                    tuple_(BookmarkToLabelORM.bookmark_id, BookmarkToLabelORM.label_id).in_(
                        list(keys)
                    )
                )
                .execution_options(synchronize_session=False)
            )
            uow.commit()

        removed = result.rowcount or 0
        logger.info("deleted_bookmark_labels", requested=len(keys), removed=removed)
        return removed

    def replace_labels(self, bookmark_id: BookmarkId, label_ids: Iterable[LabelId]) -> list[Label]:
        """
        Make a bookmark's label set exactly label_ids.

        Adds missing links and removes extra ones in one transaction.

        Returns:
            The bookmark's labels after the change, sorted by name

        Raises:
            ConstraintError: If the bookmark or any label does not exist
        """
        wanted = {label_id.value for label_id in label_ids}

        with self._unit_of_work() as uow:
            self._require_bookmarks({bookmark_id.value})
            self._require_labels(wanted)
            current = set(
                self.db.execute(
                    select(BookmarkToLabelORM.label_id).where(
                        BookmarkToLabelORM.bookmark_id == bookmark_id.value
                    )
                ).scalars()
            )
            to_remove = current - wanted
            to_add = wanted - current
            if to_remove:
                self.db.execute(
                    delete(BookmarkToLabelORM)
                    .where(
                        BookmarkToLabelORM.bookmark_id == bookmark_id.value,
                        BookmarkToLabelORM.label_id.in_(sorted(to_remove)),
                    )
                    .execution_options(synchronize_session=False)
                )
            self.db.add_all(
                BookmarkToLabelORM(bookmark_id=bookmark_id.value, label_id=label_id)
                for label_id in sorted(to_add)
            )
            uow.commit()

        logger.info(
            "replaced_bookmark_labels",
            bookmark_id=bookmark_id.value,
            added=sorted(to_add),
            removed=sorted(to_remove),
        )
        return self.labels_for(bookmark_id)

    # Cascade helpers; callers commit

    def delete_for_bookmark(self, bookmark_id: BookmarkId) -> int:
        """Remove every association of a bookmark within the caller's transaction."""
        result = self.db.execute(
            delete(BookmarkToLabelORM)
            .where(BookmarkToLabelORM.bookmark_id == bookmark_id.value)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    def delete_for_label(self, label_id: LabelId) -> int:
        """Remove every association of a label within the caller's transaction."""
        result = self.db.execute(
            delete(BookmarkToLabelORM)
            .where(BookmarkToLabelORM.label_id == label_id.value)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    # Queries

    def labels_for(self, bookmark_id: BookmarkId) -> list[Label]:
        """
        Get all labels attached to a bookmark.

        Returns:
            List of label entities ordered by name
        """
        stmt = (
            select(LabelORM)
            .join(BookmarkToLabelORM, BookmarkToLabelORM.label_id == LabelORM.id)
            .where(BookmarkToLabelORM.bookmark_id == bookmark_id.value)
            .order_by(LabelORM.name, LabelORM.id)
        )
        orm_models = self._execute(stmt).scalars().all()
        return [self.label_mapper.to_domain(orm) for orm in orm_models]

    def bookmarks_for(
        self, label_id: LabelId, sort_order: BookmarkSortOrder = BookmarkSortOrder.BIBLE_ORDER
    ) -> list[Bookmark]:
        """Get all bookmarks carrying a label, in the requested order."""
        from .bookmark_repository import BookmarkRepository  # noqa: PLC0415

        return BookmarkRepository(self.db).find_with_label(label_id, sort_order)

    # Validation

    def _validate_new_pairs(self, pairs: Sequence[BookmarkLabelPair]) -> list[tuple[int, int]]:
        keys = [(bookmark_id.value, label_id.value) for bookmark_id, label_id in pairs]
        if len(set(keys)) != len(keys):
            raise ConstraintError("Duplicate bookmark/label pair in batch", {"pairs": keys})

        self._require_bookmarks({bookmark_id for bookmark_id, _ in keys})
        self._require_labels({label_id for _, label_id in keys})

        existing = self.db.execute(
            select(BookmarkToLabelORM.bookmark_id, BookmarkToLabelORM.label_id).where(
                tuple_(BookmarkToLabelORM.bookmark_id, BookmarkToLabelORM.label_id).in_(keys)
            )
        ).all()
        if existing:
            raise ConstraintError(
                "Bookmark is already linked to label",
                {"pairs": [tuple(row) for row in existing]},
            )
        return keys

    def _require_bookmarks(self, bookmark_ids: set[int]) -> None:
        stmt = select(BookmarkORM.id).where(BookmarkORM.id.in_(bookmark_ids))
        found = set(self.db.execute(stmt).scalars())
        missing = sorted(bookmark_ids - found)
        if missing:
            raise ConstraintError(
                "Association references missing bookmarks", {"bookmark_ids": missing}
            )

    def _require_labels(self, label_ids: set[int]) -> None:
        if not label_ids:
            return
        stmt = select(LabelORM.id).where(LabelORM.id.in_(label_ids))
        found = set(self.db.execute(stmt).scalars())
        missing = sorted(label_ids - found)
        if missing:
            raise ConstraintError("Association references missing labels", {"label_ids": missing})
