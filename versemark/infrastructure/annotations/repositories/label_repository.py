"""Repository for Label domain entities."""

import threading

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from versemark.domain.annotations.bookmark_style import BookmarkStyle
from versemark.domain.annotations.entities.label import Label
from versemark.domain.common.value_objects import LabelId
from versemark.exceptions import ConstraintError, LabelNotFoundError, StorageError
from versemark.infrastructure.annotations.mappers import LabelMapper
from versemark.infrastructure.common import SQLAlchemyRepository
from versemark.models import Label as LabelORM

from .bookmark_label_repository import BookmarkLabelRepository

logger = structlog.get_logger(__name__)

# Serializes get_or_create_reserved within this process
_reserved_lock = threading.Lock()


class LabelRepository(SQLAlchemyRepository):
    """Repository for Label domain entities."""

    def __init__(self, db: Session) -> None:
        super().__init__(db)
        self.mapper = LabelMapper()
        self.associations = BookmarkLabelRepository(db)

    def insert(self, label: Label) -> LabelId:
        """
        Persist a new label.

        Returns:
            The id assigned by the database
        """
        with self._unit_of_work() as uow:
            orm_model = self.mapper.to_orm(label)
            self.db.add(orm_model)
            self.db.flush()
            label_id = LabelId(orm_model.id)
            uow.commit()

        logger.info(
            "created_label",
            label_id=label_id.value,
            name=label.name,
            bookmark_style=label.bookmark_style.value,
        )
        return label_id

    def update(self, label: Label) -> None:
        """
        Rename or restyle a label.

        Raises:
            LabelNotFoundError: If no label has this id
            ConstraintError: If the change moves a label into or out of a
                reserved style
        """
        with self._unit_of_work() as uow:
            orm_model = self.db.get(LabelORM, label.id.value)
            if orm_model is None:
                raise LabelNotFoundError(label.id.value)

            stored_style = BookmarkStyle(orm_model.bookmark_style)
            if stored_style != label.bookmark_style and (
                stored_style.is_reserved or label.bookmark_style.is_reserved
            ):
                raise ConstraintError(
                    "Reserved styles cannot be assigned or changed",
                    {"from": stored_style.value, "to": label.bookmark_style.value},
                )

            self.mapper.to_orm(label, orm_model)
            uow.commit()

        logger.info("updated_label", label_id=label.id.value)

    def delete(self, label: Label) -> None:
        """
        Delete a label and detach it from every bookmark.

        Raises:
            LabelNotFoundError: If no label has this id
        """
        with self._unit_of_work() as uow:
            orm_model = self.db.get(LabelORM, label.id.value)
            if orm_model is None:
                raise LabelNotFoundError(label.id.value)
            unlinked = self.associations.delete_for_label(label.id)
            self.db.delete(orm_model)
            uow.commit()

        logger.info("deleted_label", label_id=label.id.value, unlinked_bookmarks=unlinked)

    def find_by_id(self, label_id: LabelId) -> Label | None:
        stmt = select(LabelORM).where(LabelORM.id == label_id.value)
        orm_model = self._execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all_sorted_by_name(self) -> list[Label]:
        """
        Get all labels.

        Returns:
            List of label entities ordered by name, then id
        """
        stmt = select(LabelORM).order_by(LabelORM.name, LabelORM.id)
        orm_models = self._execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_style(self, bookmark_style: BookmarkStyle) -> Label | None:
        """Find the first label, by id, carrying the style."""
        stmt = (
            select(LabelORM)
            .where(LabelORM.bookmark_style == BookmarkStyle(bookmark_style).value)
            .order_by(LabelORM.id)
            .limit(1)
        )
        orm_model = self._execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def get_or_create_reserved(self, bookmark_style: BookmarkStyle) -> Label:
        """
        Get the label of a reserved style, creating it on first use.

        Calls in this process run one at a time. Another process inserting the
        same style at once is caught by the reserved-style unique index; the
        losing insert is rolled back and the winner's row is returned.

        Returns:
            The one label carrying the style

        Raises:
            ConstraintError: If the style is not reserved
        """
        bookmark_style = BookmarkStyle(bookmark_style)
        if not bookmark_style.is_reserved:
            raise ConstraintError(
                f"Style {bookmark_style.value} is not reserved",
                {"style": bookmark_style.value},
            )

        with _reserved_lock:
            existing = self.find_by_style(bookmark_style)
            if existing is not None:
                return existing

            label = Label.create_reserved(bookmark_style)
            try:
                label_id = self.insert(label)
            except StorageError as e:
                if not isinstance(e.original, IntegrityError):
                    raise
                winner = self.find_by_style(bookmark_style)
                if winner is None:
                    raise
                logger.info(
                    "reserved_label_created_elsewhere",
                    bookmark_style=bookmark_style.value,
                    label_id=winner.id.value,
                )
                return winner

        return label.with_id(label_id)
