"""Mapper for Bookmark ORM ↔ Domain conversion."""

from datetime import UTC, datetime

from versemark.domain.annotations.entities.bookmark import Bookmark
from versemark.domain.common.value_objects import BookmarkId
from versemark.models import Bookmark as BookmarkORM


def as_utc(value: datetime) -> datetime:
    """Normalize to UTC; timestamps are written as UTC and SQLite reads them back naive."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class BookmarkMapper:
    """Mapper for Bookmark ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BookmarkORM) -> Bookmark:
        """Convert ORM model to domain entity."""
        return Bookmark.create_with_id(
            id=BookmarkId(orm_model.id),
            kjv_ordinal_start=orm_model.kjv_ordinal_start,
            kjv_ordinal_end=orm_model.kjv_ordinal_end,
            versification=orm_model.versification,
            notes=orm_model.notes,
            created_at=as_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: Bookmark, orm_model: BookmarkORM | None = None) -> BookmarkORM:
        """Convert domain entity to ORM model; the id is left to the database on create."""
        if orm_model:
            # Full replace of every mutable column
            orm_model.kjv_ordinal_start = domain_entity.kjv_ordinal_start
            orm_model.kjv_ordinal_end = domain_entity.kjv_ordinal_end
            orm_model.versification = domain_entity.versification
            orm_model.notes = domain_entity.notes
            orm_model.created_at = as_utc(domain_entity.created_at)
            return orm_model

        return BookmarkORM(
            kjv_ordinal_start=domain_entity.kjv_ordinal_start,
            kjv_ordinal_end=domain_entity.kjv_ordinal_end,
            versification=domain_entity.versification,
            notes=domain_entity.notes,
            created_at=as_utc(domain_entity.created_at),
        )
