"""Mapper for Label ORM ↔ Domain conversion."""

from versemark.domain.annotations.bookmark_style import BookmarkStyle
from versemark.domain.annotations.entities.label import Label
from versemark.domain.common.value_objects import LabelId
from versemark.models import Label as LabelORM


class LabelMapper:
    """Mapper for Label ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LabelORM) -> Label:
        """Convert ORM model to domain entity."""
        return Label.create_with_id(
            id=LabelId(orm_model.id),
            name=orm_model.name,
            bookmark_style=BookmarkStyle(orm_model.bookmark_style),
        )

    def to_orm(self, domain_entity: Label, orm_model: LabelORM | None = None) -> LabelORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            orm_model.bookmark_style = domain_entity.bookmark_style.value
            return orm_model

        # Create new
        return LabelORM(
            name=domain_entity.name,
            bookmark_style=domain_entity.bookmark_style.value,
        )
