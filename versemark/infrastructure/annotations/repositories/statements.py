"""
Query building blocks shared by the annotation repositories.

Sort orders are translated here from the BookmarkSortOrder enum into
order-by clauses; no caller-supplied ordering expression reaches SQL.
"""

from sqlalchemy import ColumnElement, Select, and_, select

from versemark.domain.annotations.sort_order import BookmarkSortOrder
from versemark.models import Bookmark as BookmarkORM
from versemark.models import BookmarkToLabel as BookmarkToLabelORM

_ORDERINGS: dict[BookmarkSortOrder, tuple[ColumnElement[object], ...]] = {
    BookmarkSortOrder.BIBLE_ORDER: (
        BookmarkORM.kjv_ordinal_start.asc(),
        BookmarkORM.kjv_ordinal_end.asc(),
        BookmarkORM.id.asc(),
    ),
    BookmarkSortOrder.CREATED_AT: (
        BookmarkORM.created_at.asc(),
        BookmarkORM.id.asc(),
    ),
    BookmarkSortOrder.CREATED_AT_DESC: (
        BookmarkORM.created_at.desc(),
        BookmarkORM.id.desc(),
    ),
}


def bookmark_order_by(
    sort_order: BookmarkSortOrder | str,
) -> tuple[ColumnElement[object], ...]:
    """
    Order-by clauses for a named sort order.

    Raises:
        ConstraintError: If sort_order is not a BookmarkSortOrder name
    """
    return _ORDERINGS[BookmarkSortOrder.parse(sort_order)]


def overlaps_range(range_start: int, range_end: int) -> ColumnElement[bool]:
    """
    Bookmarks whose closed interval intersects [range_start, range_end].

    Shared boundaries count as overlapping.
    """
    return and_(
        BookmarkORM.kjv_ordinal_start <= range_end,
        BookmarkORM.kjv_ordinal_end >= range_start,
    )


def contains_ordinal(ordinal: int) -> ColumnElement[bool]:
    return and_(
        BookmarkORM.kjv_ordinal_start <= ordinal,
        BookmarkORM.kjv_ordinal_end >= ordinal,
    )


def select_bookmarks_with_label(label_id: int) -> Select[tuple[BookmarkORM]]:
    """Bookmarks joined through the association table to one label."""
    return (
        select(BookmarkORM)
        .join(BookmarkToLabelORM, BookmarkToLabelORM.bookmark_id == BookmarkORM.id)
        .where(BookmarkToLabelORM.label_id == label_id)
    )
