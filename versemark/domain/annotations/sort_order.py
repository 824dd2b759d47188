"""Named bookmark orderings."""

from __future__ import annotations

from enum import StrEnum

from versemark.exceptions import ConstraintError


class BookmarkSortOrder(StrEnum):
    """How bookmark listings are ordered."""

    # Canonical document position, start then end
    BIBLE_ORDER = "BIBLE_ORDER"
    # Oldest first
    CREATED_AT = "CREATED_AT"
    # Newest first
    CREATED_AT_DESC = "CREATED_AT_DESC"

    @classmethod
    def parse(cls, value: str | BookmarkSortOrder) -> BookmarkSortOrder:
        """Validate an untrusted sort-order name."""
        try:
            return cls(value)
        except ValueError:
            raise ConstraintError(
                f"Unknown sort order '{value}'",
                {"allowed": [order.value for order in cls]},
            ) from None
