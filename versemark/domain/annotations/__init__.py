"""Annotations domain: bookmarks, labels and their orderings."""

from .bookmark_style import RESERVED_STYLES, BookmarkStyle
from .entities import Bookmark, Label
from .sort_order import BookmarkSortOrder

__all__ = [
    "RESERVED_STYLES",
    "Bookmark",
    "BookmarkSortOrder",
    "BookmarkStyle",
    "Label",
]
