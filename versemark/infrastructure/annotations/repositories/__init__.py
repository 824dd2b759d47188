from .bookmark_label_repository import BookmarkLabelRepository
from .bookmark_repository import BookmarkRepository
from .label_repository import LabelRepository

__all__ = [
    "BookmarkLabelRepository",
    "BookmarkRepository",
    "LabelRepository",
]
