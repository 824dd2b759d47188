from .bookmark_mapper import BookmarkMapper
from .label_mapper import LabelMapper

__all__ = ["BookmarkMapper", "LabelMapper"]
