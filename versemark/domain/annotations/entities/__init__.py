from .bookmark import Bookmark
from .label import Label

__all__ = ["Bookmark", "Label"]
