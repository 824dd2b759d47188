"""Common value objects shared across all domain modules."""

from .ids import BookmarkId, LabelId
from .ordinal_range import OrdinalRange

__all__ = [
    # IDs
    "BookmarkId",
    "LabelId",
    # Ranges
    "OrdinalRange",
]
