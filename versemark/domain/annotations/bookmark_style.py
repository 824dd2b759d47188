"""Label styles."""

from enum import StrEnum


class BookmarkStyle(StrEnum):
    """Visual style a label gives to its bookmarks."""

    YELLOW_STARS = "YELLOW_STARS"
    RED_HIGHLIGHT = "RED_HIGHLIGHT"
    YELLOW_HIGHLIGHT = "YELLOW_HIGHLIGHT"
    GREEN_HIGHLIGHT = "GREEN_HIGHLIGHT"
    BLUE_HIGHLIGHT = "BLUE_HIGHLIGHT"
    ORANGE_HIGHLIGHT = "ORANGE_HIGHLIGHT"
    PURPLE_HIGHLIGHT = "PURPLE_HIGHLIGHT"
    UNDERLINE = "UNDERLINE"
    # Marks bookmarks created by text-to-speech playback
    SPEAK = "SPEAK"

    @property
    def is_reserved(self) -> bool:
        return self in RESERVED_STYLES


# At most one label may carry each of these styles
RESERVED_STYLES: frozenset[BookmarkStyle] = frozenset({BookmarkStyle.SPEAK})
