"""Hebrew (Masoretic) versification.

Covers the chapter splits that move whole runs of verses between chapters
in Joel and Malachi; elsewhere the numbering follows KJV.
"""

from .bible_book import BibleBook
from .kjv import KJV_CHAPTERS
from .versification import ChapterShift, Versification

MT = Versification(
    name="MT",
    chapters={
        **KJV_CHAPTERS,
        BibleBook.JOEL: (20, 27, 5, 21),
        BibleBook.MAL: (14, 17, 24),
    },
    shifts_to_canonical=(
        # Joel 3:1-5 = KJV Joel 2:28-32
        ChapterShift(BibleBook.JOEL, 3, 1, 5, target_chapter=2, target_first_verse=28),
        # Joel 4 = KJV Joel 3
        ChapterShift(BibleBook.JOEL, 4, 1, 21, target_chapter=3, target_first_verse=1),
        # Malachi 3:19-24 = KJV Malachi 4:1-6
        ChapterShift(BibleBook.MAL, 3, 19, 24, target_chapter=4, target_first_verse=1),
    ),
)
