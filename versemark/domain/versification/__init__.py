"""Versification domain: books, verse references and numbering schemes."""

from .bible_book import BibleBook
from .kjv import KJV
from .mt import MT
from .verse import VerseRange, VerseRef
from .versification import ChapterShift, Versification

CANONICAL_SCHEME = KJV.name

BUILTIN_VERSIFICATIONS: tuple[Versification, ...] = (KJV, MT)

__all__ = [
    "BUILTIN_VERSIFICATIONS",
    "CANONICAL_SCHEME",
    "KJV",
    "MT",
    "BibleBook",
    "ChapterShift",
    "VerseRange",
    "VerseRef",
    "Versification",
]
