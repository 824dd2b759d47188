"""Books of the Bible in canonical order."""

from __future__ import annotations

from enum import IntEnum

from versemark.exceptions import ConstraintError


class BibleBook(IntEnum):
    """The 66 books of the Protestant canon; values follow canonical order."""

    GEN = 1
    EXOD = 2
    LEV = 3
    NUM = 4
    DEUT = 5
    JOSH = 6
    JUDG = 7
    RUTH = 8
    SAM1 = 9
    SAM2 = 10
    KGS1 = 11
    KGS2 = 12
    CHR1 = 13
    CHR2 = 14
    EZRA = 15
    NEH = 16
    ESTH = 17
    JOB = 18
    PS = 19
    PROV = 20
    ECCL = 21
    SONG = 22
    ISA = 23
    JER = 24
    LAM = 25
    EZEK = 26
    DAN = 27
    HOS = 28
    JOEL = 29
    AMOS = 30
    OBAD = 31
    JONAH = 32
    MIC = 33
    NAH = 34
    HAB = 35
    ZEPH = 36
    HAG = 37
    ZECH = 38
    MAL = 39
    MATT = 40
    MARK = 41
    LUKE = 42
    JOHN = 43
    ACTS = 44
    ROM = 45
    COR1 = 46
    COR2 = 47
    GAL = 48
    EPH = 49
    PHIL = 50
    COL = 51
    THESS1 = 52
    THESS2 = 53
    TIM1 = 54
    TIM2 = 55
    TITUS = 56
    PHLM = 57
    HEB = 58
    JAS = 59
    PET1 = 60
    PET2 = 61
    JOHN1 = 62
    JOHN2 = 63
    JOHN3 = 64
    JUDE = 65
    REV = 66

    @property
    def osis_id(self) -> str:
        """OSIS book abbreviation, e.g. ``1Sam``."""
        return _OSIS_IDS[self]

    @property
    def is_old_testament(self) -> bool:
        return self <= BibleBook.MAL

    @classmethod
    def from_osis(cls, osis_id: str) -> BibleBook:
        """Look up a book by its OSIS abbreviation (case-insensitive)."""
        try:
            return _BY_OSIS[osis_id.lower()]
        except KeyError:
            raise ConstraintError(f"Unknown book '{osis_id}'") from None


_OSIS_IDS: dict[BibleBook, str] = {
    BibleBook.GEN: "Gen",
    BibleBook.EXOD: "Exod",
    BibleBook.LEV: "Lev",
    BibleBook.NUM: "Num",
    BibleBook.DEUT: "Deut",
    BibleBook.JOSH: "Josh",
    BibleBook.JUDG: "Judg",
    BibleBook.RUTH: "Ruth",
    BibleBook.SAM1: "1Sam",
    BibleBook.SAM2: "2Sam",
    BibleBook.KGS1: "1Kgs",
    BibleBook.KGS2: "2Kgs",
    BibleBook.CHR1: "1Chr",
    BibleBook.CHR2: "2Chr",
    BibleBook.EZRA: "Ezra",
    BibleBook.NEH: "Neh",
    BibleBook.ESTH: "Esth",
    BibleBook.JOB: "Job",
    BibleBook.PS: "Ps",
    BibleBook.PROV: "Prov",
    BibleBook.ECCL: "Eccl",
    BibleBook.SONG: "Song",
    BibleBook.ISA: "Isa",
    BibleBook.JER: "Jer",
    BibleBook.LAM: "Lam",
    BibleBook.EZEK: "Ezek",
    BibleBook.DAN: "Dan",
    BibleBook.HOS: "Hos",
    BibleBook.JOEL: "Joel",
    BibleBook.AMOS: "Amos",
    BibleBook.OBAD: "Obad",
    BibleBook.JONAH: "Jonah",
    BibleBook.MIC: "Mic",
    BibleBook.NAH: "Nah",
    BibleBook.HAB: "Hab",
    BibleBook.ZEPH: "Zeph",
    BibleBook.HAG: "Hag",
    BibleBook.ZECH: "Zech",
    BibleBook.MAL: "Mal",
    BibleBook.MATT: "Matt",
    BibleBook.MARK: "Mark",
    BibleBook.LUKE: "Luke",
    BibleBook.JOHN: "John",
    BibleBook.ACTS: "Acts",
    BibleBook.ROM: "Rom",
    BibleBook.COR1: "1Cor",
    BibleBook.COR2: "2Cor",
    BibleBook.GAL: "Gal",
    BibleBook.EPH: "Eph",
    BibleBook.PHIL: "Phil",
    BibleBook.COL: "Col",
    BibleBook.THESS1: "1Thess",
    BibleBook.THESS2: "2Thess",
    BibleBook.TIM1: "1Tim",
    BibleBook.TIM2: "2Tim",
    BibleBook.TITUS: "Titus",
    BibleBook.PHLM: "Phlm",
    BibleBook.HEB: "Heb",
    BibleBook.JAS: "Jas",
    BibleBook.PET1: "1Pet",
    BibleBook.PET2: "2Pet",
    BibleBook.JOHN1: "1John",
    BibleBook.JOHN2: "2John",
    BibleBook.JOHN3: "3John",
    BibleBook.JUDE: "Jude",
    BibleBook.REV: "Rev",
}

_BY_OSIS: dict[str, BibleBook] = {osis.lower(): book for book, osis in _OSIS_IDS.items()}
