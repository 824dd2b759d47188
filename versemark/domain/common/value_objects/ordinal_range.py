"""OrdinalRange value object for canonical verse intervals.

An ordinal range is a closed interval ``[start, end]`` of canonical verse
ordinals. Both ends are inclusive, so two ranges sharing a single boundary
ordinal overlap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from versemark.exceptions import ConstraintError

from ..value_object import ValueObject

if TYPE_CHECKING:
    from typing import Self


@dataclass(frozen=True, order=True)
class OrdinalRange(ValueObject):
    """Closed interval of canonical ordinals, ordered by start then end."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ConstraintError(
                "Range start must not come after its end",
                {"start": self.start, "end": self.end},
            )

    def overlaps(self, other: OrdinalRange) -> bool:
        """Check whether the two closed intervals intersect."""
        return self.start <= other.end and self.end >= other.start

    def contains(self, ordinal: int) -> bool:
        """Check whether the ordinal lies within this range."""
        return self.start <= ordinal <= self.end

    def __len__(self) -> int:
        return self.end - self.start + 1

    def to_json(self) -> list[int]:
        """Serialize to JSON-compatible list [start, end]."""
        return [self.start, self.end]

    @classmethod
    def from_json(cls, data: list[int]) -> Self:
        """Deserialize from JSON list [start, end]."""
        return cls(start=data[0], end=data[1])

    @classmethod
    def point(cls, ordinal: int) -> Self:
        """Range covering a single ordinal."""
        return cls(start=ordinal, end=ordinal)
