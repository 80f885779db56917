# restrict/models/cut_range.py
"""
Cut range value types.

Indices live in the between-base cut space of a molecule: index ``i`` is the
cut just after base ``i`` and ``-1`` is the cut just before the first base.
"""
from dataclasses import dataclass, replace
from typing import Optional, List, Union

from restrict.exceptions import InvalidRangeError


@dataclass(frozen=True)
class VerticalCutRange:
    """Backbone cut on one or both strands, possibly ambiguous over a span.

    Each strand may be described by a left and a right candidate cut index.
    ``min`` and ``max`` are taken over whichever of the four corners are set;
    a range with no corners set spans nothing.
    """
    p_cut_left: Optional[int] = None
    p_cut_right: Optional[int] = None
    c_cut_left: Optional[int] = None
    c_cut_right: Optional[int] = None

    @property
    def corners(self) -> List[Optional[int]]:
        return [self.p_cut_left, self.p_cut_right, self.c_cut_left, self.c_cut_right]

    @property
    def primary_cuts(self) -> List[int]:
        return [i for i in (self.p_cut_left, self.p_cut_right) if i is not None]

    @property
    def complement_cuts(self) -> List[int]:
        return [i for i in (self.c_cut_left, self.c_cut_right) if i is not None]

    @property
    def min(self) -> Optional[int]:
        present = [i for i in self.corners if i is not None]
        return min(present) if present else None

    @property
    def max(self) -> Optional[int]:
        present = [i for i in self.corners if i is not None]
        return max(present) if present else None

    @property
    def range(self) -> Optional[range]:
        if self.min is None:
            return None
        return range(self.min, self.max + 1)

    def is_empty(self) -> bool:
        return self.min is None

    def includes(self, index: int) -> bool:
        if self.min is None:
            return False
        return self.min <= index <= self.max

    def __contains__(self, index: int) -> bool:
        return self.includes(index)

    def shifted(self, offset: int) -> 'VerticalCutRange':
        """Return a copy translated by ``offset``"""
        def move(i):
            return None if i is None else i + offset
        return VerticalCutRange(move(self.p_cut_left), move(self.p_cut_right),
                                move(self.c_cut_left), move(self.c_cut_right))


@dataclass(frozen=True)
class HorizontalCutRange:
    """Separation between the two strands over the inclusive span [left, right]"""
    left: int
    right: Optional[int] = None

    def __post_init__(self):
        if self.left is None:
            raise InvalidRangeError("HorizontalCutRange requires a left index")
        if self.right is None:
            object.__setattr__(self, 'right', self.left)
        if self.left > self.right:
            raise InvalidRangeError(
                f"left > right ({self.left} > {self.right})",
                {"left": self.left, "right": self.right}
            )

    # A horizontal cut severs neither backbone
    p_cut_left = None
    p_cut_right = None
    c_cut_left = None
    c_cut_right = None

    @property
    def hcuts(self) -> range:
        return range(self.left, self.right + 1)

    @property
    def min(self) -> int:
        return self.left

    @property
    def max(self) -> int:
        return self.right

    @property
    def range(self) -> range:
        return self.hcuts

    def is_empty(self) -> bool:
        return False

    def includes(self, index: int) -> bool:
        return self.left <= index <= self.right

    def __contains__(self, index: int) -> bool:
        return self.includes(index)

    def shifted(self, offset: int) -> 'HorizontalCutRange':
        return replace(self, left=self.left + offset, right=self.right + offset)


CutRange = Union[VerticalCutRange, HorizontalCutRange]

CUT_RANGE_TYPES = (VerticalCutRange, HorizontalCutRange)


def is_cut_range(obj) -> bool:
    """True for either member of the CutRange variant"""
    return isinstance(obj, CUT_RANGE_TYPES)
