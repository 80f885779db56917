# restrict/models/cut_ranges.py
from typing import Iterable, Optional, List

from restrict.exceptions import CutRangeTypeError
from .cut_range import VerticalCutRange, is_cut_range


def _check_cut_range(obj) -> None:
    if not is_cut_range(obj):
        raise CutRangeTypeError(
            f"Expected VerticalCutRange or HorizontalCutRange, got {type(obj).__name__}",
            {"value": repr(obj)}
        )


class CutRanges(list):
    """Ordered collection of cut ranges with aggregate queries"""

    def __init__(self, iterable: Iterable = ()):
        items = list(iterable)
        for item in items:
            _check_cut_range(item)
        super().__init__(items)

    def append(self, cut_range) -> None:
        _check_cut_range(cut_range)
        super().append(cut_range)

    def extend(self, cut_ranges: Iterable) -> None:
        items = list(cut_ranges)
        for item in items:
            _check_cut_range(item)
        super().extend(items)

    def insert(self, index: int, cut_range) -> None:
        _check_cut_range(cut_range)
        super().insert(index, cut_range)

    def __iadd__(self, cut_ranges: Iterable) -> 'CutRanges':
        self.extend(cut_ranges)
        return self

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            value = list(value)
            for item in value:
                _check_cut_range(item)
        else:
            _check_cut_range(value)
        super().__setitem__(index, value)

    def _fold(self, values: List[Optional[int]], fn) -> Optional[int]:
        present = [v for v in values if v is not None]
        return fn(present) if present else None

    @property
    def min(self) -> Optional[int]:
        return self._fold([c.min for c in self], min)

    @property
    def max(self) -> Optional[int]:
        return self._fold([c.max for c in self], max)

    @property
    def vertical(self) -> List[VerticalCutRange]:
        return [c for c in self if isinstance(c, VerticalCutRange)]

    @property
    def min_vertical(self) -> Optional[int]:
        return self._fold([c.min for c in self.vertical], min)

    @property
    def max_vertical(self) -> Optional[int]:
        return self._fold([c.max for c in self.vertical], max)

    def includes(self, index: int) -> bool:
        return any(c.includes(index) for c in self)

    def shifted(self, offset: int) -> 'CutRanges':
        return CutRanges(c.shifted(offset) for c in self)
