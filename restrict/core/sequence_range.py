# restrict/core/sequence_range.py
"""
SequenceRange: one contiguous double-stranded region and the cuts declared on it.

Declared cut ranges are reduced with CalculatedCuts, then assembled into
fragments by walking the cut space once while each strand writes into its
current bin (see restrict.core.bins).
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from restrict.exceptions import (
    CutRangeTypeError, IndexOutOfRangeError, InvalidRangeError
)
from restrict.models.cut_range import VerticalCutRange, HorizontalCutRange, is_cut_range
from restrict.models.cut_ranges import CutRanges
from restrict.models.fragment import Fragment, Fragments, DEFAULT_PLACEHOLDER, DEFAULT_BLANK
from restrict.core.calculated_cuts import CalculatedCuts
from restrict.core.bins import StrandBins, SENTINEL_BIN


class SequenceRange:
    """Double-stranded extent with cut ranges and tags

    At least one left bound (p_left or c_left) and one right bound (p_right
    or c_right) must be given, and each strand with both bounds needs
    left <= right. The extent runs from the smallest left to the largest
    right bound.
    """

    def __init__(self, p_left: Optional[int] = None, p_right: Optional[int] = None,
                 c_left: Optional[int] = None, c_right: Optional[int] = None,
                 circular: bool = False):
        if p_left is None and c_left is None:
            raise InvalidRangeError("A left bound is required on at least one strand")
        if p_right is None and c_right is None:
            raise InvalidRangeError("A right bound is required on at least one strand")
        for strand, left, right in (('primary', p_left, p_right), ('complement', c_left, c_right)):
            if left is not None and right is not None and left > right:
                raise InvalidRangeError(
                    f"{strand} strand left > right ({left} > {right})",
                    {"strand": strand, "left": left, "right": right}
                )

        self.p_left = p_left
        self.p_right = p_right
        self.c_left = c_left
        self.c_right = c_right
        self.left = min(i for i in (p_left, c_left) if i is not None)
        self.right = max(i for i in (p_right, c_right) if i is not None)
        self.size = self.right - self.left + 1
        self.circular = circular

        self.cut_ranges = CutRanges()
        self.tags: Dict[int, Any] = {}

        self.placeholder = DEFAULT_PLACEHOLDER
        self.blank = DEFAULT_BLANK

        self.logger = logging.getLogger("restrict.core.sequence_range")
        self._fragments: Optional[Fragments] = None

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(left={self.left}, right={self.right}, "
                f"cut_ranges={len(self.cut_ranges)}, circular={self.circular})")

    def _invalidate(self) -> None:
        self._fragments = None

    def _check_index(self, index: Optional[int], what: str = "index") -> None:
        if index is None:
            return
        if not self.left <= index <= self.right:
            raise IndexOutOfRangeError(
                f"{what} {index} outside [{self.left}, {self.right}]",
                {"index": index, "left": self.left, "right": self.right}
            )

    def add_cut_range(self, p_cut_left=None, p_cut_right: Optional[int] = None,
                      c_cut_left: Optional[int] = None, c_cut_right: Optional[int] = None) -> None:
        """Declare a cut, either as four raw indices or as a ready-made cut range

        Raw indices must lie inside the extent. A cut range object is taken
        as-is, since an enzyme may cut just before the first base.
        """
        self._invalidate()

        if is_cut_range(p_cut_left):
            self.cut_ranges.append(p_cut_left)
            return

        raw = (p_cut_left, p_cut_right, c_cut_left, c_cut_right)
        if all(i is None for i in raw):
            raise InvalidRangeError("A cut needs at least one index")
        for i in raw:
            self._check_index(i, "cut index")

        self.cut_ranges.append(VerticalCutRange(*raw))

    def add_cut_ranges(self, *cut_ranges) -> None:
        """Declare several cut ranges; nested lists are flattened"""
        for cut_range in _flatten(cut_ranges):
            if not is_cut_range(cut_range):
                raise CutRangeTypeError(f"Not of type CutRange: {type(cut_range).__name__}",
                                        {"value": repr(cut_range)})
            self.add_cut_range(cut_range)

    def add_horizontal_cut_range(self, left: int, right: Optional[int] = None) -> None:
        self._invalidate()
        self.cut_ranges.append(HorizontalCutRange(left, right))

    def add_tag(self, index: int, info: Any = None) -> None:
        """Attach an annotation to a cut-space index, e.g. the enzyme that cut there"""
        self._check_index(index, "tag index")
        self._invalidate()
        self.tags[index] = info

    def calculate_cuts(self) -> CalculatedCuts:
        """Reduced cuts, indexed like the declared cut ranges"""
        return self._relative_cuts().shifted(self.left)

    def _relative_cuts(self) -> CalculatedCuts:
        cc = CalculatedCuts(self.size, circular=self.circular)
        cc.add_cuts_from_cut_ranges(self.cut_ranges.shifted(-self.left))
        cc.remove_incomplete_cuts()
        return cc

    @property
    def fragments(self) -> Fragments:
        """Fragments after every declared cut, computed once per change"""
        if self._fragments is not None:
            return self._fragments

        cc = self._relative_cuts()
        p_cut = set(cc.vc_primary)
        c_cut = set(cc.vc_complement)
        h = set(cc.hc_between_strands)

        if self.circular:
            bins, walk = self._walk_circular(p_cut, c_cut, h)
        else:
            bins, walk = self._walk_linear(p_cut, c_cut, h)

        rank = {idx: position for position, idx in enumerate(walk)}
        fragments = Fragments(offset=self.left, size=self.size,
                              placeholder=self.placeholder, blank=self.blank)
        for group in bins.groups():
            members = set(group.primary) | set(group.complement)
            if self.circular:
                order = self._circular_order(members, rank)
            else:
                order = sorted(members, key=rank.get)
            position = {idx: n for n, idx in enumerate(order)}
            primary = [i + self.left for i in sorted(group.primary, key=position.get)]
            complement = [i + self.left for i in sorted(group.complement, key=position.get)]
            tags = {i: info for i, info in self.tags.items() if i in primary or i in complement}
            fragments.append(Fragment(primary, complement, tags=tags,
                                      order=[i + self.left for i in order]))

        self.logger.debug(f"{self!r} produced {len(fragments)} fragment(s)")
        self._fragments = fragments
        return fragments

    def _walk_linear(self, p_cut, c_cut, h):
        # The start of the molecule is a cut on both strands
        p_cut = p_cut | {-1}
        c_cut = c_cut | {-1}

        bins = StrandBins(start=SENTINEL_BIN)
        p_bin = c_bin = bins.open()
        walk = list(range(-1, self.size))

        for idx in walk:
            p_bin, c_bin = self._step(bins, idx, p_bin, c_bin, p_cut, c_cut, h)

        return bins, walk

    def _walk_circular(self, p_cut, c_cut, h):
        n = self.size
        vcuts = p_cut | c_cut
        start = (min(vcuts) + 1) % n if vcuts else 0
        walk = [(start + j) % n for j in range(n)]

        bins = StrandBins()
        p_first = p_bin = bins.open()
        c_first = c_bin = bins.open()

        for idx in walk:
            p_bin, c_bin = self._step(bins, idx, p_bin, c_bin, p_cut, c_cut, h)

        # Close the circle on each strand that is not cut at the last index
        last = walk[-1]
        if last not in p_cut:
            bins.union(p_bin, p_first)
        if last not in c_cut:
            bins.union(c_bin, c_first)

        return bins, walk

    def _circular_order(self, members, rank) -> List[int]:
        """Indices of one circular fragment as they read along the molecule

        The fragment starts at a member whose predecessor on the circle is
        not a member. A fragment covering the whole circle keeps walk order.
        """
        n = self.size
        if len(members) == n:
            return sorted(members, key=rank.get)
        start = min((i for i in members if (i - 1) % n not in members), key=rank.get)
        around = ((start + j) % n for j in range(n))
        return [i for i in around if i in members]

    @staticmethod
    def _step(bins: StrandBins, idx: int, p_bin: int, c_bin: int, p_cut, c_cut, h):
        # Strands in different bins are still attached wherever no horizontal cut separates them
        if not bins.same(p_bin, c_bin) and idx not in h:
            p_bin = c_bin = bins.union(p_bin, c_bin)

        bins.add_primary(p_bin, idx)
        bins.add_complement(c_bin, idx)

        if idx in p_cut:
            p_bin = bins.open()
        if idx in c_cut:
            c_bin = bins.open()
        return p_bin, c_bin


def _flatten(items: Iterable) -> List:
    flat = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(_flatten(item))
        else:
            flat.append(item)
    return flat
