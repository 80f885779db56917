# restrict/core/calculated_cuts.py
"""
Reduction of declared cut ranges to the cuts that actually sever a molecule.

Three index sets are kept, each sorted and free of duplicates:

    vc_primary           backbone cuts on the primary strand
    vc_complement        backbone cuts on the complementary strand
    hc_between_strands   indices where the two strands are separated

remove_incomplete_cuts() discards horizontal runs that are not closed off by
vertical cuts at both ends, then any vertical cut left without a horizontal
run next to it or a matching cut on the opposite strand.
"""
import logging
from typing import Callable, Iterable, List, Optional, Set

from restrict.exceptions import CutRangeTypeError, IndexOutOfRangeError, MissingSizeError
from restrict.models.cut_range import VerticalCutRange, HorizontalCutRange

logger = logging.getLogger("restrict.core.calculated_cuts")


class CalculatedCuts:
    """Canonical cut sets for one molecule"""

    def __init__(self, size: Optional[int] = None, circular: bool = False):
        self.size = size
        self.circular = circular
        self._vc_primary: Set[int] = set()
        self._vc_complement: Set[int] = set()
        self._hc_between_strands: Set[int] = set()

    @property
    def vc_primary(self) -> List[int]:
        return sorted(self._vc_primary)

    @property
    def vc_complement(self) -> List[int]:
        return sorted(self._vc_complement)

    @property
    def hc_between_strands(self) -> List[int]:
        return sorted(self._hc_between_strands)

    def add_cuts_from_cut_ranges(self, cut_ranges: Iterable) -> None:
        """Accumulate the corner and in-between indices of each cut range

        Args:
            cut_ranges: VerticalCutRange / HorizontalCutRange instances

        Raises:
            CutRangeTypeError: If a member is neither kind of cut range
        """
        for cut_range in cut_ranges:
            if isinstance(cut_range, VerticalCutRange):
                self._vc_primary.update(cut_range.primary_cuts)
                self._vc_complement.update(cut_range.complement_cuts)
                # An ambiguous span keeps the strands apart between its extremes
                if not cut_range.is_empty() and cut_range.min < cut_range.max:
                    self._hc_between_strands.update(range(cut_range.min + 1, cut_range.max + 1))
            elif isinstance(cut_range, HorizontalCutRange):
                self._hc_between_strands.update(cut_range.hcuts)
            else:
                raise CutRangeTypeError(
                    f"Expected VerticalCutRange or HorizontalCutRange, got {type(cut_range).__name__}",
                    {"value": repr(cut_range)}
                )

        logger.debug(f"Raw cuts: primary={self.vc_primary} complement={self.vc_complement} "
                     f"between={self.hc_between_strands}")

    def remove_incomplete_cuts(self, size: Optional[int] = None) -> None:
        """Drop every cut that does not take part in severing the molecule

        Args:
            size: Sequence length; overrides the size given at construction

        Raises:
            MissingSizeError: If no size is known for a linear molecule
            IndexOutOfRangeError: If a horizontal cut lies outside [-1, size-1]
        """
        if size is not None:
            self.size = size
        if self.size is None and not self.circular:
            raise MissingSizeError("Size of the strand must be provided here or during initialization")

        if self.circular:
            good_hcuts = self._circular_good_hcuts()
            n = self.size
            next_index = (lambda i: (i + 1) % n) if n else (lambda i: i + 1)
        else:
            good_hcuts = self._linear_good_hcuts()
            next_index = lambda i: i + 1

        def check_vc(vertical_cuts: Set[int], opposing_vcuts: Set[int]) -> Set[int]:
            return {vc for vc in vertical_cuts
                    if vc in good_hcuts or next_index(vc) in good_hcuts or vc in opposing_vcuts}

        # The complementary strand is checked against the already filtered primary set
        self._vc_primary = check_vc(self._vc_primary, self._vc_complement)
        self._vc_complement = check_vc(self._vc_complement, self._vc_primary)
        self._hc_between_strands = good_hcuts

        logger.debug(f"Reduced cuts: primary={self.vc_primary} complement={self.vc_complement} "
                     f"between={self.hc_between_strands}")

    def shifted(self, offset: int) -> 'CalculatedCuts':
        """Copy with every index translated by ``offset``"""
        moved = CalculatedCuts(self.size, circular=self.circular)
        moved._vc_primary = {i + offset for i in self._vc_primary}
        moved._vc_complement = {i + offset for i in self._vc_complement}
        moved._hc_between_strands = {i + offset for i in self._hc_between_strands}
        return moved

    def _check_hcut_bounds(self) -> None:
        last_index = self.size - 1
        for hcut in self._hc_between_strands:
            if hcut < -1 or hcut > last_index:
                raise IndexOutOfRangeError(
                    f"Horizontal cut {hcut} outside [-1, {last_index}]",
                    {"index": hcut, "size": self.size}
                )

    def _linear_good_hcuts(self) -> Set[int]:
        self._check_hcut_bounds()
        # The two ends of a linear molecule always count as severed
        vcuts = self._vc_primary | self._vc_complement | {-1, self.size - 1}
        return _anchored_runs(sorted(self._hc_between_strands), vcuts,
                              previous=lambda i: i - 1,
                              adjacent=lambda a, b: abs(b - a) <= 1)

    def _circular_good_hcuts(self) -> Set[int]:
        n = self.size
        if n is None:
            vcuts = self._vc_primary | self._vc_complement
            return _anchored_runs(sorted(self._hc_between_strands), vcuts,
                                  previous=lambda i: i - 1,
                                  adjacent=lambda a, b: abs(b - a) <= 1)

        self._check_hcut_bounds()
        for name in ('_vc_primary', '_vc_complement', '_hc_between_strands'):
            setattr(self, name, {i % n for i in getattr(self, name)})

        hcuts = self._hc_between_strands
        vcuts = self._vc_primary | self._vc_complement
        if not hcuts:
            return set()
        if len(hcuts) == n:
            # Strands separated all the way round: only real if something cuts a backbone
            return set(hcuts) if vcuts else set()

        # Start the scan just after an index with no horizontal cut so that no
        # run is split by the origin
        start = next(i for i in range(n) if i not in hcuts)
        ordered = [(start + 1 + j) % n for j in range(n)]
        return _anchored_runs([i for i in ordered if i in hcuts], vcuts,
                              previous=lambda i: (i - 1) % n,
                              adjacent=lambda a, b: (b - a) % n == 1)


def _anchored_runs(hcuts: List[int], vcuts: Set[int],
                   previous: Callable[[int], int],
                   adjacent: Callable[[int, int], bool]) -> Set[int]:
    """Keep the runs of horizontal cuts bounded by vertical cuts on both sides

    A run starts at an index whose predecessor is a vertical cut and is kept
    once it reaches an index that is itself a vertical cut. A gap abandons the
    pending run.
    """
    good_hcuts: Set[int] = set()
    potential_hcuts: List[int] = []

    for hcut in hcuts:
        if potential_hcuts and not adjacent(potential_hcuts[-1], hcut):
            potential_hcuts.clear()

        if not potential_hcuts:
            if hcut in vcuts and previous(hcut) in vcuts:
                good_hcuts.add(hcut)
            elif previous(hcut) in vcuts:
                potential_hcuts.append(hcut)
        elif hcut in vcuts:
            good_hcuts.update(potential_hcuts)
            good_hcuts.add(hcut)
            potential_hcuts.clear()
        else:
            potential_hcuts.append(hcut)

    return good_hcuts
