# restrict/analysis/enzyme_action.py
"""
Enzyme actions: where an enzyme binds on a sequence and where it cuts.

Finding recognition sites is left to the caller; an action is built from the
offset of a site plus the enzyme's cut locations relative to that site.
"""
from typing import Iterable, Optional, Sequence, Set, Tuple

from restrict.exceptions import IndexOutOfRangeError, InvalidRangeError
from restrict.models.cut_range import VerticalCutRange
from restrict.core.sequence_range import SequenceRange

CutLocationPair = Tuple[Optional[int], Optional[int]]


class EnzymeAction(SequenceRange):
    """Binding span of one enzyme occurrence together with its cut ranges"""

    @classmethod
    def at_offset(cls, offset: int, site_length: int,
                  cut_locations: Iterable[CutLocationPair]) -> 'EnzymeAction':
        """Build the action of an enzyme whose site starts at ``offset``

        Args:
            offset: Index of the first base of the recognition site
            site_length: Length of the site, including any padding around it
            cut_locations: (primary, complement) cut positions relative to the
                site, 0-based in cut space. Either member may be None for an
                enzyme that nicks only one strand.

        Returns:
            EnzymeAction spanning [offset, offset + site_length - 1]

        Raises:
            InvalidRangeError: On an empty site, a negative location, or a pair
                with neither location set
            IndexOutOfRangeError: If a location falls beyond the end of the site
        """
        if site_length < 1:
            raise InvalidRangeError(f"Site length must be positive, got {site_length}")

        action = cls(offset, offset + site_length - 1, offset, offset + site_length - 1)
        for pair in cut_locations:
            p, c = pair
            if p is None and c is None:
                raise InvalidRangeError("Cut location pair needs a primary or complement location")
            if (p is not None and p < 0) or (c is not None and c < 0):
                raise InvalidRangeError(f"Negative cut location in {pair}", {"pair": pair})
            if (p is not None and p >= site_length) or (c is not None and c >= site_length):
                raise IndexOutOfRangeError(
                    f"Cut location in {pair} outside a site of length {site_length}",
                    {"pair": pair, "site_length": site_length}
                )

            if c is None:
                action.add_cut_range(VerticalCutRange(offset + p))
            elif p is None:
                action.add_cut_range(VerticalCutRange(c_cut_right=offset + c))
            elif c >= p:
                action.add_cut_range(VerticalCutRange(offset + p, None, None, offset + c))
            else:
                action.add_cut_range(VerticalCutRange(None, offset + p, offset + c, None))
        return action

    def destroyed_by(self, cut_ranges: Iterable) -> bool:
        """True when any vertical cut range falls across this action's site

        An action survives a cut that lies wholly before or after its site,
        and a site sitting strictly between the two extremes of the cut.
        """
        for cut_range in cut_ranges:
            if not isinstance(cut_range, VerticalCutRange) or cut_range.is_empty():
                continue
            previous_cut_left = cut_range.min
            previous_cut_right = cut_range.max
            if (self.right <= previous_cut_left
                    or self.left > previous_cut_right
                    or (self.left > previous_cut_left and self.right <= previous_cut_right)):
                continue
            return True
        return False


def find_conflicts(actions: Sequence[EnzymeAction]) -> Set[int]:
    """Indices of actions whose site is destroyed by, or destroys, another action

    Args:
        actions: Enzyme actions on the same sequence

    Returns:
        Set of positions in ``actions`` taking part in at least one conflict
    """
    conflicting: Set[int] = set()
    for i, action in enumerate(actions):
        for key, other in enumerate(actions):
            if i == key:
                continue
            if action.destroyed_by(other.cut_ranges):
                conflicting.update((i, key))
    return conflicting
