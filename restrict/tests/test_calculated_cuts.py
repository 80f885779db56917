#!/usr/bin/env python3
"""
Tests for CalculatedCuts: accumulation of raw cuts and removal of incomplete ones
"""
import pytest

from restrict.core.calculated_cuts import CalculatedCuts
from restrict.exceptions import CutRangeTypeError, IndexOutOfRangeError, MissingSizeError
from restrict.models.cut_range import VerticalCutRange as VCR
from restrict.models.cut_range import HorizontalCutRange as HCR
from restrict.tests.helpers import CUT_PATTERNS, UNANCHORED_TWELVE


def raw_cuts(cut_ranges, size=6, circular=False):
    cc = CalculatedCuts(size, circular=circular)
    cc.add_cuts_from_cut_ranges(cut_ranges)
    return cc


def reduced_cuts(cut_ranges, size=6, circular=False):
    cc = raw_cuts(cut_ranges, size, circular)
    cc.remove_incomplete_cuts()
    return cc


def as_tuple(cc):
    return cc.vc_primary, cc.vc_complement, cc.hc_between_strands


# name -> (raw, reduced), each as (vc_primary, vc_complement, hc_between_strands)
EXPECTED = {
    'staggered_overhang': (([0, 2], [3], [1, 2, 3]), ([0, 2], [3], [1, 2, 3])),
    'two_staggered': (([0, 2, 3], [4], [1, 2, 4]), ([0, 2, 3], [4], [1, 2, 4])),
    'two_staggered_with_gaps': (([0, 2, 3], [4], [0, 1, 2, 4, 5]), ([0, 2, 3], [4], [0, 1, 2, 4, 5])),
    'both_strands_ambiguous': (([0, 2], [1, 3], [1, 2, 3]), ([0, 2], [1, 3], [1, 2, 3])),
    'split_corners': (([0, 2], [1, 3], [1, 2, 3]), ([0, 2], [1, 3], [1, 2, 3])),
    'mixed_corners': (([0, 2], [1, 3], [1, 2, 3]), ([0, 2], [1, 3], [1, 2, 3])),
    'dangling_primary_nick': (([0, 4], [3], [1, 2, 4]), ([4], [3], [4])),
    'dangling_complement_nick': (([4], [0, 3], [1, 2, 4]), ([4], [3], [4])),
    'gap_to_start': (([2], [], [0, 1, 2]), ([2], [], [0, 1, 2])),
    'blunt': (([3], [3], []), ([3], [3], [])),
    'shared_index': (([0, 2], [2, 3], [1, 2, 3]), ([0, 2], [2, 3], [1, 2, 3])),
}


@pytest.mark.unit
class TestAddCutsFromCutRanges:
    """Raw accumulation"""

    @pytest.mark.parametrize("name", sorted(EXPECTED))
    def test_raw_cut_sets(self, name):
        raw, _ = EXPECTED[name]
        assert as_tuple(raw_cuts(CUT_PATTERNS[name])) == raw

    def test_insertion_order_does_not_matter(self):
        forward = raw_cuts(CUT_PATTERNS['two_staggered_with_gaps'])
        backward = raw_cuts(list(reversed(CUT_PATTERNS['two_staggered_with_gaps'])))
        assert as_tuple(forward) == as_tuple(backward)

    def test_duplicates_collapse(self):
        cc = raw_cuts([VCR(1, None, None, 1), VCR(1, None, None, 1), HCR(2), HCR(2, 3)])
        assert as_tuple(cc) == ([1], [1], [2, 3])

    def test_accumulates_over_calls(self):
        cc = CalculatedCuts(6)
        cc.add_cuts_from_cut_ranges([VCR(1)])
        cc.add_cuts_from_cut_ranges([VCR(None, None, None, 3)])
        assert cc.vc_primary == [1]
        assert cc.vc_complement == [3]

    def test_empty_vertical_range_contributes_nothing(self):
        assert as_tuple(raw_cuts([VCR()])) == ([], [], [])

    def test_rejects_non_cut_range(self):
        cc = CalculatedCuts(6)
        with pytest.raises(CutRangeTypeError):
            cc.add_cuts_from_cut_ranges([(0, None, None, 3)])


@pytest.mark.unit
class TestRemoveIncompleteCuts:
    """Linear reduction"""

    @pytest.mark.parametrize("name", sorted(EXPECTED))
    def test_reduced_cut_sets(self, name):
        _, reduced = EXPECTED[name]
        assert as_tuple(reduced_cuts(CUT_PATTERNS[name])) == reduced

    def test_twelve_base_unanchored_runs_vanish(self):
        raw = raw_cuts(UNANCHORED_TWELVE, size=12)
        assert as_tuple(raw) == ([10], [5], [0, 1, 7, 8, 10])
        raw.remove_incomplete_cuts()
        assert as_tuple(raw) == ([], [], [])

    @pytest.mark.parametrize("name", sorted(EXPECTED))
    def test_idempotent(self, name):
        cc = reduced_cuts(CUT_PATTERNS[name])
        once = as_tuple(cc)
        cc.remove_incomplete_cuts()
        assert as_tuple(cc) == once

    def test_size_given_at_call(self):
        cc = CalculatedCuts()
        cc.add_cuts_from_cut_ranges(CUT_PATTERNS['blunt'])
        cc.remove_incomplete_cuts(6)
        assert cc.size == 6
        assert as_tuple(cc) == ([3], [3], [])

    def test_missing_size_raises(self):
        cc = CalculatedCuts()
        cc.add_cuts_from_cut_ranges(CUT_PATTERNS['blunt'])
        with pytest.raises(MissingSizeError):
            cc.remove_incomplete_cuts()
        with pytest.raises(ValueError):
            cc.remove_incomplete_cuts()

    def test_horizontal_cut_past_end_raises(self):
        cc = raw_cuts([HCR(6)])
        with pytest.raises(IndexOutOfRangeError):
            cc.remove_incomplete_cuts()

    def test_horizontal_cut_before_start_raises(self):
        cc = raw_cuts([HCR(-2, 0)])
        with pytest.raises(IndexError):
            cc.remove_incomplete_cuts()

    def test_lone_horizontal_cut_at_start_boundary_is_dropped(self):
        # -1 is always a severance point, but nothing lies before it to anchor a run
        assert as_tuple(reduced_cuts([HCR(-1)])) == ([], [], [])

    def test_horizontal_run_from_start_boundary(self):
        assert as_tuple(reduced_cuts([HCR(-1, 0), VCR(0)])) == ([0], [], [0])

    def test_horizontal_run_to_end_boundary(self):
        # The far end of a linear molecule closes the run
        assert as_tuple(reduced_cuts([VCR(3), HCR(4, 5)])) == ([3], [], [4, 5])

    def test_single_strand_nick_is_removed(self):
        assert as_tuple(reduced_cuts([VCR(2)])) == ([], [], [])

    def test_blunt_cuts_need_no_horizontal_cut(self):
        cc = reduced_cuts([VCR(0, None, 0, None), VCR(3, None, None, 3)])
        assert as_tuple(cc) == ([0, 3], [0, 3], [])

    def test_shifted(self):
        cc = reduced_cuts(CUT_PATTERNS['staggered_overhang']).shifted(10)
        assert as_tuple(cc) == ([10, 12], [13], [11, 12, 13])


@pytest.mark.unit
class TestCircularCuts:
    """Reduction on a circular molecule"""

    def test_run_wrapping_past_origin_is_anchored(self):
        cc = reduced_cuts([VCR(4), VCR(None, None, None, 1), HCR(5), HCR(0, 1)], circular=True)
        assert as_tuple(cc) == ([4], [1], [0, 1, 5])

    def test_no_synthetic_ends(self):
        # on a linear molecule the end closes this run, on a circle nothing does
        linear = reduced_cuts([VCR(3), HCR(4, 5)])
        circular = reduced_cuts([VCR(3), HCR(4, 5)], circular=True)
        assert linear.hc_between_strands == [4, 5]
        assert as_tuple(circular) == ([], [], [])

    def test_unanchored_gap(self):
        assert as_tuple(reduced_cuts([HCR(2)], circular=True)) == ([], [], [])

    def test_full_circle_gap_needs_a_backbone_cut(self):
        assert as_tuple(reduced_cuts([HCR(0, 5)], circular=True)) == ([], [], [])
        cc = reduced_cuts([HCR(0, 5), VCR(2)], circular=True)
        assert as_tuple(cc) == ([2], [], [0, 1, 2, 3, 4, 5])

    def test_start_index_normalised(self):
        cc = reduced_cuts([VCR(-1, None, None, -1)], circular=True)
        assert as_tuple(cc) == ([5], [5], [])

    def test_blunt_cut(self):
        assert as_tuple(reduced_cuts(CUT_PATTERNS['blunt'], circular=True)) == ([3], [3], [])

    def test_unknown_size(self):
        cc = CalculatedCuts(circular=True)
        cc.add_cuts_from_cut_ranges([VCR(1, None, None, 3)])
        cc.remove_incomplete_cuts()
        assert as_tuple(cc) == ([1], [3], [2, 3])

    def test_out_of_range_horizontal_cut(self):
        cc = raw_cuts([HCR(6)], circular=True)
        with pytest.raises(IndexOutOfRangeError):
            cc.remove_incomplete_cuts()
