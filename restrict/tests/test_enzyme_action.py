#!/usr/bin/env python3
"""
Tests for enzyme actions and conflict detection between them
"""
import pytest

from restrict.analysis.enzyme_action import EnzymeAction, find_conflicts
from restrict.core.sequence_range import SequenceRange
from restrict.exceptions import IndexOutOfRangeError, InvalidRangeError
from restrict.models.cut_range import VerticalCutRange as VCR
from restrict.models.cut_range import HorizontalCutRange as HCR


@pytest.mark.unit
class TestAtOffset:
    """Building actions from site offsets and cut locations"""

    def test_is_a_sequence_range(self):
        action = EnzymeAction.at_offset(3, 6, [(0, 4)])
        assert isinstance(action, SequenceRange)
        assert (action.left, action.right) == (3, 8)

    def test_complement_after_primary(self):
        action = EnzymeAction.at_offset(0, 6, [(0, 4)])
        assert action.cut_ranges == [VCR(0, None, None, 4)]

    def test_complement_before_primary(self):
        action = EnzymeAction.at_offset(10, 6, [(4, 0)])
        assert action.cut_ranges == [VCR(None, 14, 10, None)]

    def test_blunt(self):
        action = EnzymeAction.at_offset(2, 4, [(1, 1)])
        assert action.cut_ranges == [VCR(3, None, None, 3)]

    def test_multiple_pairs(self):
        action = EnzymeAction.at_offset(0, 10, [(1, 1), (7, 5)])
        assert action.cut_ranges == [VCR(1, None, None, 1), VCR(None, 7, 5, None)]

    def test_single_strand_locations(self):
        action = EnzymeAction.at_offset(5, 4, [(2, None), (None, 1)])
        assert action.cut_ranges == [VCR(7), VCR(None, None, None, 6)]

    def test_invalid_locations(self):
        with pytest.raises(InvalidRangeError):
            EnzymeAction.at_offset(0, 4, [(None, None)])
        with pytest.raises(InvalidRangeError):
            EnzymeAction.at_offset(0, 4, [(-1, 2)])
        with pytest.raises(InvalidRangeError):
            EnzymeAction.at_offset(0, 0, [(0, 0)])

    @pytest.mark.parametrize("pair", [(10, 12), (4, 1), (None, 4), (3, 4)])
    def test_location_beyond_site(self, pair):
        with pytest.raises(IndexOutOfRangeError) as excinfo:
            EnzymeAction.at_offset(0, 4, [pair])
        assert excinfo.value.details["site_length"] == 4

    def test_last_base_of_site_is_a_valid_location(self):
        action = EnzymeAction.at_offset(0, 4, [(3, 3)])
        assert action.cut_ranges == [VCR(3, None, None, 3)]

    def test_fragments_of_the_site_itself(self):
        action = EnzymeAction.at_offset(0, 6, [(0, 4)])
        fragments = action.fragments
        fragments.primary_strand = 'gaattc'
        fragments.complement_strand = 'cttaag'
        assert fragments.primary == ['aattc', 'g']


@pytest.mark.unit
class TestDestroyedBy:
    """Whether another cut falls across a site"""

    @pytest.fixture
    def action(self):
        # binds 2..5
        return EnzymeAction.at_offset(2, 4, [(1, 3)])

    def test_cut_before_site(self, action):
        assert not action.destroyed_by([VCR(0, None, None, 1)])

    def test_cut_after_site(self, action):
        assert not action.destroyed_by([VCR(5, None, None, 7)])

    def test_cut_touching_site_end(self, action):
        # right end of the site equals the cut's left extreme
        assert not action.destroyed_by([VCR(5)])

    def test_site_between_cuts(self, action):
        assert not action.destroyed_by([VCR(1, None, None, 5)])

    def test_cut_inside_site(self, action):
        assert action.destroyed_by([VCR(3, None, None, 4)])

    def test_cut_across_site_start(self, action):
        assert action.destroyed_by([VCR(1, None, None, 3)])

    def test_horizontal_and_empty_ranges_ignored(self, action):
        assert not action.destroyed_by([HCR(2, 5), VCR()])


@pytest.mark.unit
class TestFindConflicts:
    """Conflicts across a set of actions"""

    def test_overlapping_sites(self):
        first = EnzymeAction.at_offset(0, 4, [(1, 3)])
        second = EnzymeAction.at_offset(2, 4, [(1, 3)])
        assert find_conflicts([first, second]) == {0, 1}

    def test_separate_sites(self):
        first = EnzymeAction.at_offset(0, 6, [(0, 4)])
        second = EnzymeAction.at_offset(6, 6, [(0, 4)])
        assert find_conflicts([first, second]) == set()

    def test_only_involved_actions_reported(self):
        first = EnzymeAction.at_offset(0, 4, [(1, 3)])
        second = EnzymeAction.at_offset(2, 4, [(1, 3)])
        far = EnzymeAction.at_offset(20, 4, [(1, 3)])
        assert find_conflicts([first, far, second]) == {0, 2}

    def test_single_action(self):
        assert find_conflicts([EnzymeAction.at_offset(0, 4, [(1, 3)])]) == set()
