#!/usr/bin/env python3
"""
Cut patterns shared across tests

The six-base patterns index the cut space -1..5 of a molecule whose bases
are numbered 0..5.
"""
from restrict.core.sequence_range import SequenceRange
from restrict.models.cut_range import VerticalCutRange as VCR
from restrict.models.cut_range import HorizontalCutRange as HCR


CUT_PATTERNS = {
    'staggered_overhang': [VCR(0, None, None, 3), VCR(None, 2, None, None)],
    'two_staggered': [VCR(0, 2, None, None), VCR(3, None, 4, None)],
    'two_staggered_with_gaps': [VCR(0, 2, None, None), VCR(3, None, 4, None), HCR(0), HCR(5)],
    'both_strands_ambiguous': [VCR(0, 2, 1, 3)],
    'split_corners': [VCR(None, None, 1, 3), VCR(0, 2, None, None)],
    'mixed_corners': [VCR(0, None, None, 3), VCR(None, 2, 1, None)],
    'dangling_primary_nick': [VCR(0, None, None, None), VCR(None, 4, 3, None), HCR(1, 2)],
    'dangling_complement_nick': [VCR(None, None, 0, None), HCR(1, 2), VCR(None, 4, 3, None)],
    'gap_to_start': [VCR(None, 2, None, None), HCR(0, 2)],
    'blunt': [VCR(None, 3, None, 3)],
    'shared_index': [VCR(0, None, None, 3), VCR(None, 2, None, 2)],
}

UNANCHORED_TWELVE = [HCR(0, 1), VCR(None, None, None, 5), HCR(7, 8), HCR(10), VCR(None, 10, None, None)]


def build_range(cut_ranges, size=6, circular=False):
    """Range over bases 0..size-1 carrying the given cut ranges"""
    sequence_range = SequenceRange(0, size - 1, 0, size - 1, circular=circular)
    sequence_range.add_cut_ranges(list(cut_ranges))
    return sequence_range


def display_pairs(sequence_range):
    """(primary, complement) display text of every fragment, in order"""
    return [(df.primary, df.complement) for df in sequence_range.fragments.for_display()]
