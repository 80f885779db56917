#!/usr/bin/env python3
"""
pyrestrict models: cut ranges and fragments
"""
from .cut_range import VerticalCutRange, HorizontalCutRange, CutRange, is_cut_range
from .cut_ranges import CutRanges
from .fragment import Fragment, Fragments, DisplayFragment, DisplayFragments

__all__ = [
    'VerticalCutRange', 'HorizontalCutRange', 'CutRange', 'is_cut_range',
    'CutRanges',
    'Fragment', 'Fragments', 'DisplayFragment', 'DisplayFragments',
]
