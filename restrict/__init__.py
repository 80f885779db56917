#!/usr/bin/env python3
"""
pyrestrict

Restriction enzyme cut reduction and fragment assembly for double-stranded
nucleic acids.
"""

__version__ = '0.1.0'
__author__ = 'pyrestrict Team'
__license__ = 'MIT'

from .exceptions import RestrictError
from .error_handlers import handle_exceptions
from .models import VerticalCutRange, HorizontalCutRange, CutRanges, Fragment, Fragments
from .core import CalculatedCuts, SequenceRange

__all__ = [
    'RestrictError', 'handle_exceptions',
    'VerticalCutRange', 'HorizontalCutRange', 'CutRanges', 'Fragment', 'Fragments',
    'CalculatedCuts', 'SequenceRange',
]
