"""Cut reduction and fragment assembly"""
from .calculated_cuts import CalculatedCuts
from .sequence_range import SequenceRange
from .bins import StrandBins

__all__ = ['CalculatedCuts', 'SequenceRange', 'StrandBins']
