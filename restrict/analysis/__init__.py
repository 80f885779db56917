"""Enzyme actions and digests"""
from .enzyme_action import EnzymeAction, find_conflicts
from .digest import Digest, digest

__all__ = ['EnzymeAction', 'find_conflicts', 'Digest', 'digest']
