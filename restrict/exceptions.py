#!/usr/bin/env python3
"""
Exception hierarchy for pyrestrict.
All custom exceptions should inherit from RestrictError.
"""
from typing import Dict, Any, Optional


class RestrictError(Exception):
    """Base exception for all pyrestrict errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize with error message and optional details

        Args:
            message: Error message
            details: Optional details dictionary with context
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(RestrictError):
    """Error related to configuration issues"""
    pass


class ValidationError(RestrictError):
    """Invalid input supplied by the caller"""
    pass


class InvalidRangeError(ValidationError, ValueError):
    """A range was declared with left > right, or without usable bounds"""
    pass


class MissingSizeError(ValidationError, ValueError):
    """Sequence length required but never supplied"""
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """An index falls outside the extent it is declared against"""
    pass


class CutRangeTypeError(ValidationError, TypeError):
    """Something other than a cut range was supplied where one is required"""
    pass


class DigestError(RestrictError):
    """Error while digesting a sequence with a set of enzyme actions"""
    pass
