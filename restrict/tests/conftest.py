#!/usr/bin/env python3
"""
Shared fixtures for the pyrestrict test suite
"""
import os
import logging

import pytest

from restrict.core.sequence_range import SequenceRange
from restrict.tests.helpers import CUT_PATTERNS, build_range


@pytest.fixture
def six_base_range():
    """Linear range covering bases 0..5 with no cuts"""
    return SequenceRange(0, 5, 0, 5)


@pytest.fixture
def pattern_range():
    """Factory: six-base range carrying one of CUT_PATTERNS"""
    def _build(name, circular=False):
        return build_range(CUT_PATTERNS[name], circular=circular)
    return _build


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep RESTRICT_* variables and CLI logging handlers from leaking between tests"""
    for key in list(os.environ):
        if key.startswith("RESTRICT_"):
            monkeypatch.delenv(key, raising=False)

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    # Only the plain handlers LoggingManager installs; pytest manages its own
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
