"""
Shared pytest fixtures for the Shirecoin test suite.
"""

import logging
import os

import pytest

from shirecoin_core.units import Unit, available_units


@pytest.fixture(params=available_units(), ids=lambda u: u.name)
def unit(request):
    """Each valid display unit in turn."""
    return request.param


@pytest.fixture
def shire():
    return Unit.SHIRE


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without any SHIRECOIN_* overrides."""
    for key in list(os.environ):
        if key.startswith("SHIRECOIN_"):
            monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after the test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
