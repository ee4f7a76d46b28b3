"""Shared fixtures for review scraper tests.

No browser is needed: tests run against the fakes in fakes.py.
"""

import pytest

from fakes import FakeDriver, PauseRecorder


@pytest.fixture
def pause():
    """Recording replacement for random_delay."""
    return PauseRecorder()


@pytest.fixture
def fake_driver():
    return FakeDriver()
