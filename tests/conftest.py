"""Shared pytest fixtures for optionenum tests."""

import pytest

from optionenum import Enumeration


@pytest.fixture
def colors() -> Enumeration:
    """Return a two-entry enumeration with explicit keys and values."""
    return Enumeration(
        [
            {"key": "RED", "value": 1, "text": "Red"},
            {"key": "BLUE", "value": 2, "text": "Blue"},
        ]
    )


@pytest.fixture
def statuses() -> Enumeration:
    """Return an enumeration with a reserved unknown entry."""
    return Enumeration(
        [
            {"key": "UNKNOWN", "value": 0, "text": "Unknown"},
            {"key": "OK", "value": 1, "text": "OK"},
            {"key": "FAILED", "value": 2, "text": "Failed", "disabled": True},
        ]
    )
