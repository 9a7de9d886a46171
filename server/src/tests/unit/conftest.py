"""
Test fixtures for unit tests.

Fast fixtures that don't require database access.
"""

import pytest


@pytest.fixture
def experience_samples():
    """Experience values around the first few level thresholds."""
    return {
        0: (0, 100),
        99: (0, 1),
        100: (1, 200),
        299: (1, 1),
        300: (2, 300),
        600: (3, 400),
        10_000_000: (446, 12_800),
    }
