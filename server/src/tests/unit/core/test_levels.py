"""
Unit tests for level derivation from experience.

Pure unit tests - no database, just math.
"""

import math

import pytest

from server.src.core.levels import (
    MAX_EXPERIENCE,
    MIN_EXPERIENCE,
    derive_level_fields,
    experience_to_next_level,
    level_for_experience,
)


class TestLevelFormula:
    """Test the level and until-next-level calculations."""

    def test_known_values(self, experience_samples):
        """Experience samples map to the expected (level, until_next_level)."""
        for experience, expected in experience_samples.items():
            assert derive_level_fields(experience) == expected, experience

    def test_zero_experience(self):
        """A fresh player is level 0 and needs 100 XP for level 1."""
        assert level_for_experience(0) == 0
        assert experience_to_next_level(0, 0) == 100

    def test_level_thresholds(self):
        """Level L is reached at exactly 50 * L * (L + 1) experience."""
        level = 1
        while 50 * level * (level + 1) <= MAX_EXPERIENCE:
            threshold = 50 * level * (level + 1)
            assert level_for_experience(threshold) == level
            assert level_for_experience(threshold - 1) == level - 1
            level += 1

    def test_matches_truncating_float_formula(self):
        """Integer square root gives the same result as the float formula."""
        for experience in range(MIN_EXPERIENCE, MAX_EXPERIENCE + 1, 9973):
            expected = int(math.sqrt(2500 + 200 * experience) - 50) // 100
            assert level_for_experience(experience) == expected

    def test_level_is_monotonic(self):
        """Level never decreases as experience grows."""
        previous = level_for_experience(MIN_EXPERIENCE)
        for experience in range(MIN_EXPERIENCE, MAX_EXPERIENCE + 1, 4999):
            current = level_for_experience(experience)
            assert current >= previous
            previous = current

    @pytest.mark.parametrize(
        "experience", [0, 1, 99, 100, 101, 5000, 123_456, 9_999_999, MAX_EXPERIENCE]
    )
    def test_until_next_level_is_positive(self, experience):
        """Remaining experience is never negative for a consistent level."""
        level, until_next_level = derive_level_fields(experience)
        assert until_next_level >= 0
        # One more level's worth would be exactly the next threshold
        assert experience + until_next_level == 50 * (level + 1) * (level + 2)

    def test_max_experience(self):
        """The top of the experience range stays within 32-bit magnitudes."""
        level, until_next_level = derive_level_fields(MAX_EXPERIENCE)
        assert level == 446
        assert until_next_level == 12_800
        assert 2500 + 200 * MAX_EXPERIENCE < 2**31
