"""
Level derivation from experience.

A player's level and the experience still missing for the next level are
never stored independently of experience; they are recomputed from it with
the closed-form formulas below.

    level(xp)              = floor((sqrt(2500 + 200 * xp) - 50) / 100)
    until_next_level(xp, L) = 50 * (L + 1) * (L + 2) - xp
"""

from math import isqrt
from typing import Tuple

MIN_EXPERIENCE: int = 0
MAX_EXPERIENCE: int = 10_000_000


def level_for_experience(experience: int) -> int:
    """
    Calculate the level reached with the given experience.

    Uses the exact integer square root, so the result matches the
    truncating float formula for every experience in the valid range.

    Args:
        experience: Total experience (0..10,000,000)

    Returns:
        Level number (0 for a fresh player)
    """
    return (isqrt(2500 + 200 * experience) - 50) // 100


def experience_to_next_level(experience: int, level: int) -> int:
    """
    Calculate the experience still needed to reach the level after `level`.

    Args:
        experience: Total experience
        level: Current level, as returned by level_for_experience

    Returns:
        Remaining experience (always >= 0 when level is consistent with experience)
    """
    return 50 * (level + 1) * (level + 2) - experience


def derive_level_fields(experience: int) -> Tuple[int, int]:
    """Return (level, until_next_level) for the given experience."""
    level = level_for_experience(experience)
    return level, experience_to_next_level(experience, level)
