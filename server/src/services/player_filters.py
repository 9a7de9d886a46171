"""
Filter builder for player listing and counting.

Every builder takes optional inputs and returns a SQLAlchemy boolean
expression. An absent input yields `true()`, the identity for AND, so the
fragments can always be combined with `and_` regardless of which inputs
were supplied. None of the builders raise.
"""

from typing import Any, Optional

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement

from ..core.timestamps import from_epoch_millis
from ..models.player import Player
from ..schemas.player import PlayerFilterParams, Profession, Race


def _between(column: Any, low: Optional[Any], high: Optional[Any]) -> ColumnElement[bool]:
    """Inclusive range over a column; either bound may be missing."""
    if low is None and high is None:
        return true()
    if low is None:
        return column <= high
    if high is None:
        return column >= low
    return column.between(low, high)


def by_name(name: Optional[str]) -> ColumnElement[bool]:
    if name is None:
        return true()
    return Player.name.contains(name, autoescape=True)


def by_title(title: Optional[str]) -> ColumnElement[bool]:
    if title is None:
        return true()
    return Player.title.contains(title, autoescape=True)


def by_race(race: Optional[Race]) -> ColumnElement[bool]:
    if race is None:
        return true()
    return Player.race == race


def by_profession(profession: Optional[Profession]) -> ColumnElement[bool]:
    if profession is None:
        return true()
    return Player.profession == profession


def by_experience(min_experience: Optional[int], max_experience: Optional[int]) -> ColumnElement[bool]:
    return _between(Player.experience, min_experience, max_experience)


def by_level(min_level: Optional[int], max_level: Optional[int]) -> ColumnElement[bool]:
    return _between(Player.level, min_level, max_level)


def by_birthday(after: Optional[int], before: Optional[int]) -> ColumnElement[bool]:
    """
    Inclusive birthday range.

    Args:
        after: Lower bound as epoch milliseconds
        before: Upper bound as epoch milliseconds
    """
    return _between(
        Player.birthday,
        from_epoch_millis(after) if after is not None else None,
        from_epoch_millis(before) if before is not None else None,
    )


def by_banned(banned: Optional[bool]) -> ColumnElement[bool]:
    if banned is None:
        return true()
    return Player.banned == banned


def build_player_filter(params: Optional[PlayerFilterParams] = None) -> ColumnElement[bool]:
    """
    Combine every filter fragment into one predicate with AND.

    Args:
        params: Filter inputs; None means no filtering at all

    Returns:
        A predicate usable in `select(...).where(...)`
    """
    if params is None:
        return true()
    return and_(
        by_name(params.name),
        by_title(params.title),
        by_race(params.race),
        by_profession(params.profession),
        by_birthday(params.after, params.before),
        by_banned(params.banned),
        by_experience(params.min_experience, params.max_experience),
        by_level(params.min_level, params.max_level),
    )
