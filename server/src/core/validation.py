"""
Field validation rules for player records.

Each check is independent and raises InvalidInputError on violation. The
same checks back both creation (every field required) and partial updates
(only supplied fields checked).
"""

from datetime import datetime
from typing import Any, Optional

from .exceptions import InvalidInputError
from .levels import MAX_EXPERIENCE, MIN_EXPERIENCE
from ..schemas.player import Profession, Race

MAX_NAME_LENGTH = 12
MAX_TITLE_LENGTH = 30

# Birthday year bounds, both exclusive
MIN_BIRTHDAY_YEAR = 2000
MAX_BIRTHDAY_YEAR = 3000


def _reject(field: str, value: Any) -> None:
    raise InvalidInputError(details={"field": field, "value": repr(value)})


def validate_id(player_id: Optional[int]) -> None:
    if player_id is None or player_id <= 0:
        _reject("id", player_id)


def validate_name(name: Optional[str]) -> None:
    if not name or len(name) > MAX_NAME_LENGTH:
        _reject("name", name)


def validate_title(title: Optional[str]) -> None:
    if not title or len(title) > MAX_TITLE_LENGTH:
        _reject("title", title)


def validate_race(race: Optional[Race]) -> None:
    if not isinstance(race, Race):
        _reject("race", race)


def validate_profession(profession: Optional[Profession]) -> None:
    if not isinstance(profession, Profession):
        _reject("profession", profession)


def validate_experience(experience: Optional[int]) -> None:
    if experience is None or not MIN_EXPERIENCE <= experience <= MAX_EXPERIENCE:
        _reject("experience", experience)


def validate_birthday(birthday: Optional[datetime]) -> None:
    if birthday is None or not MIN_BIRTHDAY_YEAR < birthday.year < MAX_BIRTHDAY_YEAR:
        _reject("birthday", birthday)


# Field name -> rule, in the order fields are checked on creation
FIELD_VALIDATORS = {
    "name": validate_name,
    "title": validate_title,
    "race": validate_race,
    "profession": validate_profession,
    "experience": validate_experience,
    "birthday": validate_birthday,
}
