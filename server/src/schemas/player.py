"""
Pydantic models (schemas) for player data.
Used for API validation and serialization.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from ..core.timestamps import from_epoch_millis, to_epoch_millis, to_naive_utc


class Race(str, Enum):
    """
    Races a player character can belong to.
    """

    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, Enum):
    """
    Professions a player character can follow.
    """

    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class PlayerOrder(str, Enum):
    """
    Sort orders accepted by the player listing.
    """

    ID = "ID"
    NAME = "NAME"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"
    LEVEL = "LEVEL"

    @property
    def field_name(self) -> str:
        """Name of the Player attribute this order sorts by."""
        return self.value.lower()


class PlayerBase(BaseModel):
    """
    Base schema for client supplied player fields.

    Every field is optional here; which ones are required is decided by the
    player service so that missing fields produce the same error as invalid
    ones. Derived fields (level, untilNextLevel) and the identifier are not
    part of this schema and are ignored when sent.
    """

    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    experience: Optional[int] = None
    birthday: Optional[datetime] = None
    banned: Optional[bool] = None

    @field_validator("birthday", mode="before")
    @classmethod
    def parse_epoch_millis(cls, value: Any) -> Any:
        """
        Birthdays arrive as epoch milliseconds.

        Datetime objects are accepted from Python callers and stored as naive
        UTC. Strings, floats and booleans are rejected rather than guessed at.
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            return to_naive_utc(value)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return from_epoch_millis(value)
            except OverflowError:
                raise ValueError("birthday is out of range")
        raise ValueError("birthday must be epoch milliseconds")


class PlayerCreate(PlayerBase):
    """
    Schema for creating a new player.
    """


class PlayerUpdate(PlayerBase):
    """
    Schema for a partial player update. Absent or null fields keep their value.
    """


class PlayerPublic(BaseModel):
    """
    Schema for returning player data.
    """

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    experience: int
    level: int
    until_next_level: int
    birthday: datetime
    banned: bool

    @field_serializer("birthday")
    def serialize_birthday(self, value: datetime) -> int:
        return to_epoch_millis(value)


class PlayerFilterParams(BaseModel):
    """
    Optional filter inputs for listing and counting players.

    Every field left as None contributes no constraint.
    """

    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[int] = None
    before: Optional[int] = None
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None

    @field_validator("after", "before")
    @classmethod
    def check_epoch_millis(cls, value: Optional[int]) -> Optional[int]:
        """Bounds must convert to a representable timestamp."""
        if value is not None:
            try:
                from_epoch_millis(value)
            except OverflowError:
                raise ValueError("timestamp is out of range")
        return value
