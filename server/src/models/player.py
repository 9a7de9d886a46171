"""
SQLAlchemy models for players.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Enum as SAEnum

from .base import Base
from ..schemas.player import Profession, Race


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(12), nullable=False)
    title = Column(String(30), nullable=False)

    race = Column(SAEnum(Race, name="race"), nullable=False)
    profession = Column(SAEnum(Profession, name="profession"), nullable=False)

    # Level fields are derived from experience by the player service
    experience = Column(Integer, nullable=False)
    level = Column(Integer, nullable=False)
    until_next_level = Column(Integer, nullable=False)

    # Naive UTC timestamp
    birthday = Column(DateTime, nullable=False)
    banned = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<Player(id={self.id}, name='{self.name}', level={self.level})>"
