"""
Declarative base shared by the roster's SQLAlchemy models.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; `Base.metadata` is used to create the schema on startup."""
