"""
Domain exceptions raised by the player services.

The API layer registers handlers that turn these into HTTP responses:
`InvalidInputError` becomes 400 and `PlayerNotFoundError` becomes 404.
"""

from typing import Any, Dict, Optional


class RosterError(Exception):
    """Base class for all roster domain errors."""

    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(RosterError):
    """A field, identifier or query value failed validation."""

    status_code = 400
    default_message = "Bad request"


class PlayerNotFoundError(RosterError):
    """No player exists with the requested identifier."""

    status_code = 404
    default_message = "Player not found"

    def __init__(self, player_id: int):
        self.player_id = player_id
        super().__init__(details={"player_id": player_id})
