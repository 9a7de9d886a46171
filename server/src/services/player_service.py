"""
Service for managing player records.

Owns the validation rules and level derivation, and runs the single-player
lifecycle (create, get, update, delete) plus filtered listing and counting
against the player repository.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from ..core.exceptions import PlayerNotFoundError, RosterError
from ..core.levels import derive_level_fields
from ..core.logging_config import get_logger
from ..core.metrics import metrics
from ..core.validation import FIELD_VALIDATORS, validate_id
from ..models.player import Player
from ..schemas.player import PlayerCreate, PlayerOrder, PlayerUpdate
from .player_repository import PlayerRepository

logger = get_logger(__name__)


def _apply_level_fields(player: Player) -> None:
    """Recompute level and until_next_level from the player's experience."""
    player.level, player.until_next_level = derive_level_fields(player.experience)


def _rejected(operation: str, error: RosterError) -> None:
    logger.info(
        "Player operation rejected",
        extra={
            "operation": operation,
            "error": type(error).__name__,
            "details": error.details,
        },
    )
    metrics.track_player_operation(operation, "failure")


async def _load_player(db: AsyncSession, player_id: int) -> Player:
    validate_id(player_id)

    player = await PlayerRepository(db).get_by_id(player_id)
    if player is None:
        raise PlayerNotFoundError(player_id)
    return player


class PlayerService:
    """Service for managing player operations."""

    @staticmethod
    async def create_player(db: AsyncSession, player_data: PlayerCreate) -> Player:
        """
        Create a new player.

        All of name, title, race, profession, experience and birthday must be
        present and valid. Banned defaults to False. Level fields are derived
        from experience.

        Args:
            db: Database session
            player_data: Player creation data

        Returns:
            The stored Player with its assigned id

        Raises:
            InvalidInputError: If a required field is missing or invalid
        """
        try:
            for field, validate in FIELD_VALIDATORS.items():
                validate(getattr(player_data, field))
        except RosterError as e:
            _rejected("create", e)
            raise

        player = Player(
            name=player_data.name,
            title=player_data.title,
            race=player_data.race,
            profession=player_data.profession,
            experience=player_data.experience,
            birthday=player_data.birthday,
            banned=player_data.banned if player_data.banned is not None else False,
        )
        _apply_level_fields(player)

        player = await PlayerRepository(db).save(player)

        logger.info(
            "Player created successfully",
            extra={
                "player_id": player.id,
                "player_name": player.name,
                "level": player.level,
            },
        )
        metrics.track_player_operation("create", "success")
        return player

    @staticmethod
    async def get_player(db: AsyncSession, player_id: int) -> Player:
        """
        Get player by ID.

        Raises:
            InvalidInputError: If player_id is not positive
            PlayerNotFoundError: If no player has this id
        """
        try:
            player = await _load_player(db, player_id)
        except RosterError as e:
            _rejected("get", e)
            raise

        metrics.track_player_operation("get", "success")
        return player

    @staticmethod
    async def update_player(
        db: AsyncSession, player_id: int, changes: PlayerUpdate
    ) -> Player:
        """
        Apply a partial update to an existing player.

        Only fields supplied with a non-null value are validated and
        overwritten. Banned is taken as-is. Level fields are recomputed
        afterwards whether or not experience changed.

        Args:
            db: Database session
            player_id: Target player ID
            changes: Fields to overwrite

        Returns:
            The updated Player

        Raises:
            InvalidInputError: If the id or a supplied field is invalid
            PlayerNotFoundError: If no player has this id
        """
        try:
            player = await _load_player(db, player_id)

            # Validate everything before touching the loaded instance
            supplied = {}
            for field, validate in FIELD_VALIDATORS.items():
                value = getattr(changes, field)
                if value is not None:
                    validate(value)
                    supplied[field] = value
        except RosterError as e:
            _rejected("update", e)
            raise

        if changes.banned is not None:
            supplied["banned"] = changes.banned

        for field, value in supplied.items():
            setattr(player, field, value)

        _apply_level_fields(player)
        player = await PlayerRepository(db).save(player)

        logger.info(
            "Player updated",
            extra={"player_id": player.id, "fields": list(supplied)},
        )
        metrics.track_player_operation("update", "success")
        return player

    @staticmethod
    async def delete_player(db: AsyncSession, player_id: int) -> None:
        """
        Delete a player.

        Raises:
            InvalidInputError: If player_id is not positive
            PlayerNotFoundError: If no player has this id
        """
        try:
            player = await _load_player(db, player_id)
        except RosterError as e:
            _rejected("delete", e)
            raise

        await PlayerRepository(db).delete(player)

        logger.info("Player deleted", extra={"player_id": player_id})
        metrics.track_player_operation("delete", "success")

    @staticmethod
    async def list_players(
        db: AsyncSession,
        predicate: ColumnElement[bool],
        page_number: int,
        page_size: int,
        order: PlayerOrder = PlayerOrder.ID,
    ) -> List[Player]:
        """
        Get one page of players matching the predicate.

        Returns only the page contents, without any total count.
        """
        players = await PlayerRepository(db).find(predicate, page_number, page_size, order)
        metrics.track_player_operation("list", "success")
        return players

    @staticmethod
    async def count_players(db: AsyncSession, predicate: ColumnElement[bool]) -> int:
        """Count all players matching the predicate."""
        total = await PlayerRepository(db).count(predicate)
        metrics.track_player_operation("count", "success")
        return total
