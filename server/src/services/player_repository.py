"""
Storage access for player records.

Wraps an AsyncSession with the handful of operations the player service
needs: lookup by id, save, delete, count and paged find. No validation or
derivation happens here.
"""

import time
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from ..core.logging_config import get_logger
from ..core.metrics import metrics
from ..models.player import Player
from ..schemas.player import PlayerOrder

logger = get_logger(__name__)

TABLE = Player.__tablename__


class PlayerRepository:
    """Data access for the players table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, player_id: int) -> Optional[Player]:
        start_time = time.time()
        result = await self.db.execute(select(Player).where(Player.id == player_id))
        player = result.scalar_one_or_none()
        metrics.track_database_operation("select", TABLE, time.time() - start_time)

        logger.debug(
            "Player lookup",
            extra={"player_id": player_id, "found": player is not None},
        )
        return player

    async def save(self, player: Player) -> Player:
        """Insert or update a player and return it with its stored state."""
        start_time = time.time()
        self.db.add(player)
        await self.db.commit()
        await self.db.refresh(player)
        metrics.track_database_operation("save", TABLE, time.time() - start_time)
        return player

    async def delete(self, player: Player) -> None:
        start_time = time.time()
        await self.db.delete(player)
        await self.db.commit()
        metrics.track_database_operation("delete", TABLE, time.time() - start_time)

    async def count(self, predicate: ColumnElement[bool]) -> int:
        start_time = time.time()
        result = await self.db.execute(
            select(func.count()).select_from(Player).where(predicate)
        )
        total = result.scalar_one()
        metrics.track_database_operation("count", TABLE, time.time() - start_time)
        return total

    async def find(
        self,
        predicate: ColumnElement[bool],
        page_number: int,
        page_size: int,
        order: PlayerOrder = PlayerOrder.ID,
    ) -> List[Player]:
        """
        Get one page of players matching the predicate.

        Args:
            predicate: Filter expression (see player_filters)
            page_number: Zero-based page index
            page_size: Number of players per page
            order: Attribute to sort by, ascending

        Returns:
            The players on the requested page, in sort order
        """
        start_time = time.time()
        sort_column = getattr(Player, order.field_name)
        stmt = (
            select(Player)
            .where(predicate)
            .order_by(sort_column, Player.id)
            .offset(page_number * page_size)
            .limit(page_size)
        )
        result = await self.db.execute(stmt)
        players = list(result.scalars().all())
        metrics.track_database_operation("select", TABLE, time.time() - start_time)

        logger.debug(
            "Player page fetched",
            extra={
                "page_number": page_number,
                "page_size": page_size,
                "order": order.value,
                "returned": len(players),
            },
        )
        return players
