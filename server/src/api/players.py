from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from server.src.core.config import settings
from server.src.core.database import get_db
from server.src.core.logging_config import get_logger
from server.src.models.player import Player
from server.src.schemas.player import (
    PlayerCreate,
    PlayerFilterParams,
    PlayerOrder,
    PlayerPublic,
    PlayerUpdate,
    Profession,
    Race,
)
from server.src.services.player_filters import build_player_filter
from server.src.services.player_service import PlayerService

router = APIRouter()
logger = get_logger(__name__)

# Numeric parameters are rejected before reaching the database when they do
# not fit the column types: ids are 64-bit, everything else 32-bit.
MAX_PLAYER_ID = 2**63 - 1
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

PlayerId = Annotated[int, Path(le=MAX_PLAYER_ID)]


def player_filter_params(
    name: Optional[str] = Query(None),
    title: Optional[str] = Query(None),
    race: Optional[Race] = Query(None),
    profession: Optional[Profession] = Query(None),
    after: Optional[int] = Query(None, description="Earliest birthday, epoch milliseconds"),
    before: Optional[int] = Query(None, description="Latest birthday, epoch milliseconds"),
    banned: Optional[bool] = Query(None),
    min_experience: Optional[int] = Query(
        None, alias="minExperience", ge=INT_MIN, le=INT_MAX
    ),
    max_experience: Optional[int] = Query(
        None, alias="maxExperience", ge=INT_MIN, le=INT_MAX
    ),
    min_level: Optional[int] = Query(None, alias="minLevel", ge=INT_MIN, le=INT_MAX),
    max_level: Optional[int] = Query(None, alias="maxLevel", ge=INT_MIN, le=INT_MAX),
) -> PlayerFilterParams:
    """Collect the optional filter query parameters shared by list and count."""
    return PlayerFilterParams(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


@router.get(
    "/players",
    response_model=List[PlayerPublic],
    summary="List players matching the filters",
)
async def list_players(
    filters: PlayerFilterParams = Depends(player_filter_params),
    order: PlayerOrder = Query(PlayerOrder.ID),
    page_number: int = Query(
        settings.DEFAULT_PAGE_NUMBER, alias="pageNumber", ge=0, le=INT_MAX
    ),
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=INT_MAX
    ),
    db: AsyncSession = Depends(get_db),
) -> List[Player]:
    """
    Return one page of players.

    All filters are optional and combined with AND. Results are sorted by
    `order` ascending; only the page contents are returned.
    """
    return await PlayerService.list_players(
        db, build_player_filter(filters), page_number, page_size, order
    )


@router.get("/players/count", response_model=int, summary="Count players matching the filters")
async def count_players(
    filters: PlayerFilterParams = Depends(player_filter_params),
    db: AsyncSession = Depends(get_db),
) -> int:
    return await PlayerService.count_players(db, build_player_filter(filters))


@router.post("/players", response_model=PlayerPublic, summary="Create a new player")
@router.post("/players/", response_model=PlayerPublic, include_in_schema=False)
async def create_player(
    player_in: PlayerCreate, db: AsyncSession = Depends(get_db)
) -> Player:
    """
    Create a new player.

    - **name**, **title**, **race**, **profession**, **experience** and
      **birthday** (epoch milliseconds) are required.
    - **banned** defaults to false.
    - **level** and **untilNextLevel** are computed by the server.
    """
    return await PlayerService.create_player(db, player_in)


@router.get("/players/{player_id}", response_model=PlayerPublic, summary="Get a player")
async def get_player(player_id: PlayerId, db: AsyncSession = Depends(get_db)) -> Player:
    return await PlayerService.get_player(db, player_id)


@router.post(
    "/players/{player_id}", response_model=PlayerPublic, summary="Update a player"
)
async def update_player(
    player_id: PlayerId, changes: PlayerUpdate, db: AsyncSession = Depends(get_db)
) -> Player:
    """
    Partially update a player. Fields that are absent or null keep their value.
    """
    return await PlayerService.update_player(db, player_id, changes)


@router.delete("/players/{player_id}", summary="Delete a player")
async def delete_player(player_id: PlayerId, db: AsyncSession = Depends(get_db)) -> Response:
    await PlayerService.delete_player(db, player_id)
    return Response(status_code=status.HTTP_200_OK)
