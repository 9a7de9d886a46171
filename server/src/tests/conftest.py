import os

# Must be set before the application modules read their settings
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest
import pytest_asyncio
from datetime import datetime
from typing import AsyncGenerator, Awaitable, Callable, Dict
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from server.src.main import app
from server.src.core.database import configure_engine, get_db
from server.src.core.levels import derive_level_fields
from server.src.core.timestamps import to_epoch_millis
from server.src.models.base import Base
from server.src.models.player import Player
from server.src.schemas.player import Profession, Race

# Use SQLite in memory for tests; one connection shared through StaticPool
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

DEFAULT_BIRTHDAY = datetime(2010, 5, 17, 12, 0, 0)


@pytest_asyncio.fixture(scope="function")
async def session() -> AsyncGenerator[AsyncSession, None]:
    """
    Creates a fresh database with an empty players table for each test.
    """
    test_engine = configure_engine(
        create_async_engine(
            TEST_DATABASE_URL,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with TestingSessionLocal() as session_obj:
        try:
            yield session_obj
        except Exception:
            await session_obj.rollback()
            raise
        finally:
            await session_obj.close()

    await test_engine.dispose()


@pytest_asyncio.fixture
async def client(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an HTTP client that uses the test database session.
    """
    app.dependency_overrides[get_db] = lambda: session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    # Clean up
    app.dependency_overrides.clear()


@pytest.fixture
def player_payload() -> Dict:
    """A valid creation body as a client would send it."""
    return {
        "name": "Aragorn",
        "title": "King of Gondor",
        "race": "HUMAN",
        "profession": "WARRIOR",
        "experience": 5000,
        "birthday": to_epoch_millis(DEFAULT_BIRTHDAY),
        "banned": False,
    }


@pytest.fixture
def create_test_player(
    session: AsyncSession,
) -> Callable[..., Awaitable[Player]]:
    """
    Fixture factory that inserts a player straight into the database.
    Level fields are derived from experience so rows are always consistent.
    """

    async def _create_player(
        name: str = "Frodo",
        title: str = "Ring bearer",
        race: Race = Race.HOBBIT,
        profession: Profession = Profession.ROGUE,
        experience: int = 1000,
        birthday: datetime = DEFAULT_BIRTHDAY,
        banned: bool = False,
    ) -> Player:
        level, until_next_level = derive_level_fields(experience)
        player = Player(
            name=name,
            title=title,
            race=race,
            profession=profession,
            experience=experience,
            level=level,
            until_next_level=until_next_level,
            birthday=birthday,
            banned=banned,
        )
        session.add(player)
        await session.commit()
        await session.refresh(player)
        return player

    return _create_player
