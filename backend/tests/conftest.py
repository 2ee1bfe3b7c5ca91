import os

# Set test environment
os.environ["DEBUG"] = "true"
os.environ["SECRET_KEY"] = "change-me-in-production"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ROBLOX_CLIENT_ID"] = "test-client-id"
os.environ["ROBLOX_CLIENT_SECRET"] = "test-client-secret"

from collections.abc import AsyncGenerator
from typing import Any
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tradehub.database import Base, get_db
from tradehub.main import app
from tradehub.models import TradeAd, TradingItem, User
from tradehub.schemas.auth import ResolvedProfile
from tradehub.utils.auth import create_session_token

# In-memory SQLite by default; point TEST_DATABASE_URL at PostgreSQL to test against it
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture(scope="function")
async def async_engine():
    """Create async engine for each test."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        # One shared connection so the in-memory database survives across sessions
        engine = create_async_engine(
            TEST_DATABASE_URL,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with database session override."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user with a unique username."""
    user = User(
        username=f"trader-{uuid4().hex[:8]}",
        password="oauth_user",
        reputation=5,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_trade_ad(db_session: AsyncSession, test_user: User) -> TradeAd:
    ad = TradeAd(
        user_id=test_user.id,
        title="Trading Candy Blossom",
        description="Looking for eggs",
        offering_items=["Candy Blossom"],
        wanting_items=["Bug Egg", "Mythical Egg"],
        status="active",
    )
    db_session.add(ad)
    await db_session.commit()
    await db_session.refresh(ad)
    return ad


@pytest_asyncio.fixture
async def trading_items(db_session: AsyncSession) -> list[TradingItem]:
    items = [
        TradingItem(name="Candy Blossom", type="crop", rarity="divine", current_value=900),
        TradingItem(name="Master Sprinkler", type="gear", rarity="mythical", current_value=400),
        TradingItem(
            name="Event Egg", type="egg", rarity="legendary", current_value=50, tradeable=False
        ),
    ]
    db_session.add_all(items)
    await db_session.commit()
    return items


@pytest.fixture
def test_profile() -> ResolvedProfile:
    return ResolvedProfile(
        id=555,
        username="Neo",
        display_name="Neo Anderson",
        profile_image_url="https://x/y.png",
    )


@pytest.fixture
def auth_headers(test_profile: ResolvedProfile) -> dict[str, str]:
    """Create authorization headers for authenticated requests."""
    token = create_session_token(test_profile)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_trading_item_data() -> dict[str, Any]:
    """Sample data for creating a trading item."""
    return {
        "name": "Dragon Pepper",
        "type": "crop",
        "rarity": "prismatic",
        "currentValue": 1125,
        "previousValue": 1000,
        "imageUrl": "https://i.postimg.cc/abc/dragon-pepper.png",
        "tradeable": True,
    }
