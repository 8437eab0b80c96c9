"""Pytest configuration and fixtures."""

import os
from typing import AsyncGenerator

# Set test env vars before any app import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio_tracker.core.database import build_engine, get_db
from portfolio_tracker.main import app
from portfolio_tracker.models import Base
from portfolio_tracker.schemas.portfolio import PortfolioCreate, PortfolioResponse
from portfolio_tracker.schemas.user import UserCreate, UserResponse
from portfolio_tracker.services.portfolio_service import portfolio_service
from portfolio_tracker.services.user_service import user_service

# One in-memory database per test, shared by every connection of that test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database schema and session for each test."""
    test_engine = build_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestSessionLocal = sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def alice(db_session: AsyncSession) -> UserResponse:
    """A user with an email address."""
    return await user_service.create_user(
        db_session,
        UserCreate(
            username="alice",
            password="alicepassword",
            name="Alice Martin",
            email="alice@example.com",
        ),
    )


@pytest_asyncio.fixture
async def bob(db_session: AsyncSession) -> UserResponse:
    """A second user, without an email address."""
    return await user_service.create_user(
        db_session,
        UserCreate(username="bob", password="bobpassword"),
    )


@pytest_asyncio.fixture
async def portfolio(db_session: AsyncSession, alice: UserResponse) -> PortfolioResponse:
    """A portfolio owned by alice."""
    return await portfolio_service.create_portfolio(
        db_session,
        PortfolioCreate(user_id=alice.id, name="Retirement", description="Long term"),
    )
