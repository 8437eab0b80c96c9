"""Portfolio tests."""

from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.exceptions import NotFoundError
from portfolio_tracker.schemas.investment import InvestmentCreate
from portfolio_tracker.schemas.portfolio import PortfolioCreate, PortfolioResponse, PortfolioUpdate
from portfolio_tracker.schemas.transaction import TransactionCreate
from portfolio_tracker.schemas.user import UserResponse
from portfolio_tracker.services.investment_service import investment_service
from portfolio_tracker.services.portfolio_service import portfolio_service
from portfolio_tracker.services.transaction_service import transaction_service


@pytest.mark.asyncio
async def test_create_portfolio_defaults(db_session: AsyncSession, alice: UserResponse):
    """total_value starts at zero and the portfolio is active."""
    portfolio = await portfolio_service.create_portfolio(
        db_session, PortfolioCreate(user_id=alice.id, name="Savings")
    )
    assert portfolio.user_id == alice.id
    assert portfolio.total_value == Decimal("0")
    assert portfolio.is_active is True
    assert portfolio.created_at is not None


@pytest.mark.asyncio
async def test_create_portfolio_explicit_values(db_session: AsyncSession, alice: UserResponse):
    portfolio = await portfolio_service.create_portfolio(
        db_session,
        PortfolioCreate(user_id=alice.id, name="Old", total_value="250.50", is_active=False),
    )
    assert portfolio.total_value == Decimal("250.50")
    assert portfolio.is_active is False


@pytest.mark.asyncio
async def test_create_portfolio_unknown_user(db_session: AsyncSession):
    with pytest.raises(NotFoundError):
        await portfolio_service.create_portfolio(
            db_session, PortfolioCreate(user_id=9999, name="Orphan")
        )


@pytest.mark.asyncio
async def test_list_portfolios_by_user_and_active(
    db_session: AsyncSession, alice: UserResponse, bob: UserResponse
):
    await portfolio_service.create_portfolio(db_session, PortfolioCreate(user_id=alice.id, name="A1"))
    await portfolio_service.create_portfolio(
        db_session, PortfolioCreate(user_id=alice.id, name="A2", is_active=False)
    )
    await portfolio_service.create_portfolio(db_session, PortfolioCreate(user_id=bob.id, name="B1"))

    alices = await portfolio_service.list_portfolios(db_session, alice.id)
    assert [p.name for p in alices] == ["A1", "A2"]

    active = await portfolio_service.list_active_portfolios(db_session, alice.id)
    assert [p.name for p in active] == ["A1"]

    inactive = await portfolio_service.list_active_portfolios(db_session, alice.id, is_active=False)
    assert [p.name for p in inactive] == ["A2"]

    assert len(await portfolio_service.list_portfolios(db_session)) == 3


@pytest.mark.asyncio
async def test_update_portfolio(db_session: AsyncSession, portfolio: PortfolioResponse):
    updated = await portfolio_service.update_portfolio(
        db_session, portfolio.id, PortfolioUpdate(name="Renamed", is_active=False)
    )
    assert updated.name == "Renamed"
    assert updated.is_active is False
    assert updated.description == portfolio.description


@pytest.mark.asyncio
async def test_update_portfolio_not_found(db_session: AsyncSession):
    with pytest.raises(NotFoundError):
        await portfolio_service.update_portfolio(db_session, 9999, PortfolioUpdate(name="X"))


@pytest.mark.asyncio
async def test_delete_portfolio_cascades(db_session: AsyncSession, portfolio: PortfolioResponse):
    investment = await investment_service.create_investment(
        db_session,
        InvestmentCreate(
            portfolio_id=portfolio.id,
            name="Bond fund",
            type="bond",
            amount="500.00",
            current_value="505.00",
        ),
    )
    transaction = await transaction_service.create_transaction(
        db_session,
        TransactionCreate(portfolio_id=portfolio.id, transaction_type="deposit", amount="50.00"),
    )

    await portfolio_service.delete_portfolio(db_session, portfolio.id)

    assert await portfolio_service.get_portfolio(db_session, portfolio.id) is None
    assert await investment_service.get_investment(db_session, investment.id) is None
    assert await transaction_service.get_transaction(db_session, transaction.id) is None


@pytest.mark.asyncio
async def test_delete_portfolio_missing_is_noop(db_session: AsyncSession):
    await portfolio_service.delete_portfolio(db_session, 9999)


@pytest.mark.asyncio
async def test_create_portfolio_api(client: AsyncClient, alice: UserResponse):
    """Test creating a portfolio over HTTP."""
    response = await client.post(
        "/api/v1/portfolios/",
        json={"user_id": alice.id, "name": "Mon Portfolio", "description": "Test portfolio"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Mon Portfolio"
    assert data["description"] == "Test portfolio"
    assert data["user_id"] == alice.id
    assert data["is_active"] is True


@pytest.mark.asyncio
async def test_create_portfolio_api_unknown_user(client: AsyncClient):
    response = await client.post(
        "/api/v1/portfolios/",
        json={"user_id": 9999, "name": "Orphan"},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_portfolio_validation(client: AsyncClient, alice: UserResponse):
    """Test portfolio creation validation."""
    response = await client.post(
        "/api/v1/portfolios/",
        json={"user_id": alice.id, "name": ""},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_portfolios_api(client: AsyncClient, alice: UserResponse, portfolio: PortfolioResponse):
    response = await client.get("/api/v1/portfolios/", params={"user_id": alice.id, "is_active": True})
    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [portfolio.id]

    response = await client.get("/api/v1/portfolios/", params={"is_active": True})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_and_delete_portfolio_api(client: AsyncClient, portfolio: PortfolioResponse):
    response = await client.patch(
        f"/api/v1/portfolios/{portfolio.id}",
        json={"name": "New Name"},
    )
    assert response.status_code == 200
    assert response.json()["name"] == "New Name"

    response = await client.delete(f"/api/v1/portfolios/{portfolio.id}")
    assert response.status_code == 204

    response = await client.get(f"/api/v1/portfolios/{portfolio.id}")
    assert response.status_code == 404
