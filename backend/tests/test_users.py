"""User service tests."""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.exceptions import ConflictError, NotFoundError
from portfolio_tracker.core.security import verify_password
from portfolio_tracker.models.user import User
from portfolio_tracker.repositories.user import UserRepository
from portfolio_tracker.schemas.investment import InvestmentCreate
from portfolio_tracker.schemas.performance import PerformanceCreate
from portfolio_tracker.schemas.portfolio import PortfolioCreate
from portfolio_tracker.schemas.transaction import TransactionCreate
from portfolio_tracker.schemas.user import UserCreate, UserResponse, UserUpdate
from portfolio_tracker.services.investment_service import investment_service
from portfolio_tracker.services.performance_service import performance_service
from portfolio_tracker.services.portfolio_service import portfolio_service
from portfolio_tracker.services.transaction_service import transaction_service
from portfolio_tracker.services.user_service import user_service


async def _stored_hash(db: AsyncSession, user_id: int) -> str:
    result = await db.execute(select(User.password_hash).where(User.id == user_id))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_create_user(db_session: AsyncSession):
    """A new username and email yields a fresh id and no password in the view."""
    user = await user_service.create_user(
        db_session,
        UserCreate(username="carol", password="carolpassword", email="carol@example.com"),
    )
    assert isinstance(user, UserResponse)
    assert user.id is not None
    assert user.username == "carol"
    assert user.email == "carol@example.com"
    assert user.created_at is not None
    assert "password" not in user.model_dump()
    assert "password_hash" not in user.model_dump()


@pytest.mark.asyncio
async def test_create_user_hashes_password(db_session: AsyncSession):
    user = await user_service.create_user(
        db_session, UserCreate(username="dave", password="davepassword")
    )
    stored = await _stored_hash(db_session, user.id)
    assert stored != "davepassword"
    assert verify_password("davepassword", stored)


@pytest.mark.asyncio
async def test_create_user_ids_are_distinct(db_session: AsyncSession, alice: UserResponse, bob: UserResponse):
    assert alice.id != bob.id


@pytest.mark.asyncio
async def test_create_user_duplicate_username(db_session: AsyncSession, alice: UserResponse):
    """A taken username conflicts whatever the other fields are."""
    with pytest.raises(ConflictError) as exc_info:
        await user_service.create_user(
            db_session,
            UserCreate(
                username="alice",
                password="otherpassword",
                name="Someone Else",
                email="different@example.com",
            ),
        )
    assert exc_info.value.error_code == "USERNAME_TAKEN"


@pytest.mark.asyncio
async def test_create_user_duplicate_email(db_session: AsyncSession, alice: UserResponse):
    with pytest.raises(ConflictError) as exc_info:
        await user_service.create_user(
            db_session,
            UserCreate(username="alice2", password="otherpassword", email="alice@example.com"),
        )
    assert exc_info.value.error_code == "EMAIL_TAKEN"


@pytest.mark.asyncio
async def test_create_users_without_email(db_session: AsyncSession, bob: UserResponse):
    """Missing emails never collide."""
    other = await user_service.create_user(
        db_session, UserCreate(username="eve", password="evepassword")
    )
    assert other.email is None
    assert bob.email is None


@pytest.mark.asyncio
async def test_unique_constraint_backs_up_checks(
    db_session: AsyncSession, alice: UserResponse, monkeypatch
):
    """A duplicate that slips past the checks is still rejected as a conflict."""

    async def never_exists(self, value):
        return False

    monkeypatch.setattr(UserRepository, "exists_by_username", never_exists)
    monkeypatch.setattr(UserRepository, "exists_by_email", never_exists)

    with pytest.raises(ConflictError):
        await user_service.create_user(
            db_session, UserCreate(username="alice", password="racepassword")
        )


@pytest.mark.asyncio
async def test_get_user(db_session: AsyncSession, alice: UserResponse):
    assert await user_service.get_user(db_session, alice.id) == alice
    assert await user_service.get_user(db_session, 9999) is None


@pytest.mark.asyncio
async def test_get_user_by_username(db_session: AsyncSession, alice: UserResponse):
    found = await user_service.get_user_by_username(db_session, "alice")
    assert found is not None
    assert found.id == alice.id
    assert await user_service.get_user_by_username(db_session, "nobody") is None


@pytest.mark.asyncio
async def test_list_users(db_session: AsyncSession, alice: UserResponse, bob: UserResponse):
    users = await user_service.list_users(db_session)
    assert [u.username for u in users] == ["alice", "bob"]


@pytest.mark.asyncio
async def test_update_user_not_found(db_session: AsyncSession):
    with pytest.raises(NotFoundError):
        await user_service.update_user(db_session, 9999, UserUpdate(name="Ghost"))


@pytest.mark.asyncio
async def test_update_user_email_taken(db_session: AsyncSession, alice: UserResponse, bob: UserResponse):
    """Taking another user's email conflicts."""
    with pytest.raises(ConflictError):
        await user_service.update_user(
            db_session, bob.id, UserUpdate(email="alice@example.com")
        )


@pytest.mark.asyncio
async def test_update_user_username_taken(db_session: AsyncSession, alice: UserResponse, bob: UserResponse):
    with pytest.raises(ConflictError):
        await user_service.update_user(db_session, bob.id, UserUpdate(username="alice"))


@pytest.mark.asyncio
async def test_update_user_keeps_own_email_and_username(db_session: AsyncSession, alice: UserResponse):
    """Re-submitting one's own username and email succeeds."""
    updated = await user_service.update_user(
        db_session,
        alice.id,
        UserUpdate(username="alice", email="alice@example.com", name="Alice M."),
    )
    assert updated.name == "Alice M."
    assert updated.email == "alice@example.com"
    assert updated.username == "alice"


@pytest.mark.asyncio
async def test_update_user_changes_username(db_session: AsyncSession, alice: UserResponse):
    updated = await user_service.update_user(db_session, alice.id, UserUpdate(username="alicia"))
    assert updated.username == "alicia"
    assert await user_service.get_user_by_username(db_session, "alice") is None


@pytest.mark.asyncio
async def test_update_user_empty_password_keeps_hash(db_session: AsyncSession, alice: UserResponse):
    before = await _stored_hash(db_session, alice.id)
    await user_service.update_user(db_session, alice.id, UserUpdate(password=""))
    assert await _stored_hash(db_session, alice.id) == before


@pytest.mark.asyncio
async def test_update_user_rehashes_new_password(db_session: AsyncSession, alice: UserResponse):
    before = await _stored_hash(db_session, alice.id)
    await user_service.update_user(db_session, alice.id, UserUpdate(password="brandnewpassword"))
    after = await _stored_hash(db_session, alice.id)
    assert after != before
    assert verify_password("brandnewpassword", after)


@pytest.mark.asyncio
async def test_authenticate(db_session: AsyncSession, alice: UserResponse):
    assert (await user_service.authenticate(db_session, "alice", "alicepassword")).id == alice.id
    assert await user_service.authenticate(db_session, "alice", "wrongpassword") is None
    assert await user_service.authenticate(db_session, "nobody", "alicepassword") is None


@pytest.mark.asyncio
async def test_delete_user_missing_is_noop(db_session: AsyncSession):
    await user_service.delete_user(db_session, 9999)


@pytest.mark.asyncio
async def test_delete_user_cascades(db_session: AsyncSession, alice: UserResponse, bob: UserResponse):
    """Deleting a user removes their portfolios and everything below them."""
    p1 = await portfolio_service.create_portfolio(
        db_session, PortfolioCreate(user_id=alice.id, name="Main")
    )
    i1 = await investment_service.create_investment(
        db_session,
        InvestmentCreate(
            portfolio_id=p1.id,
            name="Index fund",
            type="etf",
            amount="100.00",
            current_value="110.00",
        ),
    )
    t1 = await transaction_service.create_transaction(
        db_session,
        TransactionCreate(
            portfolio_id=p1.id,
            investment_id=i1.id,
            transaction_type="purchase",
            amount="100.00",
        ),
    )
    perf = await performance_service.record_performance(
        db_session, PerformanceCreate(portfolio_id=p1.id, total_value="110.00")
    )
    bobs = await portfolio_service.create_portfolio(
        db_session, PortfolioCreate(user_id=bob.id, name="Bob's")
    )

    await user_service.delete_user(db_session, alice.id)

    assert await user_service.get_user(db_session, alice.id) is None
    assert await portfolio_service.get_portfolio(db_session, p1.id) is None
    assert await investment_service.get_investment(db_session, i1.id) is None
    assert await transaction_service.get_transaction(db_session, t1.id) is None
    assert await performance_service.list_performance(db_session, p1.id) == []
    assert perf.id is not None

    # Other users are untouched
    assert await portfolio_service.get_portfolio(db_session, bobs.id) is not None
