"""User service: account lifecycle, uniqueness checks and password hashing."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.exceptions import ConflictError, NotFoundError
from portfolio_tracker.core.security import hash_password, verify_password
from portfolio_tracker.models.user import User
from portfolio_tracker.repositories.user import UserRepository
from portfolio_tracker.schemas.user import UserCreate, UserResponse, UserUpdate
from portfolio_tracker.services.portfolio_service import portfolio_service

logger = logging.getLogger(__name__)


def _username_taken(username: str) -> ConflictError:
    return ConflictError(
        f"Username '{username}' is already taken",
        error_code="USERNAME_TAKEN",
        details={"field": "username"},
    )


def _email_taken(email: str) -> ConflictError:
    return ConflictError(
        f"Email '{email}' is already registered",
        error_code="EMAIL_TAKEN",
        details={"field": "email"},
    )


class UserService:
    """Service for creating, reading, updating and deleting users."""

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        users = await UserRepository(db).list_all()
        return [UserResponse.model_validate(u) for u in users]

    async def get_user(self, db: AsyncSession, user_id: int) -> Optional[UserResponse]:
        user = await UserRepository(db).get(user_id)
        return UserResponse.model_validate(user) if user else None

    async def get_user_by_username(
        self, db: AsyncSession, username: str
    ) -> Optional[UserResponse]:
        user = await UserRepository(db).get_by_username(username)
        return UserResponse.model_validate(user) if user else None

    async def create_user(self, db: AsyncSession, user_in: UserCreate) -> UserResponse:
        """Create a user after checking username and email are free."""
        users = UserRepository(db)

        if await users.exists_by_username(user_in.username):
            logger.warning("Username already taken", extra={"username": user_in.username})
            raise _username_taken(user_in.username)

        if user_in.email is not None and await users.exists_by_email(user_in.email):
            logger.warning("Email already registered", extra={"username": user_in.username})
            raise _email_taken(user_in.email)

        user = User(
            username=user_in.username,
            password_hash=hash_password(user_in.password),
            name=user_in.name,
            email=user_in.email,
            created_at=datetime.now(timezone.utc),
        )
        user = await self._save(db, users, user)

        logger.info("User created", extra={"user_id": user.id, "username": user.username})
        return UserResponse.model_validate(user)

    async def update_user(
        self, db: AsyncSession, user_id: int, user_in: UserUpdate
    ) -> UserResponse:
        """Update a user; the password is re-hashed only when a new one is given."""
        users = UserRepository(db)
        user = await users.get(user_id)
        if not user:
            raise NotFoundError("User", user_id)

        update_data = user_in.model_dump(exclude_unset=True)

        new_username = update_data.pop("username", None)
        if new_username is not None and new_username != user.username:
            existing = await users.get_by_username(new_username)
            if existing and existing.id != user.id:
                logger.warning("Username already taken", extra={"user_id": user.id})
                raise _username_taken(new_username)
            user.username = new_username

        if "email" in update_data:
            new_email = update_data.pop("email")
            if new_email is not None and new_email != user.email:
                existing = await users.get_by_email(new_email)
                if existing and existing.id != user.id:
                    logger.warning("Email already registered", extra={"user_id": user.id})
                    raise _email_taken(new_email)
            user.email = new_email

        new_password = update_data.pop("password", None)
        if new_password:
            user.password_hash = hash_password(new_password)

        if "name" in update_data:
            user.name = update_data["name"]

        user = await self._save(db, users, user)

        logger.info("User updated", extra={"user_id": user.id})
        return UserResponse.model_validate(user)

    async def delete_user(self, db: AsyncSession, user_id: int) -> None:
        """Delete a user and everything they own. Absent ids are ignored."""
        users = UserRepository(db)
        user = await users.get(user_id)
        if not user:
            logger.debug("Delete of unknown user ignored", extra={"user_id": user_id})
            return

        await portfolio_service.delete_user_portfolios(db, user_id)
        await users.delete(user)

        logger.info("User deleted", extra={"user_id": user_id})

    async def authenticate(
        self, db: AsyncSession, username: str, password: str
    ) -> Optional[UserResponse]:
        """Return the user if the password matches, otherwise None."""
        user = await UserRepository(db).get_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            return None
        return UserResponse.model_validate(user)

    async def _save(self, db: AsyncSession, users: UserRepository, user: User) -> User:
        # The unique constraints catch what the checks above race against
        username = user.username
        try:
            return await users.add(user)
        except IntegrityError as e:
            await db.rollback()
            logger.warning("Unique constraint rejected user write", extra={"username": username})
            raise ConflictError(
                "Username or email is already in use",
                error_code="USER_CONFLICT",
            ) from e


user_service = UserService()
