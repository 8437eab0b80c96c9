#!/usr/bin/env python3
"""Script to create a user interactively."""

import asyncio
import sys
from getpass import getpass

sys.path.insert(0, str(__file__).rsplit("/", 2)[0])

from pydantic import ValidationError as SchemaValidationError

from portfolio_tracker.core.config import settings
from portfolio_tracker.core.database import AsyncSessionLocal, engine
from portfolio_tracker.core.exceptions import ConflictError
from portfolio_tracker.models import Base
from portfolio_tracker.schemas.user import UserCreate
from portfolio_tracker.services.user_service import user_service


async def create_user():
    """Prompt for user details and create the account."""
    # Create tables if they don't exist
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    print("\n=== Create a user ===\n")
    username = input("Username: ").strip()
    if not username:
        print("Username is required.")
        return

    password = getpass(f"Password (min {settings.PASSWORD_MIN_LENGTH} characters): ")
    password_confirm = getpass("Confirm password: ")
    if password != password_confirm:
        print("Passwords do not match.")
        return

    name = input("Name (optional): ").strip() or None
    email = input("Email (optional): ").strip() or None

    try:
        user_in = UserCreate(username=username, password=password, name=name, email=email)
    except SchemaValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"{field}: {error['msg']}")
        return

    async with AsyncSessionLocal() as session:
        try:
            user = await user_service.create_user(session, user_in)
            await session.commit()
        except ConflictError as e:
            print(e.message)
            return

    print("\nUser created.")
    print(f"   Id: {user.id}")
    print(f"   Username: {user.username}")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(create_user())
