"""User model."""

from sqlalchemy import Column, DateTime, Integer, String

from portfolio_tracker.models import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Unique constraints back up the service-level checks against concurrent inserts
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=True)
    # NULL emails never collide with each other
    email = Column(String(255), unique=True, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
