"""SQLAlchemy models."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models so Base.metadata.create_all() picks them up
from portfolio_tracker.models.user import User  # noqa: E402, F401
from portfolio_tracker.models.portfolio import Portfolio  # noqa: E402, F401
from portfolio_tracker.models.investment import Investment  # noqa: E402, F401
from portfolio_tracker.models.transaction import Transaction  # noqa: E402, F401
from portfolio_tracker.models.performance import Performance  # noqa: E402, F401
