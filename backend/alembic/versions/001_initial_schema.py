"""Initial schema: users, portfolios, investments, transactions, performance.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

risk_level = sa.Enum('LOW', 'MEDIUM', 'HIGH', name='risklevel')
transaction_type = sa.Enum(
    'PURCHASE', 'SALE', 'DIVIDEND', 'DEPOSIT', 'WITHDRAWAL', name='transactiontype'
)


def upgrade() -> None:
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table('portfolios',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('total_value', sa.Numeric(precision=18, scale=2), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='portfolios_user_id_fkey', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_portfolios_user_id', 'portfolios', ['user_id'], unique=False)

    op.create_table('investments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('portfolio_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('risk_level', risk_level, nullable=True),
        sa.Column('amount', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('current_value', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('purchase_date', sa.Date(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('amount > 0', name='ck_investments_amount_positive'),
        sa.CheckConstraint('current_value > 0', name='ck_investments_current_value_positive'),
        sa.ForeignKeyConstraint(['portfolio_id'], ['portfolios.id'], name='investments_portfolio_id_fkey', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_investments_portfolio_id', 'investments', ['portfolio_id'], unique=False)

    op.create_table('transactions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('portfolio_id', sa.Integer(), nullable=False),
        sa.Column('investment_id', sa.Integer(), nullable=True),
        sa.Column('transaction_type', transaction_type, nullable=False),
        sa.Column('amount', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('amount > 0', name='ck_transactions_amount_positive'),
        sa.ForeignKeyConstraint(['portfolio_id'], ['portfolios.id'], name='transactions_portfolio_id_fkey', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['investment_id'], ['investments.id'], name='transactions_investment_id_fkey', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_transactions_portfolio_id', 'transactions', ['portfolio_id'], unique=False)
    op.create_index('ix_transactions_investment_id', 'transactions', ['investment_id'], unique=False)
    op.create_index('ix_transactions_portfolio_id_date', 'transactions', ['portfolio_id', 'date'], unique=False)

    op.create_table('performance',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('portfolio_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('total_value', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('daily_change', sa.Numeric(precision=18, scale=2), nullable=False, server_default='0'),
        sa.Column('percentage_change', sa.Numeric(precision=9, scale=4), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['portfolio_id'], ['portfolios.id'], name='performance_portfolio_id_fkey', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('portfolio_id', 'date', name='uq_performance_portfolio_id_date')
    )
    op.create_index('ix_performance_portfolio_id', 'performance', ['portfolio_id'], unique=False)
    op.create_index('ix_performance_date', 'performance', ['date'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_performance_date', table_name='performance')
    op.drop_index('ix_performance_portfolio_id', table_name='performance')
    op.drop_table('performance')

    op.drop_index('ix_transactions_portfolio_id_date', table_name='transactions')
    op.drop_index('ix_transactions_investment_id', table_name='transactions')
    op.drop_index('ix_transactions_portfolio_id', table_name='transactions')
    op.drop_table('transactions')

    op.drop_index('ix_investments_portfolio_id', table_name='investments')
    op.drop_table('investments')

    op.drop_index('ix_portfolios_user_id', table_name='portfolios')
    op.drop_table('portfolios')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')

    transaction_type.drop(op.get_bind(), checkfirst=True)
    risk_level.drop(op.get_bind(), checkfirst=True)
