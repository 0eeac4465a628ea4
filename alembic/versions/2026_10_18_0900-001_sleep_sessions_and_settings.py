"""Add sleep_sessions and app_settings tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create sleep_sessions (with single-active index) and app_settings."""
    op.create_table('sleep_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_sleep_sessions_start_time'), 'sleep_sessions', ['start_time'], unique=False)
    op.create_index(op.f('ix_sleep_sessions_end_time'), 'sleep_sessions', ['end_time'], unique=False)
    op.create_index('uq_sleep_sessions_single_active', 'sleep_sessions', [sa.text('(end_time IS NULL)')], unique=True,
                    postgresql_where=sa.text('end_time IS NULL'), sqlite_where=sa.text('end_time IS NULL'))

    op.create_table('app_settings', sa.Column('key', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('key'))


def downgrade() -> None:
    """Drop both tables."""
    op.drop_table('app_settings')
    op.drop_index('uq_sleep_sessions_single_active', table_name='sleep_sessions')
    op.drop_index(op.f('ix_sleep_sessions_end_time'), table_name='sleep_sessions')
    op.drop_index(op.f('ix_sleep_sessions_start_time'), table_name='sleep_sessions')
    op.drop_table('sleep_sessions')
