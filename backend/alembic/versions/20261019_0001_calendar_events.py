"""calendar and event tables

Revision ID: 20261019_0001
Revises: 
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261019_0001'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('tl_calendar',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False)
    )
    op.create_table('tl_calendar_events',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('pid', sa.Integer(), sa.ForeignKey('tl_calendar.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('alias', sa.String(), nullable=True, index=True),
        sa.Column('start_date', sa.DateTime(), nullable=True, index=True),
        sa.Column('published', sa.Integer(), nullable=False, server_default='1', index=True),
        sa.Column('created_at', sa.DateTime(), nullable=False)
    )


def downgrade():
    op.drop_table('tl_calendar_events')
    op.drop_table('tl_calendar')
