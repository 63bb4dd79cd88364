"""create apps table

Revision ID: 3a9e1c7d52b4
Revises: 
Create Date: 2026-10-19 10:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a9e1c7d52b4'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'apps',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=64), nullable=True),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.Column('reviews', sa.BigInteger(), nullable=True),
        sa.Column('size', sa.String(length=32), nullable=True),
        sa.Column('installs', sa.String(length=32), nullable=True),
        sa.Column('type', sa.String(length=16), nullable=True),
        sa.Column('price', sa.String(length=16), nullable=True),
        sa.Column('content_rating', sa.String(length=32), nullable=True),
        sa.Column('genres', sa.String(length=128), nullable=True),
        sa.Column('last_updated', sa.String(length=32), nullable=True),
        sa.Column('current_ver', sa.String(length=64), nullable=True),
        sa.Column('android_ver', sa.String(length=64), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_index('idx_apps_name', 'apps', ['name'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_apps_name', table_name='apps')
    op.drop_table('apps')
