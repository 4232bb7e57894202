"""create vocabulary table

Revision ID: 20251201_1200_create_vocabulary
Revises: 20251201_1100_create_phrases
Create Date: 2025-12-01 12:00:00
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = '20251201_1200_create_vocabulary'
down_revision = '20251201_1100_create_phrases'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'vocabulary',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('word', sa.String(64), nullable=False, unique=True, index=True),
        sa.Column('translation', sa.String(255), nullable=False),
        sa.Column('part_of_speech', sa.String(16), nullable=False),
        sa.Column('frequency', sa.Float(), nullable=False),
        sa.Column('usefulness_score', sa.Float(), nullable=False, index=True),
        sa.Column('examples', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('vocabulary')
