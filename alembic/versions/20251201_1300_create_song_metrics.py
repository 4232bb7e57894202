"""create song_metrics table

Revision ID: 20251201_1300_create_song_metrics
Revises: 20251201_1200_create_vocabulary
Create Date: 2025-12-01 13:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20251201_1300_create_song_metrics'
down_revision = '20251201_1200_create_vocabulary'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'song_metrics',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('song_id', sa.Integer(), sa.ForeignKey('songs.id'), nullable=False, unique=True, index=True),
        sa.Column('word_count', sa.Integer(), nullable=False),
        sa.Column('unique_word_count', sa.Integer(), nullable=False),
        sa.Column('type_token_ratio', sa.Float(), nullable=False),
        sa.Column('avg_word_freq_zipf', sa.Float(), nullable=False),
        sa.Column('verb_density', sa.Float(), nullable=False),
        sa.Column('tense_weights', sa.Float(), nullable=False),
        sa.Column('idiom_count', sa.Integer(), nullable=False),
        sa.Column('punct_complexity', sa.Float(), nullable=False),
        sa.Column('difficulty_score', sa.Float(), nullable=False, index=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('song_metrics')
