"""create phrase_categories and phrases tables

Revision ID: 20251201_1100_create_phrases
Revises: 20251201_1000_create_songs
Create Date: 2025-12-01 11:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20251201_1100_create_phrases'
down_revision = '20251201_1000_create_songs'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'phrase_categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(32), nullable=False, unique=True),
        sa.Column('display_name', sa.String(64), nullable=False),
        sa.Column('icon', sa.String(32), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('phrase_count', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_table(
        'phrases',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('song_id', sa.Integer(), sa.ForeignKey('songs.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('original_text', sa.Text(), nullable=False),
        sa.Column('translated_text', sa.Text(), nullable=False),
        sa.Column('line_index', sa.Integer(), nullable=False),
        sa.Column('timestamp', sa.Float(), nullable=True),
        sa.Column('usefulness_score', sa.Float(), nullable=False, index=True),
        sa.Column('category', sa.String(32), nullable=False, index=True),
        sa.Column('word_count', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('phrases')
    op.drop_table('phrase_categories')
