"""create songs and song_translations tables

Revision ID: 20251201_1000_create_songs
Revises:
Create Date: 2025-12-01 10:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20251201_1000_create_songs'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'songs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('artist', sa.String(255), nullable=False),
        sa.Column('language', sa.String(8), nullable=False, server_default='es'),
        sa.Column('level', sa.Integer(), nullable=True, index=True),
        sa.Column('lyrics_raw', sa.Text(), nullable=True),
        sa.Column('has_translations', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'song_translations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('song_id', sa.Integer(), sa.ForeignKey('songs.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('target_lang', sa.String(8), nullable=False, index=True),
        sa.Column('lyrics_lines', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('song_translations')
    op.drop_table('songs')
