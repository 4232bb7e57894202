"""
Song and per-language lyric translation models
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from lyriclearn.core.db import Base


class Song(Base):
    """
    A leveled song with its stored lyrics.

    ``lyrics_raw`` holds JSON: {"lines": [...], "synchronized": {"lines": [{"time": ...}]}}
    """
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    artist = Column(String(255), nullable=False)
    language = Column(String(8), nullable=False, default="es")
    level = Column(Integer, nullable=True, index=True)
    lyrics_raw = Column(Text, nullable=True)
    has_translations = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    translations = relationship("SongTranslation", back_populates="song", cascade="all, delete-orphan")
    phrases = relationship("Phrase", back_populates="song", cascade="all, delete-orphan")
    metrics = relationship("SongMetrics", back_populates="song", uselist=False, cascade="all, delete-orphan")

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Song id={self.id} title={self.title!r}>"


class SongTranslation(Base):
    """Line-aligned translation of a song; ``lyrics_lines`` is a JSON list of strings"""
    __tablename__ = "song_translations"

    id = Column(Integer, primary_key=True)
    song_id = Column(Integer, ForeignKey("songs.id"), nullable=False, index=True)
    target_lang = Column(String(8), nullable=False, index=True)
    lyrics_lines = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    song = relationship("Song", back_populates="translations")
