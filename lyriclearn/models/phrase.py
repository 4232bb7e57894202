from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from lyriclearn.core.db import Base


class PhraseCategoryRecord(Base):
    __tablename__ = "phrase_categories"
    id = Column(Integer, primary_key=True)
    name = Column(String(32), nullable=False, unique=True)  # greetings, questions, ...
    display_name = Column(String(64), nullable=False)
    icon = Column(String(32), nullable=False)
    order = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)
    phrase_count = Column(Integer, nullable=False, default=0)


class Phrase(Base):
    """A lyric line kept as a useful phrase, with its aligned translation"""
    __tablename__ = "phrases"
    id = Column(Integer, primary_key=True)
    song_id = Column(Integer, ForeignKey("songs.id"), nullable=False, index=True)
    original_text = Column(Text, nullable=False)
    translated_text = Column(Text, nullable=False)
    line_index = Column(Integer, nullable=False)
    timestamp = Column(Float, nullable=True)  # seconds into the song when synced lyrics exist
    usefulness_score = Column(Float, nullable=False, index=True)
    category = Column(String(32), nullable=False, index=True)
    word_count = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    song = relationship("Song", back_populates="phrases")
