"""
Stored difficulty metrics, one row per leveled song
"""
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, func
from sqlalchemy.orm import relationship

from lyriclearn.core.db import Base


class SongMetrics(Base):
    __tablename__ = "song_metrics"

    id = Column(Integer, primary_key=True)
    song_id = Column(Integer, ForeignKey("songs.id"), nullable=False, unique=True, index=True)
    word_count = Column(Integer, nullable=False)
    unique_word_count = Column(Integer, nullable=False)
    type_token_ratio = Column(Float, nullable=False)
    avg_word_freq_zipf = Column(Float, nullable=False)
    verb_density = Column(Float, nullable=False)
    tense_weights = Column(Float, nullable=False)
    idiom_count = Column(Integer, nullable=False)
    punct_complexity = Column(Float, nullable=False)
    difficulty_score = Column(Float, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    song = relationship("Song", back_populates="metrics")
