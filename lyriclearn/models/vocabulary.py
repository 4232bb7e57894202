from sqlalchemy import JSON, Column, DateTime, Float, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB

from lyriclearn.core.db import Base


class Vocabulary(Base):
    __tablename__ = "vocabulary"
    id = Column(Integer, primary_key=True)
    word = Column(String(64), nullable=False, unique=True, index=True)
    translation = Column(String(255), nullable=False)
    part_of_speech = Column(String(16), nullable=False)
    frequency = Column(Float, nullable=False)
    usefulness_score = Column(Float, nullable=False, index=True)
    examples = Column(JSON().with_variant(JSONB, "postgresql"), nullable=True)  # up to 3 lyric lines
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
