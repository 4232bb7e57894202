from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class VocabularyRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    word: str
    translation: str
    part_of_speech: str
    frequency: float
    usefulness_score: float
    examples: Optional[list[str]] = None
    created_at: Optional[datetime] = None


class VocabularyListResponse(BaseModel):
    vocabulary: list[VocabularyRead]
    total_count: int


class SongVocabularyEntry(BaseModel):
    word: str
    translation: str
    part_of_speech: str
    frequency: float
    usefulness_score: float
    examples: list[str]


class SongVocabularyResponse(BaseModel):
    song_id: int
    language: str
    vocabulary: list[SongVocabularyEntry]
