from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class PhraseSongRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    artist: str
    level: Optional[int] = None


class PhraseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    original_text: str
    translated_text: str
    line_index: int
    timestamp: Optional[float] = None
    usefulness_score: float
    category: str
    word_count: int
    created_at: Optional[datetime] = None
    song: PhraseSongRead


class PhraseCategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    display_name: str
    icon: str
    order: int
    description: Optional[str] = None
    phrase_count: int
