from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DifficultyRequest(BaseModel):
    lines: List[str] = Field(..., min_length=1, max_length=5000)


class DifficultyMetricsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    word_count: int
    unique_word_count: int
    type_token_ratio: float
    avg_word_freq_zipf: float
    verb_density: float
    tense_weights: float
    idiom_count: int
    punct_complexity: float


class DifficultyRead(BaseModel):
    metrics: DifficultyMetricsRead
    difficulty_score: float
    level: int


class SongDifficultyRead(DifficultyRead):
    song_id: int
    title: str
    artist: str
    cached: bool


class LeveledSongRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    artist: str
    level: int
    difficulty_score: Optional[float] = None


class LevelsResponse(BaseModel):
    levels: Dict[str, List[LeveledSongRead]]
    total_songs: int
    average_level: float
