from typing import List, Optional

from pydantic import BaseModel, Field


class PhraseScoreRequest(BaseModel):
    phrase: str = Field(..., max_length=1000)
    verb_tenses: Optional[List[str]] = None


class PhraseFactorsRead(BaseModel):
    word_frequency: float
    phrase_length: float
    verb_complexity: float
    question_pattern: float
    greeting_pattern: float
    common_expression: float
    repetitiveness: float


class PhraseScoreRead(BaseModel):
    phrase: str
    score: float
    factors: PhraseFactorsRead
    category: str
    is_useful: bool


class VocabularyScoreRequest(BaseModel):
    word: str = Field(..., max_length=200)


class VocabularyScoreRead(BaseModel):
    word: str
    score: float
    frequency: float
    part_of_speech: str
    is_useful: bool


class VocabularyScoreResult(BaseModel):
    eligible: bool
    result: Optional[VocabularyScoreRead] = None


class TopVocabularyRequest(BaseModel):
    words: List[str] = Field(..., max_length=50000)
    limit: int = Field(default=100, ge=1, le=1000)


class CategoryRead(BaseModel):
    id: str
    display_name: str
    icon: str
    order: int
