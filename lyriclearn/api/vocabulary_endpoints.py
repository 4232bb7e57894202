"""
Vocabulary API endpoints - ranked vocabulary and per-song word lists
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from lyriclearn.config.settings import get_settings
from lyriclearn.core.db import get_db
from lyriclearn.core.dependencies import get_vocabulary_scorer
from lyriclearn.core.exceptions import SongNotFoundError
from lyriclearn.core.metrics import record_ranking_latency
from lyriclearn.models.song import Song
from lyriclearn.models.vocabulary import Vocabulary
from lyriclearn.schemas.base import Envelope
from lyriclearn.schemas.vocabulary import (
    SongVocabularyEntry,
    SongVocabularyResponse,
    VocabularyListResponse,
    VocabularyRead,
)
from lyriclearn.scoring.vocabulary_scoring import VocabularyScorer
from lyriclearn.services.vocabulary_extraction_service import VocabularyExtractionService

router = APIRouter(tags=["vocabulary"])


@router.get("/vocabulary", response_model=Envelope[VocabularyListResponse])
async def list_vocabulary(
    search: Optional[str] = None,
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    """
    Stored vocabulary ordered by usefulness

    - **search**: Case-insensitive match on the word or its translation
    - **limit**: Max number of words (default: 100)
    """
    stmt = select(Vocabulary)
    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(or_(
            Vocabulary.word.ilike(pattern),
            Vocabulary.translation.ilike(pattern),
        ))
    stmt = stmt.order_by(Vocabulary.usefulness_score.desc(), Vocabulary.id.asc()).limit(limit)

    vocabulary = db.execute(stmt).scalars().all()
    # Count is over the whole table, not the filtered result
    total_count = db.execute(select(func.count()).select_from(Vocabulary)).scalar_one()

    return Envelope(
        status="ok",
        data=VocabularyListResponse(
            vocabulary=[VocabularyRead.model_validate(v) for v in vocabulary],
            total_count=total_count,
        )
    )


@router.get("/songs/{song_id}/vocabulary", response_model=Envelope[SongVocabularyResponse])
async def get_song_vocabulary(
    song_id: int,
    limit: Optional[int] = Query(None, ge=1, le=200),
    db: Session = Depends(get_db),
    scorer: VocabularyScorer = Depends(get_vocabulary_scorer),
):
    """
    Most useful words of one song with example lines

    - **song_id**: Song to analyse
    - **limit**: Max number of words (default from settings)
    """
    song = db.get(Song, song_id)
    if song is None:
        raise SongNotFoundError(song_id)

    service = VocabularyExtractionService(db, scorer, get_settings().extraction)
    with record_ranking_latency():
        words = service.song_vocabulary(song, limit)

    return Envelope(
        status="ok",
        data=SongVocabularyResponse(
            song_id=song.id,
            language=song.language,
            vocabulary=[
                SongVocabularyEntry(
                    word=w.score.word,
                    translation=w.translation,
                    part_of_speech=w.score.part_of_speech.value,
                    frequency=w.score.frequency,
                    usefulness_score=w.score.score,
                    examples=w.examples,
                )
                for w in words
            ],
        )
    )
