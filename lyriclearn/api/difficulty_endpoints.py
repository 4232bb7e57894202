"""
Difficulty API endpoints - per-song difficulty and songs grouped by level
"""
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from lyriclearn.config.settings import get_settings
from lyriclearn.core.db import get_db
from lyriclearn.core.dependencies import get_difficulty_scorer
from lyriclearn.core.exceptions import SongNotFoundError
from lyriclearn.core.metrics import record_difficulty_latency
from lyriclearn.models.song import Song
from lyriclearn.schemas.base import Envelope
from lyriclearn.schemas.difficulty import (
    DifficultyMetricsRead,
    LeveledSongRead,
    LevelsResponse,
    SongDifficultyRead,
)
from lyriclearn.scoring.difficulty import DifficultyScorer, assign_level
from lyriclearn.services.song_leveling_service import SongLevelingService

router = APIRouter(tags=["difficulty"])


@router.get("/songs/{song_id}/difficulty", response_model=Envelope[SongDifficultyRead])
async def get_song_difficulty(
    song_id: int,
    recompute: bool = False,
    db: Session = Depends(get_db),
    scorer: DifficultyScorer = Depends(get_difficulty_scorer),
):
    """
    Difficulty metrics and level of one song

    - **song_id**: Song to score
    - **recompute**: Score again even when metrics are stored
    """
    song = db.get(Song, song_id)
    if song is None:
        raise SongNotFoundError(song_id)

    stored = song.metrics
    if stored is not None and not recompute:
        return Envelope(
            status="ok",
            data=SongDifficultyRead(
                song_id=song.id,
                title=song.title,
                artist=song.artist,
                metrics=DifficultyMetricsRead.model_validate(stored),
                difficulty_score=stored.difficulty_score,
                level=song.level if song.level is not None else assign_level(stored.difficulty_score),
                cached=True,
            )
        )

    service = SongLevelingService(db, scorer, get_settings().extraction)
    with record_difficulty_latency():
        result = service.level_song(song)

    return Envelope(
        status="ok",
        data=SongDifficultyRead(
            song_id=song.id,
            title=song.title,
            artist=song.artist,
            metrics=DifficultyMetricsRead(**result.metrics.to_dict()),
            difficulty_score=result.difficulty_score,
            level=result.level,
            cached=False,
        )
    )


@router.get("/levels", response_model=Envelope[LevelsResponse])
async def list_levels(db: Session = Depends(get_db)):
    """Leveled songs grouped by level, easiest first"""
    songs = db.execute(
        select(Song)
        .options(selectinload(Song.metrics))
        .where(Song.level.is_not(None))
        .order_by(Song.level.asc(), Song.title.asc())
    ).scalars().all()

    levels = {}
    for song in songs:
        levels.setdefault(str(song.level), []).append(LeveledSongRead(
            id=song.id,
            title=song.title,
            artist=song.artist,
            level=song.level,
            difficulty_score=song.metrics.difficulty_score if song.metrics else None,
        ))

    average_level = sum(s.level for s in songs) / len(songs) if songs else 0.0

    return Envelope(
        status="ok",
        data=LevelsResponse(levels=levels, total_songs=len(songs), average_level=average_level)
    )
