"""
Song Leveling Service - scores song difficulty and assigns levels 1-10
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from lyriclearn.config.settings import ExtractionSettings
from lyriclearn.core.exceptions import DifficultyScoringError, LyricsParseError
from lyriclearn.models.difficulty import SongMetrics
from lyriclearn.models.song import Song
from lyriclearn.scoring.difficulty import (
    Baselines,
    DifficultyMetrics,
    DifficultyResult,
    DifficultyScorer,
    level_distribution,
)
from lyriclearn.scoring.morphology import analyze_lines
from lyriclearn.services.lyrics import parse_song_lyrics

logger = logging.getLogger(__name__)


@dataclass
class LevelingReport:
    songs_scored: int = 0
    songs_failed: int = 0
    recalibrated: bool = False
    baselines: Optional[Baselines] = None
    level_distribution: Dict[str, int] = field(default_factory=dict)


class SongLevelingService:
    """Computes and stores difficulty metrics and levels for songs"""

    def __init__(
        self,
        db: Session,
        scorer: DifficultyScorer,
        settings: Optional[ExtractionSettings] = None,
    ):
        self.db = db
        self.scorer = scorer
        self.settings = settings or ExtractionSettings()

    def song_metrics(self, song: Song) -> DifficultyMetrics:
        """
        Raises:
            LyricsParseError: if the stored lyrics are malformed
            DifficultyScoringError: if the lyrics contain no words
        """
        lyrics = parse_song_lyrics(song)
        try:
            return self.scorer.compute_metrics(analyze_lines(lyrics.lines))
        except DifficultyScoringError as e:
            raise DifficultyScoringError(e.details["reason"], song_id=song.id)

    def score_song(self, song: Song) -> DifficultyResult:
        metrics = self.song_metrics(song)
        return DifficultyResult(metrics=metrics, difficulty_score=self.scorer.score_metrics(metrics))

    def store(self, song: Song, result: DifficultyResult) -> SongMetrics:
        """Upsert the song's metrics row and set its level (not committed)."""
        row = song.metrics
        if row is None:
            row = SongMetrics(song_id=song.id)
            song.metrics = row

        for name, value in result.metrics.to_dict().items():
            setattr(row, name, value)
        row.difficulty_score = result.difficulty_score
        song.level = result.level
        return row

    def level_song(self, song: Song) -> DifficultyResult:
        """Score one song with the current baselines and store the result."""
        result = self.score_song(song)
        self.store(song, result)
        self.db.commit()
        return result

    def run(self, recalibrate: Optional[bool] = None) -> LevelingReport:
        """
        Level every song that has lyrics.

        Metrics are computed for the whole corpus first. When recalibration is
        on and enough songs were scored, baselines are recomputed from those
        metrics before any score is assigned. Songs with malformed or empty
        lyrics are logged and skipped.
        """
        if recalibrate is None:
            recalibrate = self.settings.recalibrate_baselines
        report = LevelingReport()

        songs = self.db.execute(
            select(Song).where(Song.lyrics_raw.is_not(None)).order_by(Song.id)
        ).scalars().all()
        logger.info(f"Found {len(songs)} songs with lyrics")

        scored: List[Tuple[Song, DifficultyMetrics]] = []
        for song in songs:
            try:
                scored.append((song, self.song_metrics(song)))
            except (LyricsParseError, DifficultyScoringError) as e:
                report.songs_failed += 1
                logger.error(
                    f"Error scoring {song.title}: {e.message}",
                    extra={'song_id': song.id, 'details': e.details}
                )

        scorer = self.scorer
        if recalibrate and len(scored) >= self.settings.min_songs_for_calibration:
            scorer = scorer.with_baselines(Baselines.from_metrics([m for _, m in scored]))
            report.recalibrated = True
            logger.info(f"Recalibrated difficulty baselines from {len(scored)} songs")
        report.baselines = scorer.baselines

        scores = []
        for song, metrics in scored:
            result = DifficultyResult(metrics=metrics, difficulty_score=scorer.score_metrics(metrics))
            self.store(song, result)
            scores.append(result.difficulty_score)

        self.db.commit()
        report.songs_scored = len(scored)
        report.level_distribution = level_distribution(scores)

        logger.info(
            f"Song leveling complete: {report.songs_scored} songs leveled "
            f"({report.songs_failed} failed)"
        )
        return report
