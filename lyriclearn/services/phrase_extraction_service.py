"""
Phrase Extraction Service - batch job that turns song lyrics into useful phrases
"""
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from lyriclearn.config.settings import ExtractionSettings
from lyriclearn.core.exceptions import LyricsParseError
from lyriclearn.models.phrase import Phrase, PhraseCategoryRecord
from lyriclearn.models.song import Song
from lyriclearn.scoring.categories import PHRASE_CATEGORIES, is_useful_phrase
from lyriclearn.scoring.phrase_scoring import PhraseScorer
from lyriclearn.services.lyrics import (
    find_translation,
    parse_song_lyrics,
    parse_translation_lines,
)

logger = logging.getLogger(__name__)


@dataclass
class ExtractedPhrase:
    original_text: str
    translated_text: str
    line_index: int
    timestamp: Optional[float]
    usefulness_score: float
    category: str
    word_count: int


@dataclass
class ExtractionReport:
    songs_processed: int = 0
    songs_failed: int = 0
    total_phrases: int = 0
    category_counts: Dict[str, int] = field(default_factory=dict)
    top_phrases: List[Phrase] = field(default_factory=list)


def extract_song_phrases(
    lines: Sequence[str],
    translated_lines: Sequence[str],
    scorer: PhraseScorer,
    artist: Optional[str] = None,
    synced_times: Sequence[Optional[float]] = (),
    min_line_length: int = 5,
) -> List[ExtractedPhrase]:
    """
    Score aligned lyric/translation lines and keep the useful ones.

    Lines are skipped when empty, untranslated, shorter than
    ``min_line_length`` or equal to the artist name.
    """
    artist_name = (artist or "").strip().lower()
    phrases = []

    for i, line in enumerate(lines):
        original_line = (line or "").strip()
        translated_line = (translated_lines[i] if i < len(translated_lines) else "") or ""
        translated_line = translated_line.strip()

        if not original_line or not translated_line or len(original_line) < min_line_length:
            continue
        if artist_name and original_line.lower() == artist_name:
            continue

        timestamp = synced_times[i] if i < len(synced_times) else None

        result = scorer.score(original_line)
        if not is_useful_phrase(result.score):
            continue

        phrases.append(ExtractedPhrase(
            original_text=original_line,
            translated_text=translated_line,
            line_index=i,
            timestamp=timestamp,
            usefulness_score=result.score,
            category=result.category.value,
            word_count=len(original_line.split()),
        ))

    return phrases


class PhraseExtractionService:
    """Extracts, scores and stores useful phrases for every translated song"""

    def __init__(
        self,
        db: Session,
        scorer: PhraseScorer,
        settings: Optional[ExtractionSettings] = None,
    ):
        self.db = db
        self.scorer = scorer
        self.settings = settings or ExtractionSettings()

    def initialize_categories(self) -> int:
        """Create or refresh one row per phrase category."""
        existing = {
            row.name: row
            for row in self.db.execute(select(PhraseCategoryRecord)).scalars()
        }

        for category, info in PHRASE_CATEGORIES.items():
            row = existing.get(category.value)
            if row is None:
                self.db.add(PhraseCategoryRecord(
                    name=category.value,
                    display_name=info.display_name,
                    icon=info.icon,
                    order=info.order,
                    description=f"Collection of {info.display_name.lower()}",
                    phrase_count=0,
                ))
            else:
                row.display_name = info.display_name
                row.icon = info.icon
                row.order = info.order

        self.db.flush()
        logger.info(f"Initialized {len(PHRASE_CATEGORIES)} phrase categories")
        return len(PHRASE_CATEGORIES)

    def extract_from_song(self, song: Song) -> List[ExtractedPhrase]:
        """
        Extract useful phrases from one song.

        Raises:
            LyricsParseError: if the stored lyrics or translation are malformed
        """
        if not song.lyrics_raw:
            return []

        translation = find_translation(song, self.settings.translation_language)
        if translation is None or not translation.lyrics_lines:
            logger.warning(
                f"No {self.settings.translation_language} translation found for song: {song.title}",
                extra={'song_id': song.id}
            )
            return []

        lyrics = parse_song_lyrics(song)
        translated_lines = parse_translation_lines(translation)

        return extract_song_phrases(
            lyrics.lines,
            translated_lines,
            self.scorer,
            artist=song.artist,
            synced_times=lyrics.synced_times,
            min_line_length=self.settings.min_line_length,
        )

    def update_category_counts(self, counts: Optional[Dict[str, int]] = None) -> None:
        """Store per-category phrase counts (recounted from the table when not given)."""
        if counts is None:
            counts = Counter(self.db.execute(select(Phrase.category)).scalars())

        for row in self.db.execute(select(PhraseCategoryRecord)).scalars():
            row.phrase_count = counts.get(row.name, 0)
        self.db.flush()

    def run(self, clear_existing: bool = True) -> ExtractionReport:
        """
        Extract phrases from every song that has lyrics and translations.

        Songs with malformed stored lyrics are logged and skipped.
        """
        report = ExtractionReport()
        self.initialize_categories()

        if clear_existing:
            deleted = self.db.execute(delete(Phrase)).rowcount
            if deleted:
                logger.info(f"Cleared {deleted} existing phrases")

        songs = self.db.execute(
            select(Song)
            .where(Song.lyrics_raw.is_not(None), Song.has_translations.is_(True))
            .order_by(Song.id)
        ).scalars().all()
        logger.info(f"Found {len(songs)} songs to process")

        category_counts: Counter = Counter()

        for song in songs:
            try:
                phrases = self.extract_from_song(song)
            except LyricsParseError as e:
                report.songs_failed += 1
                logger.error(
                    f"Error processing song {song.title}: {e.message}",
                    extra={'song_id': song.id, 'details': e.details}
                )
                continue

            report.songs_processed += 1

            if not phrases:
                logger.info(f"No useful phrases in {song.title} by {song.artist}")
                continue

            self.db.add_all(
                Phrase(song_id=song.id, **vars(p)) for p in phrases
            )
            report.total_phrases += len(phrases)
            category_counts.update(p.category for p in phrases)
            logger.info(
                f"Extracted {len(phrases)} phrases from {song.title} by {song.artist}",
                extra={'song_id': song.id, 'phrase_count': len(phrases)}
            )

        self.db.flush()
        if clear_existing:
            self.update_category_counts(dict(category_counts))
        else:
            self.update_category_counts()
        self.db.commit()

        report.category_counts = dict(category_counts)
        if self.settings.report_top_n:
            report.top_phrases = self.db.execute(
                select(Phrase)
                .order_by(Phrase.usefulness_score.desc())
                .limit(self.settings.report_top_n)
            ).scalars().all()

        logger.info(
            f"Phrase extraction complete: {report.total_phrases} phrases from "
            f"{report.songs_processed} songs ({report.songs_failed} failed)"
        )
        return report
