"""
Vocabulary Extraction Service - ranks lyric words and stores the most useful ones
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from lyriclearn.config.settings import ExtractionSettings
from lyriclearn.core.exceptions import LyricsParseError
from lyriclearn.models.song import Song
from lyriclearn.models.vocabulary import Vocabulary
from lyriclearn.scoring.vocabulary_scoring import VocabularyScore, VocabularyScorer
from lyriclearn.services.glossary import translate_word
from lyriclearn.services.lyrics import parse_song_lyrics

logger = logging.getLogger(__name__)

_LYRIC_PUNCTUATION = re.compile(r"""[¿?¡!.,;:'"()\[\]{}]""")


def tokenize_lyric_line(line: str) -> List[str]:
    """Lowercase, blank out punctuation and keep tokens longer than two characters."""
    cleaned = _LYRIC_PUNCTUATION.sub(" ", line.lower())
    return [token for token in cleaned.split() if len(token) > 2]


def collect_words(
    lines: Iterable[str],
    max_examples: int = 3,
    min_example_length: int = 10,
    examples: Optional[Dict[str, List[str]]] = None,
) -> Tuple[List[str], Dict[str, List[str]]]:
    """
    Tokenize lyric lines.

    Returns every token in order of appearance plus, for each token, up to
    ``max_examples`` of the first lines longer than ``min_example_length``
    that contain it. Pass ``examples`` to keep accumulating across songs.
    """
    words: List[str] = []
    examples = {} if examples is None else examples

    for line in lines:
        if not isinstance(line, str) or not line.strip():
            continue

        tokens = tokenize_lyric_line(line)
        words.extend(tokens)

        for token in tokens:
            bucket = examples.setdefault(token.strip(), [])
            if len(bucket) < max_examples and len(line) > min_example_length:
                bucket.append(line.strip())

    return words, examples


@dataclass
class SongVocabularyWord:
    score: VocabularyScore
    translation: str
    examples: List[str] = field(default_factory=list)


@dataclass
class VocabularyReport:
    songs_processed: int = 0
    songs_failed: int = 0
    total_words: int = 0
    stored: int = 0
    top_words: List[VocabularyScore] = field(default_factory=list)


class VocabularyExtractionService:
    """Builds the global vocabulary table and per-song word lists"""

    def __init__(
        self,
        db: Session,
        scorer: VocabularyScorer,
        settings: Optional[ExtractionSettings] = None,
    ):
        self.db = db
        self.scorer = scorer
        self.settings = settings or ExtractionSettings()

    def run(self, limit: Optional[int] = None) -> VocabularyReport:
        """
        Replace the vocabulary table with the top words across all songs.

        Songs with malformed stored lyrics are logged and skipped.
        """
        limit = limit or self.settings.vocabulary_limit
        report = VocabularyReport()

        cleared = self.db.execute(delete(Vocabulary)).rowcount
        if cleared:
            logger.info(f"Cleared {cleared} existing vocabulary rows")

        songs = self.db.execute(
            select(Song).where(Song.lyrics_raw.is_not(None)).order_by(Song.id)
        ).scalars().all()
        logger.info(f"Found {len(songs)} songs with lyrics")

        all_words: List[str] = []
        examples: Dict[str, List[str]] = {}

        for song in songs:
            try:
                lyrics = parse_song_lyrics(song)
            except LyricsParseError as e:
                report.songs_failed += 1
                logger.error(
                    f"Error parsing lyrics for {song.title}: {e.message}",
                    extra={'song_id': song.id, 'details': e.details}
                )
                continue

            words, _ = collect_words(
                lyrics.lines,
                max_examples=self.settings.max_examples_per_word,
                min_example_length=self.settings.min_example_length,
                examples=examples,
            )
            all_words.extend(words)
            report.songs_processed += 1

        report.total_words = len(all_words)
        logger.info(f"Collected {len(all_words)} total words")

        ranked = self.scorer.top(all_words, limit)
        logger.info(f"Found {len(ranked)} useful vocabulary words")

        for entry in ranked:
            self.db.add(Vocabulary(
                word=entry.word,
                translation=translate_word(entry.word),
                part_of_speech=entry.part_of_speech.value,
                frequency=entry.frequency,
                usefulness_score=entry.score,
                examples=examples.get(entry.word, []),
            ))

        self.db.commit()
        report.stored = len(ranked)
        report.top_words = ranked[:self.settings.report_top_n]

        logger.info(
            f"Vocabulary extraction complete: {report.stored} words from "
            f"{report.songs_processed} songs ({report.songs_failed} failed)"
        )
        return report

    def song_vocabulary(self, song: Song, limit: Optional[int] = None) -> List[SongVocabularyWord]:
        """
        Top words of a single song with example lines.

        Raises:
            LyricsParseError: if the song's stored lyrics are malformed
        """
        limit = limit or self.settings.song_vocabulary_limit
        lyrics = parse_song_lyrics(song)

        words, examples = collect_words(
            lyrics.lines,
            max_examples=self.settings.max_examples_per_word,
            min_example_length=self.settings.min_example_length,
        )
        ranked = self.scorer.top(words, limit)

        stored = {}
        if ranked:
            stored = {
                row.word: row.translation
                for row in self.db.execute(
                    select(Vocabulary).where(Vocabulary.word.in_([r.word for r in ranked]))
                ).scalars()
            }

        return [
            SongVocabularyWord(
                score=entry,
                translation=stored.get(entry.word) or translate_word(entry.word),
                examples=examples.get(entry.word, []),
            )
            for entry in ranked
        ]

