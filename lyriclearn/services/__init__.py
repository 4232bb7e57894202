"""
Batch jobs that populate phrases, vocabulary and song levels from stored
song lyrics.
"""

from .phrase_extraction_service import PhraseExtractionService, extract_song_phrases
from .phrase_dedup_service import PhraseDeduplicationService, normalize_translation
from .song_leveling_service import SongLevelingService
from .vocabulary_extraction_service import (
    VocabularyExtractionService,
    collect_words,
    tokenize_lyric_line,
)

__all__ = [
    "PhraseExtractionService",
    "extract_song_phrases",
    "PhraseDeduplicationService",
    "normalize_translation",
    "SongLevelingService",
    "VocabularyExtractionService",
    "collect_words",
    "tokenize_lyric_line",
]
