"""
SQLAlchemy models for songs, extracted phrases, ranked vocabulary and
song difficulty metrics.
"""

from .song import Song, SongTranslation
from .phrase import Phrase, PhraseCategoryRecord
from .vocabulary import Vocabulary
from .difficulty import SongMetrics

__all__ = [
    "Song",
    "SongTranslation",
    "Phrase",
    "PhraseCategoryRecord",
    "Vocabulary",
    "SongMetrics",
]
