"""
Dependency injection setup for FastAPI.

The ServiceContainer owns the read-only frequency table and the phrase,
vocabulary and difficulty scorers built on it. It is initialized once in the
application lifespan and shared by every request.
"""

from fastapi import Request
from typing import Optional
import logging
import threading

from lyriclearn.config.settings import Settings, get_settings
from lyriclearn.core.exceptions import ServiceUnavailableError
from lyriclearn.scoring.difficulty import DifficultyScorer, load_idioms
from lyriclearn.scoring.frequency import FrequencyTable, load_frequency_table
from lyriclearn.scoring.phrase_scoring import PhraseScorer
from lyriclearn.scoring.vocabulary_scoring import VocabularyScorer


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for the scoring services with lifecycle management.
    """

    def __init__(self, frequency_table: Optional[FrequencyTable] = None):
        self._frequency_table = frequency_table
        self._phrase_scorer: Optional[PhraseScorer] = None
        self._vocabulary_scorer: Optional[VocabularyScorer] = None
        self._difficulty_scorer: Optional[DifficultyScorer] = None
        self._initialized = False
        self._initialization_lock = threading.Lock()

    def initialize_services(self, settings: Optional[Settings] = None) -> None:
        """
        Load the frequency table (unless one was injected) and build the scorers.

        Raises:
            FrequencyTableError: if the configured table cannot be loaded
            DifficultyScoringError: if the configured idiom list cannot be loaded
        """
        with self._initialization_lock:
            if self._initialized:
                return

            settings = settings or get_settings()
            logger.info("Initializing service container")

            if self._frequency_table is None:
                self._frequency_table = load_frequency_table(
                    settings.scoring.frequency_table_path
                )

            self._phrase_scorer = PhraseScorer(self._frequency_table)
            self._vocabulary_scorer = VocabularyScorer(self._frequency_table)
            self._difficulty_scorer = DifficultyScorer(
                self._frequency_table,
                idioms=load_idioms(settings.scoring.idioms_path),
            )
            self._initialized = True

            logger.info(
                "Service container initialized",
                extra={
                    'frequency_table': self._frequency_table.source,
                    'frequency_table_words': len(self._frequency_table),
                }
            )

    def cleanup_services(self) -> None:
        with self._initialization_lock:
            self._phrase_scorer = None
            self._vocabulary_scorer = None
            self._difficulty_scorer = None
            self._initialized = False
        logger.info("Service container cleaned up")

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def frequency_table(self) -> FrequencyTable:
        if not self._initialized:
            raise ServiceUnavailableError("frequency_table")
        return self._frequency_table

    @property
    def phrase_scorer(self) -> PhraseScorer:
        if not self._initialized:
            raise ServiceUnavailableError("phrase_scorer")
        return self._phrase_scorer

    @property
    def vocabulary_scorer(self) -> VocabularyScorer:
        if not self._initialized:
            raise ServiceUnavailableError("vocabulary_scorer")
        return self._vocabulary_scorer

    @property
    def difficulty_scorer(self) -> DifficultyScorer:
        if not self._initialized:
            raise ServiceUnavailableError("difficulty_scorer")
        return self._difficulty_scorer


def get_service_container(request: Request) -> ServiceContainer:
    container = getattr(request.app.state, 'service_container', None)
    if container is None:
        raise ServiceUnavailableError("service_container")
    return container


def get_phrase_scorer(request: Request) -> PhraseScorer:
    return get_service_container(request).phrase_scorer


def get_vocabulary_scorer(request: Request) -> VocabularyScorer:
    return get_service_container(request).vocabulary_scorer


def get_difficulty_scorer(request: Request) -> DifficultyScorer:
    return get_service_container(request).difficulty_scorer
