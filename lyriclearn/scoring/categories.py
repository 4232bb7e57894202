"""
Phrase categories and usefulness thresholds.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class PhraseCategory(str, Enum):
    """Pedagogical category assigned to a scored lyric line"""
    GREETINGS = "greetings"
    QUESTIONS = "questions"
    EXPRESSIONS = "expressions"
    ACTIONS = "actions"
    TIME = "time"
    EMOTIONS = "emotions"
    CONNECTORS = "connectors"
    VOCABULARY = "vocabulary"


DEFAULT_CATEGORY = PhraseCategory.VOCABULARY


@dataclass(frozen=True)
class CategoryInfo:
    display_name: str
    icon: str
    order: int


PHRASE_CATEGORIES = MappingProxyType({
    PhraseCategory.GREETINGS: CategoryInfo("Greetings & Farewells", "hand", 1),
    PhraseCategory.QUESTIONS: CategoryInfo("Questions", "help-circle", 2),
    PhraseCategory.EXPRESSIONS: CategoryInfo("Common Expressions", "message-square", 3),
    PhraseCategory.ACTIONS: CategoryInfo("Actions & Verbs", "activity", 4),
    PhraseCategory.TIME: CategoryInfo("Time & Frequency", "clock", 5),
    PhraseCategory.EMOTIONS: CategoryInfo("Emotions & Feelings", "heart", 6),
    PhraseCategory.CONNECTORS: CategoryInfo("Connectors", "link", 7),
    PhraseCategory.VOCABULARY: CategoryInfo("General Vocabulary", "book-open", 8),
})

# Minimum score for a lyric line to be kept as a useful phrase
USEFULNESS_THRESHOLD = 0.4

# Minimum score for a word to be considered useful vocabulary
VOCABULARY_THRESHOLD = 0.4


def is_useful_phrase(score: float) -> bool:
    """True when a phrase score reaches ``USEFULNESS_THRESHOLD``."""
    return score >= USEFULNESS_THRESHOLD


def is_useful_vocabulary(score: float) -> bool:
    """True when a word score reaches ``VOCABULARY_THRESHOLD``."""
    return score >= VOCABULARY_THRESHOLD


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Bound ``value`` to the closed range [low, high]."""
    return min(high, max(low, value))
