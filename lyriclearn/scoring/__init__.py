"""
Phrase and vocabulary usefulness scoring and song difficulty.

Pure functions over text plus a read-only word frequency table.
"""

from .categories import (
    PHRASE_CATEGORIES,
    USEFULNESS_THRESHOLD,
    VOCABULARY_THRESHOLD,
    CategoryInfo,
    PhraseCategory,
    is_useful_phrase,
    is_useful_vocabulary,
)
from .difficulty import (
    Baselines,
    DifficultyMetrics,
    DifficultyResult,
    DifficultyScorer,
    assign_level,
    level_distribution,
)
from .frequency import (
    FrequencyTable,
    get_default_frequency_table,
    load_frequency_table,
)
from .phrase_scoring import (
    PhraseScore,
    PhraseScorer,
    PhraseUsefulnessFactors,
    score_phrase_usefulness,
)
from .vocabulary_scoring import (
    PartOfSpeech,
    VocabularyScore,
    VocabularyScorer,
    get_top_vocabulary,
    score_vocabulary_word,
)

__all__ = [
    "PHRASE_CATEGORIES",
    "USEFULNESS_THRESHOLD",
    "VOCABULARY_THRESHOLD",
    "CategoryInfo",
    "PhraseCategory",
    "is_useful_phrase",
    "is_useful_vocabulary",
    "Baselines",
    "DifficultyMetrics",
    "DifficultyResult",
    "DifficultyScorer",
    "assign_level",
    "level_distribution",
    "FrequencyTable",
    "get_default_frequency_table",
    "load_frequency_table",
    "PhraseScore",
    "PhraseScorer",
    "PhraseUsefulnessFactors",
    "score_phrase_usefulness",
    "PartOfSpeech",
    "VocabularyScore",
    "VocabularyScorer",
    "get_top_vocabulary",
    "score_vocabulary_word",
]
