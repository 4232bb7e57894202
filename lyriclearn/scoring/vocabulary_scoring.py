"""
Vocabulary usefulness scoring for single words.

Words are filtered (stopwords, basic verbs, very short or non-Spanish
tokens), tagged with a part of speech guessed from their suffix and scored
on three things: how close their frequency is to the moderately common
sweet spot (Zipf 3.5), the teaching priority of their part of speech, and a
small bonus for longer, more specific words.
"""
import re
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Iterable, List, Optional

from lyriclearn.scoring.categories import (
    VOCABULARY_THRESHOLD,
    clamp,
    is_useful_vocabulary,
)
from lyriclearn.scoring.frequency import (
    FrequencyTable,
    get_default_frequency_table,
    normalize_word,
)

UNKNOWN_WORD_FREQUENCY = 1.0

# Minimum score for a word to survive batch ranking
MIN_RANKING_SCORE = 0.3

SPANISH_STOPWORDS = frozenset([
    "el", "la", "de", "que", "y", "a", "en", "un", "ser", "se",
    "no", "haber", "por", "con", "su", "para", "como", "estar",
    "tener", "le", "lo", "todo", "pero", "más", "hacer", "o",
    "poder", "decir", "este", "ir", "otro", "ese", "si",
    "me", "ya", "ver", "porque", "dar", "cuando", "él", "muy",
    "sin", "vez", "mucho", "saber", "qué", "sobre", "mi", "alguno",
    "mismo", "yo", "también", "hasta", "año", "dos", "querer", "entre",
    "así", "primero", "desde", "grande", "eso", "ni", "nos", "llegar",
    "pasar", "tiempo", "ella", "sí", "día", "uno", "bien", "poco",
    "deber", "entonces", "poner", "cosa", "tanto", "hombre", "parecer",
    "nuestro", "tan", "donde", "ahora", "parte", "después", "vida",
    "quedar", "siempre", "creer", "hablar", "llevar", "dejar", "nada",
    "cada", "seguir", "menos", "nuevo", "encontrar", "te", "del", "al",
    "las", "los", "una", "tu", "les", "sus",
])

# Infinitives too common to be worth teaching as vocabulary
BASIC_VERBS = frozenset([
    "ser", "estar", "haber", "tener", "hacer", "poder", "decir", "ir",
    "ver", "dar", "saber", "querer", "llegar", "pasar", "deber", "poner",
    "parecer", "quedar", "creer", "hablar", "llevar", "dejar", "seguir",
    "encontrar", "llamar", "venir", "pensar", "salir", "volver", "tomar",
    "conocer", "vivir",
])

SPANISH_WORD = re.compile(r"^[a-záéíóúñü]+$", re.IGNORECASE)


class PartOfSpeech(str, Enum):
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    PRONOUN = "pronoun"
    ARTICLE = "article"
    OTHER = "other"


# Learning priority by part of speech. Only noun, verb, adjective and adverb
# are produced by the suffix classifier; the rest keep their weights for
# callers that tag words some other way.
POS_WEIGHTS = {
    PartOfSpeech.NOUN: 1.0,
    PartOfSpeech.VERB: 0.9,
    PartOfSpeech.ADJECTIVE: 0.8,
    PartOfSpeech.ADVERB: 0.6,
    PartOfSpeech.PREPOSITION: 0.3,
    PartOfSpeech.CONJUNCTION: 0.2,
    PartOfSpeech.PRONOUN: 0.1,
    PartOfSpeech.ARTICLE: 0.0,
    PartOfSpeech.OTHER: 0.5,
}

VERB_ENDINGS = ("ar", "er", "ir")
ADJECTIVE_ENDINGS = ("oso", "osa", "able", "ible", "ante", "ente", "iente")
ADVERB_ENDING = "mente"
NOUN_ENDINGS = (
    "ción", "sión", "dad", "tad", "tud", "umbre", "anza", "encia", "miento", "amiento",
)


@dataclass(frozen=True)
class VocabularyScore:
    word: str
    score: float
    frequency: float
    part_of_speech: PartOfSpeech

    @property
    def is_useful(self) -> bool:
        return is_useful_vocabulary(self.score)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["part_of_speech"] = self.part_of_speech.value
        return data


def identify_part_of_speech(word: str) -> PartOfSpeech:
    """Guess the part of speech from the word's ending; defaults to noun."""
    lowercased = word.lower()

    if lowercased.endswith(VERB_ENDINGS) and len(lowercased) > 3:
        return PartOfSpeech.VERB
    if lowercased.endswith(ADJECTIVE_ENDINGS):
        return PartOfSpeech.ADJECTIVE
    if lowercased.endswith(ADVERB_ENDING) and len(lowercased) > 5:
        return PartOfSpeech.ADVERB
    if lowercased.endswith(NOUN_ENDINGS):
        return PartOfSpeech.NOUN
    return PartOfSpeech.NOUN


def frequency_optimality(frequency: float) -> float:
    """Peaks at Zipf 3.5; very common and very rare words score low."""
    if 2.0 <= frequency <= 5.0:
        return max(0.0, 1 - abs(frequency - 3.5) / 1.5)
    if frequency > 5.0:
        return max(0.0, 0.3 - (frequency - 5.0) * 0.1)
    return max(0.0, 0.4 - (2.0 - frequency) * 0.2)


def length_bonus(word: str) -> float:
    return min(0.2, (len(word) - 3) * 0.02)


def is_eligible_word(normalized_word: str) -> bool:
    if normalized_word in SPANISH_STOPWORDS or normalized_word in BASIC_VERBS:
        return False
    if len(normalized_word) < 3:
        return False
    return bool(SPANISH_WORD.match(normalized_word))


class VocabularyScorer:
    """Scores and ranks candidate vocabulary words."""

    def __init__(self, frequency_table: FrequencyTable):
        self.frequency_table = frequency_table

    def word_frequency(self, word: str) -> float:
        freq = self.frequency_table.lookup(word)
        return freq if freq is not None else UNKNOWN_WORD_FREQUENCY

    def score(self, word: str) -> Optional[VocabularyScore]:
        """
        Score a single word.

        Returns:
            VocabularyScore, or None when the word is not eligible
            (stopword, basic verb, shorter than 3 letters, non-Spanish
            characters)
        """
        normalized = normalize_word(word)
        if not is_eligible_word(normalized):
            return None

        frequency = self.word_frequency(normalized)
        part_of_speech = identify_part_of_speech(normalized)
        pos_weight = POS_WEIGHTS.get(part_of_speech, POS_WEIGHTS[PartOfSpeech.OTHER])

        score = clamp(
            frequency_optimality(frequency) * 0.6
            + pos_weight * 0.3
            + length_bonus(normalized)
        )

        return VocabularyScore(
            word=normalized,
            score=score,
            frequency=frequency,
            part_of_speech=part_of_speech,
        )

    def top(self, words: Iterable[str], limit: int = 100) -> List[VocabularyScore]:
        """
        Rank a stream of candidate words.

        Each normalized word is scored once (first occurrence wins); words
        scoring 0.3 or less are dropped. Ties keep first-seen order.
        """
        seen = set()
        scored: List[VocabularyScore] = []

        for word in words:
            normalized = normalize_word(word)
            if normalized in seen:
                continue
            seen.add(normalized)

            result = self.score(word)
            if result is not None and result.score > MIN_RANKING_SCORE:
                scored.append(result)

        scored.sort(key=lambda s: s.score, reverse=True)
        return scored[:max(0, limit)]


def score_vocabulary_word(
    word: str,
    frequency_table: Optional[FrequencyTable] = None,
) -> Optional[VocabularyScore]:
    table = frequency_table if frequency_table is not None else get_default_frequency_table()
    return VocabularyScorer(table).score(word)


def get_top_vocabulary(
    words: Iterable[str],
    limit: int = 100,
    frequency_table: Optional[FrequencyTable] = None,
) -> List[VocabularyScore]:
    table = frequency_table if frequency_table is not None else get_default_frequency_table()
    return VocabularyScorer(table).top(words, limit)


__all__ = [
    "PartOfSpeech",
    "POS_WEIGHTS",
    "VOCABULARY_THRESHOLD",
    "VocabularyScore",
    "VocabularyScorer",
    "get_top_vocabulary",
    "identify_part_of_speech",
    "is_useful_vocabulary",
    "score_vocabulary_word",
]
