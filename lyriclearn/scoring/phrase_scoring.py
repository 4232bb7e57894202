"""
Phrase usefulness scoring for lyric lines.

Ranks a line of Spanish lyrics by how useful it is to teach as a phrase and
assigns it a pedagogical category. Scoring is a weighted combination of three
factors:

- 50% word frequency (how common the words are)
- 30% common expressions (does the line contain a useful construction)
- 20% repetitiveness (penalizes filler and musical nonsense)

Phrase length, verb complexity, question and greeting factors are still
computed by their helpers but reported as 0 and left out of the weighted
score. Category assignment runs its own ordered pattern checks.
"""
import re
from dataclasses import dataclass, asdict
from typing import Optional, Sequence

from lyriclearn.scoring.categories import (
    DEFAULT_CATEGORY,
    PhraseCategory,
    USEFULNESS_THRESHOLD,
    clamp,
    is_useful_phrase,
)
from lyriclearn.scoring.frequency import (
    FrequencyTable,
    get_default_frequency_table,
)


# Word characters and boundaries are ASCII-only: accented letters count as
# non-word characters, so "sé" followed by a space is not a whole word.
_WORD_CHAR = "A-Za-z0-9_"
_BOUNDARY = (
    rf"(?:(?<=[{_WORD_CHAR}])(?![{_WORD_CHAR}])"
    rf"|(?<![{_WORD_CHAR}])(?=[{_WORD_CHAR}]))"
)


def _ascii_words(pattern: str) -> str:
    return pattern.replace(r"\b", _BOUNDARY)


def _compile(patterns: Sequence[str], flags: int = re.IGNORECASE) -> tuple:
    return tuple(re.compile(_ascii_words(p), flags) for p in patterns)


GREETING_PATTERNS = _compile([
    r"^hola\b",
    r"buenos?\s+(d[íi]as?|tardes?|noches?)",
    r"buenas?\s+(tardes?|noches?)",
    r"hasta\s+(luego|pronto|ma[ñn]ana|la vista)",
    r"adi[óo]s",
    r"nos vemos",
    r"c[óo]mo est[áa]s?",
    r"qu[ée] tal",
    r"c[óo]mo te va",
    r"encantado",
    r"mucho gusto",
])

QUESTION_PATTERNS = (
    re.compile(r"^[¿¡]"),
    re.compile(
        _ascii_words(r"\b(qu[ée]|qui[ée]n|c[óo]mo|cu[áa]ndo|d[óo]nde|cu[áa]nto|por qu[ée]|para qu[ée])\b"),
        re.IGNORECASE,
    ),
    re.compile(r"\?$"),
)

COMMON_EXPRESSIONS = _compile([
    # Preferences and desires
    r"me gusta",
    r"me encanta",
    r"prefiero",
    r"quiero",
    r"necesito",
    r"deseo",

    # Common phrases
    r"no s[ée]",
    r"no entiendo",
    r"no importa",
    r"no hay problema",
    r"puedo",
    r"puedes",
    r"tengo que",
    r"tienes que",
    r"hay que",
    r"vamos a",
    r"voy a",
    r"vas a",

    # Personal information
    r"me llamo",
    r"mi nombre es",
    r"soy de",
    r"vengo de",
    r"vivo en",
    r"trabajo en",

    # Politeness
    r"gracias",
    r"muchas gracias",
    r"por favor",
    r"de nada",
    r"lo siento",
    r"perd[óo]n",
    r"disculpa",
    r"con permiso",

    # Agreement / understanding
    r"est[áa] bien",
    r"vale",
    r"claro",
    r"por supuesto",
    r"de acuerdo",
    r"entiendo",

    # Uncertainty
    r"tal vez",
    r"quiz[áa]s",
    r"a lo mejor",
    r"no estoy seguro",

    # Time expressions
    r"ahora mismo",
    r"en este momento",
    r"todos los d[íi]as",
    r"cada d[íi]a",
    r"siempre",
    r"nunca",
    r"a veces",

    # Basic questions / responses
    r"cu[áa]nto cuesta",
    r"d[óo]nde est[áa]",
    r"qu[ée] es",
    r"c[óo]mo se dice",
    r"puedes repetir",
    r"hablas ingl[ée]s",

    # Common verb forms
    r"tengo",
    r"tienes",
    r"tiene",
    r"estoy",
    r"est[áa]s",
    r"est[áa]",
    r"voy",
    r"vas",
    r"va",
])

# Lines made of filler syllables, interjections or English endearments
EXCLUDE_PATTERNS = _compile([
    r"^(la|el|na|oh|ah|hey|ay|ey)\s+(la|el|na|oh|ah|hey|ay|ey)",
    r"^(oh|ah|uh|mm|hmm|eh|ay)",
    r"\b(sha|na|dum|bum|pum|tra)\b",
    r"(baby|honey|darling|love)",
])

TIME_PATTERN = re.compile(
    _ascii_words(r"\b(siempre|nunca|a veces|todos los d[íi]as|cada|cuando|mientras|despu[ée]s|antes|ahora|hoy|ayer|ma[ñn]ana)\b"),
    re.IGNORECASE,
)
EMOTION_PATTERN = re.compile(
    _ascii_words(r"\b(siento|feliz|triste|enojado|miedo|amor|odio|gusto|extra[ñn]o|alegr[íi]a|dolor)\b"),
    re.IGNORECASE,
)
CONNECTOR_PATTERN = re.compile(
    _ascii_words(r"^(pero|porque|aunque|sin embargo|entonces|as[íi] que|por eso|mientras|cuando)\b"),
    re.IGNORECASE,
)
ACTION_PATTERN = re.compile(
    _ascii_words(r"\b(voy|vengo|hago|digo|veo|s[ée]|puedo|quiero|necesito|tengo)\b"),
    re.IGNORECASE,
)

# Verb tense complexity (lower is simpler)
TENSE_COMPLEXITY = {
    "presente": 0.2,
    "preterito": 0.5,
    "imperfecto": 0.5,
    "futuro": 0.4,
    "condicional": 0.6,
    "imperativo": 0.3,
    "subjuntivo": 0.8,
    "subjuntivo_presente": 0.8,
    "subjuntivo_imperfecto": 0.9,
}

_NON_WORD_START = re.compile(rf"^[^{_WORD_CHAR}]")


@dataclass(frozen=True)
class PhraseUsefulnessFactors:
    """Component scores, each in [0, 1]"""
    word_frequency: float
    phrase_length: float
    verb_complexity: float
    question_pattern: float
    greeting_pattern: float
    common_expression: float
    repetitiveness: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PhraseScore:
    score: float
    factors: PhraseUsefulnessFactors
    category: PhraseCategory

    @property
    def is_useful(self) -> bool:
        return is_useful_phrase(self.score)


def _matches_any(patterns: Sequence[re.Pattern], text: str) -> bool:
    return any(pattern.search(text) for pattern in patterns)


def length_fallback_frequency(word: str) -> float:
    """Zipf estimate for words missing from the frequency table."""
    if len(word) <= 3:
        return 3.0
    if len(word) <= 5:
        return 2.0
    if len(word) <= 8:
        return 1.0
    return 0.5


class PhraseScorer:
    """Scores lyric lines against a shared, read-only frequency table."""

    def __init__(self, frequency_table: FrequencyTable):
        self.frequency_table = frequency_table

    def word_frequency(self, word: str) -> float:
        normalized = word.lower().strip()
        freq = self.frequency_table.lookup(normalized)
        if freq is not None:
            return freq
        return length_fallback_frequency(normalized)

    def word_frequency_score(self, phrase: str) -> float:
        words = [
            w for w in phrase.lower().split()
            if len(w) > 1 and not _NON_WORD_START.match(w)
        ]
        if not words:
            return 0.0

        avg_freq = sum(self.word_frequency(w) for w in words) / len(words)

        # Zipf 5+ is very common, Zipf 1 or below is rare
        return clamp((avg_freq - 1) / 4)

    @staticmethod
    def phrase_length_score(phrase: str) -> float:
        word_count = len(phrase.split())

        # Ideal range: 3-6 words
        if 3 <= word_count <= 6:
            return 1.0
        if word_count in (2, 7):
            return 0.8
        if word_count in (1, 8):
            return 0.6
        if word_count in (9, 10):
            return 0.4
        return 0.2

    @staticmethod
    def verb_complexity_score(verb_tenses: Optional[Sequence[str]] = None) -> float:
        if not verb_tenses:
            return 0.5

        complexities = [TENSE_COMPLEXITY.get(tense, 0.5) for tense in verb_tenses]
        avg_complexity = sum(complexities) / len(complexities)

        # Simpler tenses score higher
        return 1 - avg_complexity

    @staticmethod
    def question_score(phrase: str) -> float:
        return 1.0 if _matches_any(QUESTION_PATTERNS, phrase) else 0.0

    @staticmethod
    def greeting_score(phrase: str) -> float:
        return 1.0 if _matches_any(GREETING_PATTERNS, phrase) else 0.0

    @staticmethod
    def common_expression_score(phrase: str) -> float:
        return 1.0 if _matches_any(COMMON_EXPRESSIONS, phrase) else 0.0

    @staticmethod
    def repetitiveness_score(phrase: str) -> float:
        if _matches_any(EXCLUDE_PATTERNS, phrase):
            return 0.0

        words = phrase.lower().split()
        # Empty input scores 0 here rather than counting a single empty token
        # as fully unique (which would leave an empty phrase at 0.2 overall).
        if not words:
            return 0.0
        return len(set(words)) / len(words)

    @staticmethod
    def categorize(phrase: str, common_expression: float) -> PhraseCategory:
        """First matching rule wins; order is significant."""
        if _matches_any(GREETING_PATTERNS, phrase):
            return PhraseCategory.GREETINGS
        if _matches_any(QUESTION_PATTERNS, phrase):
            return PhraseCategory.QUESTIONS
        if TIME_PATTERN.search(phrase):
            return PhraseCategory.TIME
        if EMOTION_PATTERN.search(phrase):
            return PhraseCategory.EMOTIONS
        if CONNECTOR_PATTERN.search(phrase):
            return PhraseCategory.CONNECTORS
        if ACTION_PATTERN.search(phrase):
            return PhraseCategory.ACTIONS
        if common_expression > 0.5:
            return PhraseCategory.EXPRESSIONS
        return DEFAULT_CATEGORY

    def score(self, phrase: str, verb_tenses: Optional[Sequence[str]] = None) -> PhraseScore:
        """
        Score a single lyric line.

        Args:
            phrase: Any text; empty or whitespace-only input scores 0
            verb_tenses: Optional tense identifiers (accepted, not weighted)

        Returns:
            PhraseScore with score and every factor clamped to [0, 1]
        """
        clean_phrase = phrase.strip()

        word_frequency = self.word_frequency_score(clean_phrase)
        common_expression = self.common_expression_score(clean_phrase)
        repetitiveness = self.repetitiveness_score(clean_phrase)

        factors = PhraseUsefulnessFactors(
            word_frequency=word_frequency,
            phrase_length=0.0,  # Not used
            verb_complexity=0.0,  # Not used
            question_pattern=0.0,  # Not used
            greeting_pattern=0.0,  # Not used
            common_expression=common_expression,
            repetitiveness=repetitiveness,
        )

        score = clamp(
            0.50 * factors.word_frequency
            + 0.30 * factors.common_expression
            + 0.20 * factors.repetitiveness
        )

        return PhraseScore(
            score=score,
            factors=factors,
            category=self.categorize(clean_phrase, common_expression),
        )


def score_phrase_usefulness(
    phrase: str,
    verb_tenses: Optional[Sequence[str]] = None,
    frequency_table: Optional[FrequencyTable] = None,
) -> PhraseScore:
    """Score ``phrase`` with ``frequency_table`` or the packaged table."""
    table = frequency_table if frequency_table is not None else get_default_frequency_table()
    return PhraseScorer(table).score(phrase, verb_tenses)


__all__ = [
    "PhraseScore",
    "PhraseScorer",
    "PhraseUsefulnessFactors",
    "USEFULNESS_THRESHOLD",
    "is_useful_phrase",
    "score_phrase_usefulness",
]
