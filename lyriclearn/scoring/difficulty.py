"""
Song difficulty scoring.

A song's lyrics are reduced to a handful of metrics (length, lexical
variety, word rarity, verb load, tense weight, idioms, punctuation), each
metric is turned into a z-score against baseline statistics, and the
weighted sum is squashed onto a 1-10 scale. The rounded score is the
song's level.

Baselines start from fixed defaults and can be recalibrated from a corpus
of metrics with ``Baselines.from_metrics``.
"""
import json
import logging
import math
import re
from dataclasses import asdict, dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from lyriclearn.core.exceptions import DifficultyScoringError
from lyriclearn.scoring.categories import clamp
from lyriclearn.scoring.frequency import FrequencyTable
from lyriclearn.scoring.morphology import ParsedLine, analyze_lines
from lyriclearn.scoring.phrase_scoring import length_fallback_frequency

logger = logging.getLogger(__name__)

DEFAULT_IDIOMS_ASSET = "idioms-es.json"

MIN_LEVEL = 1
MAX_LEVEL = 10

# Per-verb weight; verbs with no detected tense weigh 0.5, unknown tenses 1.0
TENSE_WEIGHTS = {
    "presente": 0.5,
    "preterito": 1.0,
    "imperfecto": 1.0,
    "futuro": 0.8,
    "condicional": 1.1,
    "subjuntivo": 1.6,
    "subjuntivo_presente": 1.6,
    "subjuntivo_imperfecto": 1.8,
}

# Metric -> weight of its z-score in the composite
METRIC_WEIGHTS = {
    "word_count": 0.12,
    "type_token_ratio": 0.18,
    "avg_word_freq_zipf": 0.22,
    "verb_density": 0.18,
    "tense_weights": 0.22,
    "idiom_count": 0.04,
    "punct_complexity": 0.04,
}

_MIN_STD = 0.001
_MAX_PUNCT_COMPLEXITY = 2.0
_SENTENCE_SPLIT = re.compile(r"[.!?]+")


@dataclass(frozen=True)
class DifficultyMetrics:
    word_count: int
    unique_word_count: int
    type_token_ratio: float
    avg_word_freq_zipf: float
    verb_density: float
    tense_weights: float
    idiom_count: int
    punct_complexity: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class BaselineStat:
    mean: float
    std: float

    def normalize(self, value: float) -> float:
        return (value - self.mean) / self.std


@dataclass(frozen=True)
class Baselines:
    word_count: BaselineStat = BaselineStat(80, 30)
    type_token_ratio: BaselineStat = BaselineStat(0.7, 0.15)
    avg_word_freq_zipf: BaselineStat = BaselineStat(4.0, 1.0)
    verb_density: BaselineStat = BaselineStat(0.15, 0.05)
    tense_weights: BaselineStat = BaselineStat(0.8, 0.3)
    idiom_count: BaselineStat = BaselineStat(1, 1)
    punct_complexity: BaselineStat = BaselineStat(0.2, 0.1)

    @classmethod
    def from_metrics(cls, all_metrics: Sequence[DifficultyMetrics]) -> "Baselines":
        """
        Population mean and standard deviation of each metric.

        Standard deviations are floored at 0.001. An empty corpus returns
        the defaults.
        """
        if not all_metrics:
            return cls()

        def _stat(values: List[float]) -> BaselineStat:
            mean = sum(values) / len(values)
            variance = sum((v - mean) ** 2 for v in values) / len(values)
            return BaselineStat(mean, max(math.sqrt(variance), _MIN_STD))

        return cls(**{
            name: _stat([getattr(m, name) for m in all_metrics])
            for name in METRIC_WEIGHTS
        })


@dataclass(frozen=True)
class DifficultyResult:
    metrics: DifficultyMetrics
    difficulty_score: float

    @property
    def level(self) -> int:
        return assign_level(self.difficulty_score)


def assign_level(difficulty_score: float) -> int:
    """Round half up and clamp to 1-10."""
    return max(MIN_LEVEL, min(MAX_LEVEL, math.floor(difficulty_score + 0.5)))


def level_distribution(scores: Iterable[float]) -> Dict[str, int]:
    distribution = {str(level): 0 for level in range(MIN_LEVEL, MAX_LEVEL + 1)}
    for score in scores:
        distribution[str(assign_level(score))] += 1
    return distribution


def _sigmoid(x: float) -> float:
    # Stable for large |x|
    if x >= 0:
        return 1 / (1 + math.exp(-x))
    e = math.exp(x)
    return e / (1 + e)


def _compile_idiom(idiom: str) -> re.Pattern:
    words = idiom.lower().split()
    return re.compile(r"\s+".join(re.escape(w) for w in words), re.IGNORECASE)


def load_idioms(path: Optional[Union[str, Path]] = None) -> Tuple[str, ...]:
    """
    Idiom list from ``path`` (a JSON array of strings) or the packaged asset.

    Raises:
        DifficultyScoringError: if the file is missing or malformed
    """
    source = str(path) if path else f"package:{DEFAULT_IDIOMS_ASSET}"
    try:
        if path:
            text = Path(path).read_text(encoding="utf-8")
        else:
            text = (resources.files("lyriclearn.scoring") / "data" / DEFAULT_IDIOMS_ASSET).read_text(
                encoding="utf-8"
            )
        raw = json.loads(text)
    except FileNotFoundError:
        raise DifficultyScoringError(f"idiom list '{source}' not found")
    except json.JSONDecodeError as e:
        raise DifficultyScoringError(f"idiom list '{source}' is not valid JSON: {e}")

    if not isinstance(raw, list) or not all(isinstance(i, str) for i in raw):
        raise DifficultyScoringError(f"idiom list '{source}' must be a JSON array of strings")

    idioms = tuple(i.strip() for i in raw if i.strip())
    logger.info(f"Loaded {len(idioms)} idioms from {source}")
    return idioms


@lru_cache(maxsize=1)
def get_default_idioms() -> Tuple[str, ...]:
    return load_idioms()


def punctuation_complexity(text: str) -> float:
    """Weighted punctuation density plus the spread of sentence lengths, capped at 2."""
    if not text:
        return 0.0

    commas = text.count(",")
    semicolons = text.count(";")
    questions = text.count("¿") + text.count("?")
    exclamations = text.count("¡") + text.count("!")
    colons = text.count(":")

    punctuation_score = (
        commas + semicolons * 1.5 + questions * 0.8 + exclamations * 0.8 + colons * 1.2
    ) / len(text) * 100

    sentence_lengths = [
        len(sentence.split())
        for sentence in _SENTENCE_SPLIT.split(text)
        if sentence.strip()
    ]
    variance_score = 0.0
    if sentence_lengths:
        avg_length = sum(sentence_lengths) / len(sentence_lengths)
        variance = sum((n - avg_length) ** 2 for n in sentence_lengths) / len(sentence_lengths)
        variance_score = math.sqrt(variance) / avg_length

    return min(punctuation_score + variance_score, _MAX_PUNCT_COMPLEXITY)


class DifficultyScorer:
    """Scores parsed song lyrics against a frequency table and baselines."""

    def __init__(
        self,
        frequency_table: FrequencyTable,
        idioms: Optional[Sequence[str]] = None,
        baselines: Optional[Baselines] = None,
    ):
        self.frequency_table = frequency_table
        self.baselines = baselines or Baselines()
        self.idioms = tuple(idioms) if idioms is not None else get_default_idioms()
        self._idiom_patterns = tuple(_compile_idiom(i) for i in self.idioms if i.split())

    def with_baselines(self, baselines: Baselines) -> "DifficultyScorer":
        return DifficultyScorer(self.frequency_table, self.idioms, baselines)

    def word_frequency(self, word: str) -> float:
        normalized = word.lower().strip()
        freq = self.frequency_table.lookup(normalized)
        if freq is not None:
            return freq
        return length_fallback_frequency(normalized)

    def count_idioms(self, text: str) -> int:
        lowered = text.lower()
        return sum(len(pattern.findall(lowered)) for pattern in self._idiom_patterns)

    def compute_metrics(self, parsed_lines: Sequence[ParsedLine]) -> DifficultyMetrics:
        """
        Raises:
            DifficultyScoringError: if there are no lines or no words
        """
        if not parsed_lines:
            raise DifficultyScoringError("No parsed lines provided")

        tokens = [token for line in parsed_lines for token in line.tokens]
        if not tokens:
            raise DifficultyScoringError("Lyrics contain no words")

        word_count = len(tokens)
        unique_word_count = len({token.lemma.lower() for token in tokens})
        verbs = [token for token in tokens if token.is_verb]
        full_text = " ".join(line.line for line in parsed_lines)

        return DifficultyMetrics(
            word_count=word_count,
            unique_word_count=unique_word_count,
            type_token_ratio=unique_word_count / word_count,
            avg_word_freq_zipf=sum(self.word_frequency(t.text) for t in tokens) / word_count,
            verb_density=len(verbs) / word_count,
            tense_weights=sum(
                TENSE_WEIGHTS.get(verb.tense, 1.0) if verb.tense else 0.5
                for verb in verbs
            ),
            idiom_count=self.count_idioms(full_text),
            punct_complexity=punctuation_complexity(full_text),
        )

    def score_metrics(self, metrics: DifficultyMetrics) -> float:
        """Composite difficulty in [1, 10]."""
        b = self.baselines
        # Variety and common words make a song easier, so those two are inverted
        z = (
            METRIC_WEIGHTS["word_count"] * b.word_count.normalize(metrics.word_count)
            + METRIC_WEIGHTS["type_token_ratio"] * b.type_token_ratio.normalize(1 - metrics.type_token_ratio)
            + METRIC_WEIGHTS["avg_word_freq_zipf"] * b.avg_word_freq_zipf.normalize(7 - metrics.avg_word_freq_zipf)
            + METRIC_WEIGHTS["verb_density"] * b.verb_density.normalize(metrics.verb_density)
            + METRIC_WEIGHTS["tense_weights"] * b.tense_weights.normalize(metrics.tense_weights)
            + METRIC_WEIGHTS["idiom_count"] * b.idiom_count.normalize(metrics.idiom_count)
            + METRIC_WEIGHTS["punct_complexity"] * b.punct_complexity.normalize(metrics.punct_complexity)
        )
        return clamp(1 + 9 * _sigmoid(z), MIN_LEVEL, MAX_LEVEL)

    def compute(self, parsed_lines: Sequence[ParsedLine]) -> DifficultyResult:
        metrics = self.compute_metrics(parsed_lines)
        return DifficultyResult(metrics=metrics, difficulty_score=self.score_metrics(metrics))

    def score_lines(self, lines: Iterable[str]) -> DifficultyResult:
        """Analyze raw lyric lines (blank lines skipped) and score them."""
        return self.compute(analyze_lines(lines))


__all__ = [
    "Baselines",
    "BaselineStat",
    "DifficultyMetrics",
    "DifficultyResult",
    "DifficultyScorer",
    "TENSE_WEIGHTS",
    "assign_level",
    "level_distribution",
    "load_idioms",
]
