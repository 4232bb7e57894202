"""
Unit tests for song difficulty scoring and the line analysis behind it
"""
import json

import pytest

from lyriclearn.core.exceptions import DifficultyScoringError
from lyriclearn.scoring.difficulty import (
    Baselines,
    BaselineStat,
    DifficultyMetrics,
    DifficultyScorer,
    assign_level,
    level_distribution,
    load_idioms,
    punctuation_complexity,
)
from lyriclearn.scoring.morphology import (
    analyze_line,
    analyze_lines,
    detect_tense,
    get_lemma,
    is_verb,
)


@pytest.fixture
def scorer(frequency_table):
    return DifficultyScorer(frequency_table, idioms=())


def _metrics(**overrides):
    values = dict(
        word_count=10,
        unique_word_count=8,
        type_token_ratio=0.8,
        avg_word_freq_zipf=4.0,
        verb_density=0.1,
        tense_weights=1.0,
        idiom_count=0,
        punct_complexity=0.2,
    )
    values.update(overrides)
    return DifficultyMetrics(**values)


def test_analyze_line_strips_punctuation_and_tags_tokens():
    parsed = analyze_line("¡Hola, me llamo Juan!", 3)

    assert parsed.sentence_index == 3
    assert [t.text for t in parsed.tokens] == ["Hola", "me", "llamo", "Juan"]
    assert [t.pos for t in parsed.tokens] == ["ADJ", "PRON", "ADJ", "NOUN"]


def test_infinitives_are_verbs():
    tokens = analyze_line("Quiero bailar y cantar").tokens

    assert [t.text for t in tokens if t.is_verb] == ["bailar", "cantar"]
    assert all(t.tense is None for t in tokens if t.is_verb)
    assert is_verb("vivir", "NOUN")
    assert not is_verb("casa", "NOUN")


@pytest.mark.parametrize("word, tense", [
    ("hablo", "presente"),
    ("habló", "preterito"),
    ("comí", "preterito"),
    ("hablarán", "futuro"),
    ("bailar", None),
])
def test_detect_tense(word, tense):
    assert detect_tense(word) == tense


@pytest.mark.parametrize("word, lemma", [
    ("bailando", "bailar"),
    ("amado", "amar"),
    ("casas", "casa"),
    ("sol", "sol"),
])
def test_get_lemma(word, lemma):
    assert get_lemma(word) == lemma


def test_analyze_lines_skips_blank_lines():
    parsed = analyze_lines(["Hola", "", "   ", "Adiós amor"])

    assert [p.line for p in parsed] == ["Hola", "Adiós amor"]
    assert [p.sentence_index for p in parsed] == [0, 1]


def test_repeated_words(scorer):
    metrics = scorer.score_lines(["La la la la la"]).metrics

    assert metrics.word_count == 5
    assert metrics.unique_word_count == 1
    assert metrics.type_token_ratio == pytest.approx(0.2)
    assert metrics.avg_word_freq_zipf == pytest.approx(3.0)
    assert metrics.verb_density == 0.0
    assert metrics.tense_weights == 0.0
    assert metrics.punct_complexity == 0.0


def test_score_against_default_baselines(scorer):
    result = scorer.score_lines(["La la la la la"])

    assert result.difficulty_score == pytest.approx(2.7426, abs=1e-3)
    assert result.level == 3


def test_verbs_raise_difficulty(scorer):
    verbs = scorer.score_lines(["Quiero bailar y cantar"])
    nouns = scorer.score_lines(["la casa y la mesa"])

    assert verbs.metrics.verb_density == pytest.approx(0.5)
    assert verbs.metrics.tense_weights == pytest.approx(1.0)
    assert verbs.difficulty_score > nouns.difficulty_score


def test_type_token_ratio_tracks_repetition(scorer):
    varied = scorer.score_lines(["Uno dos tres cuatro"]).metrics
    repeated = scorer.score_lines(["Uno uno uno uno"]).metrics

    assert varied.type_token_ratio > repeated.type_token_ratio


def test_known_words_use_table_frequency(scorer):
    metrics = scorer.score_lines(["amor corazón"]).metrics

    assert metrics.avg_word_freq_zipf == pytest.approx(4.3)


def test_score_stays_in_range_for_long_lyrics(scorer):
    result = scorer.score_lines(["extraordinariamente incomprensible"] * 2000)

    assert 1.0 <= result.difficulty_score <= 10.0
    assert result.level == 10


@pytest.mark.parametrize("lines, reason", [
    ([], "No parsed lines provided"),
    (["", "   "], "No parsed lines provided"),
    (["¡¿?!", "..."], "Lyrics contain no words"),
])
def test_unscorable_lyrics_raise(scorer, lines, reason):
    with pytest.raises(DifficultyScoringError) as exc_info:
        scorer.score_lines(lines)

    assert exc_info.value.details["reason"] == reason
    assert exc_info.value.status_code == 422


def test_idioms_are_counted_across_whitespace(frequency_table):
    scorer = DifficultyScorer(frequency_table, idioms=("echar de menos",))

    assert scorer.count_idioms("Voy a ECHAR de menos,\ny echar   de menos") == 2


def test_idioms_feed_metrics(frequency_table):
    scorer = DifficultyScorer(frequency_table, idioms=("media naranja",))

    metrics = scorer.score_lines(["Eres mi media", "naranja, mi media naranja"]).metrics

    assert metrics.idiom_count == 2


def test_packaged_idioms_load():
    idioms = load_idioms()

    assert "echar de menos" in idioms
    assert all(i == i.strip() and i for i in idioms)


def test_load_idioms_rejects_bad_files(tmp_path):
    not_a_list = tmp_path / "idioms.json"
    not_a_list.write_text(json.dumps({"echar de menos": 1}), encoding="utf-8")

    with pytest.raises(DifficultyScoringError):
        load_idioms(not_a_list)
    with pytest.raises(DifficultyScoringError):
        load_idioms(tmp_path / "missing.json")


def test_punctuation_complexity():
    assert punctuation_complexity("") == 0.0
    assert punctuation_complexity("hola amigo") == 0.0
    # Sentence lengths 2 and 1: std 0.5 over mean 1.5
    assert punctuation_complexity("uno dos. tres") == pytest.approx(1 / 3)
    assert punctuation_complexity("¿Sí? ¡No!") == 2.0


@pytest.mark.parametrize("score, level", [
    (1.0, 1),
    (0.5, 1),
    (3.4, 3),
    (3.6, 4),
    (5.5, 6),
    (6.5, 7),
    (7.5, 8),
    (10.0, 10),
    (10.7, 10),
])
def test_assign_level(score, level):
    assert assign_level(score) == level


def test_level_distribution():
    distribution = level_distribution([1.2, 5.5, 5.6, 9.9])

    assert list(distribution) == [str(i) for i in range(1, 11)]
    assert distribution["1"] == 1
    assert distribution["6"] == 2
    assert distribution["10"] == 1
    assert sum(distribution.values()) == 4


def test_baselines_from_metrics():
    baselines = Baselines.from_metrics([
        _metrics(word_count=10, verb_density=0.1),
        _metrics(word_count=30, verb_density=0.3),
    ])

    assert baselines.word_count == BaselineStat(20, 10)
    assert baselines.verb_density.mean == pytest.approx(0.2)
    assert baselines.verb_density.std == pytest.approx(0.1)
    # Identical values get the minimum spread instead of zero
    assert baselines.type_token_ratio == BaselineStat(0.8, 0.001)


def test_baselines_from_empty_corpus_are_defaults():
    assert Baselines.from_metrics([]) == Baselines()


def test_with_baselines_keeps_table_and_idioms(scorer):
    recalibrated = scorer.with_baselines(Baselines(word_count=BaselineStat(5, 1)))

    assert recalibrated.frequency_table is scorer.frequency_table
    assert recalibrated.idioms == scorer.idioms
    assert scorer.baselines == Baselines()
    assert recalibrated.score_metrics(_metrics(word_count=5)) < scorer.score_metrics(_metrics(word_count=100))
