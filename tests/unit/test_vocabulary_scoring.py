"""
Unit tests for vocabulary usefulness scoring and ranking
"""
import pytest

from lyriclearn.scoring.categories import VOCABULARY_THRESHOLD, is_useful_vocabulary
from lyriclearn.scoring.frequency import FrequencyTable
from lyriclearn.scoring.vocabulary_scoring import (
    POS_WEIGHTS,
    PartOfSpeech,
    VocabularyScorer,
    frequency_optimality,
    get_top_vocabulary,
    identify_part_of_speech,
    score_vocabulary_word,
)


@pytest.fixture
def scorer(frequency_table):
    return VocabularyScorer(frequency_table)


def test_known_noun(scorer):
    result = scorer.score("corazón")

    assert result.word == "corazón"
    assert result.frequency == 4.2
    assert result.part_of_speech == PartOfSpeech.NOUN
    assert result.score == pytest.approx(0.70)
    assert result.is_useful


def test_unknown_verb_uses_default_frequency(scorer):
    result = scorer.score("cantar")

    assert result.frequency == 1.0
    assert result.part_of_speech == PartOfSpeech.VERB
    assert result.score == pytest.approx(0.45)


def test_input_is_normalized(scorer):
    result = scorer.score("  AMOR ")

    assert result.word == "amor"
    assert result.score == pytest.approx(0.56)


def test_very_common_word_scores_low(scorer):
    result = scorer.score("gente")

    assert result.part_of_speech == PartOfSpeech.ADJECTIVE
    assert result.score == pytest.approx(0.28)
    assert not result.is_useful


def test_score_is_clamped():
    table_scorer = VocabularyScorer(FrequencyTable({"enamoramiento": 3.5}))

    assert table_scorer.score("enamoramiento").score == 1.0


@pytest.mark.parametrize("word", ["el", "de", "que", "ser", "tener", "encontrar", "yo", "hola!", "baby's", "x1x", ""])
def test_ineligible_words_return_none(scorer, word):
    assert scorer.score(word) is None


@pytest.mark.parametrize("word, expected", [
    ("cantar", PartOfSpeech.VERB),
    ("comer", PartOfSpeech.VERB),
    ("famoso", PartOfSpeech.ADJECTIVE),
    ("increíble", PartOfSpeech.ADJECTIVE),
    # "-mente" words also end in "ente", which is checked first
    ("rápidamente", PartOfSpeech.ADJECTIVE),
    ("canción", PartOfSpeech.NOUN),
    ("libertad", PartOfSpeech.NOUN),
    ("playa", PartOfSpeech.NOUN),
])
def test_part_of_speech_from_suffix(word, expected):
    assert identify_part_of_speech(word) == expected


def test_all_parts_of_speech_have_weights():
    assert set(POS_WEIGHTS) == set(PartOfSpeech)
    assert POS_WEIGHTS[PartOfSpeech.NOUN] == 1.0
    assert POS_WEIGHTS[PartOfSpeech.ARTICLE] == 0.0


def test_frequency_optimality_curve():
    assert frequency_optimality(3.5) == 1.0
    assert frequency_optimality(2.0) == pytest.approx(0.0)
    assert frequency_optimality(6.0) == pytest.approx(0.2)
    assert frequency_optimality(8.0) == 0.0
    assert frequency_optimality(1.0) == pytest.approx(0.2)
    assert frequency_optimality(0.0) == 0.0


def test_top_dedupes_filters_and_sorts(scorer):
    ranked = scorer.top(["amor", "corazón", "gente", "cantar", "Amor", "el"])

    assert [r.word for r in ranked] == ["corazón", "amor", "cantar"]


def test_top_respects_limit(scorer):
    ranked = scorer.top(["amor", "corazón", "cantar"], limit=2)

    assert [r.word for r in ranked] == ["corazón", "amor"]


def test_top_keeps_first_seen_order_for_ties(scorer):
    # Same length, same default frequency, same part of speech
    ranked = scorer.top(["cantar", "llorar", "saltar"])

    assert [r.word for r in ranked] == ["cantar", "llorar", "saltar"]


def test_top_of_nothing_is_empty(scorer):
    assert scorer.top([]) == []
    assert scorer.top(["el", "la", "de"]) == []


def test_convenience_functions_accept_table(frequency_table):
    assert score_vocabulary_word("corazón", frequency_table=frequency_table).score == pytest.approx(0.70)
    assert [r.word for r in get_top_vocabulary(["amor", "corazón"], frequency_table=frequency_table)] == [
        "corazón",
        "amor",
    ]


def test_to_dict_serializes_part_of_speech(scorer):
    data = scorer.score("corazón").to_dict()

    assert data["part_of_speech"] == "noun"
    assert data["word"] == "corazón"


def test_threshold_boundary():
    assert VOCABULARY_THRESHOLD == 0.4
    assert is_useful_vocabulary(0.4)
    assert not is_useful_vocabulary(0.39)
