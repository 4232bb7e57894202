"""
Unit tests for the vocabulary extraction job
"""
import pytest
from sqlalchemy import select

from lyriclearn.core.exceptions import LyricsParseError
from lyriclearn.models.vocabulary import Vocabulary
from lyriclearn.scoring.vocabulary_scoring import VocabularyScorer
from lyriclearn.services.glossary import translate_word
from lyriclearn.services.vocabulary_extraction_service import (
    VocabularyExtractionService,
    collect_words,
    tokenize_lyric_line,
)


@pytest.fixture
def scorer(frequency_table):
    return VocabularyScorer(frequency_table)


def test_tokenize_strips_punctuation_and_short_tokens():
    assert tokenize_lyric_line("¿Dónde está mi corazón?") == ["dónde", "está", "corazón"]
    assert tokenize_lyric_line("(Oye) [coro]: ¡ay, sí!") == ["oye", "coro"]


def test_collect_words_gathers_examples():
    words, examples = collect_words(
        ["Bailar contigo toda la noche", "Yo", "Bailar", "   "],
        max_examples=3,
        min_example_length=10,
    )

    assert words == ["bailar", "contigo", "toda", "noche", "bailar"]
    assert examples["bailar"] == ["Bailar contigo toda la noche"]


def test_collect_words_caps_examples():
    lines = [f"Mi corazón late número {i}" for i in range(5)]

    _, examples = collect_words(lines, max_examples=3)

    assert len(examples["corazón"]) == 3
    assert examples["corazón"][0] == "Mi corazón late número 0"


def test_glossary_falls_back_to_word():
    assert translate_word("Corazón") == "heart"
    assert translate_word("reguetón") == "reguetón"


def test_run_stores_ranked_vocabulary(db_session, make_song, scorer):
    make_song("Latido", "Alguien", ["Mi corazón late por tu amor", "La gente baila sin parar"])
    make_song("Roto", "Nadie", [], lyrics_raw="not json")

    report = VocabularyExtractionService(db_session, scorer).run(limit=2)

    assert report.songs_processed == 1
    assert report.songs_failed == 1
    assert report.stored == 2

    rows = db_session.execute(
        select(Vocabulary).order_by(Vocabulary.usefulness_score.desc())
    ).scalars().all()
    assert [r.word for r in rows] == ["corazón", "amor"]
    assert rows[0].translation == "heart"
    assert rows[0].part_of_speech == "noun"
    assert rows[0].examples == ["Mi corazón late por tu amor"]


def test_run_replaces_existing_vocabulary(db_session, make_song, scorer):
    make_song("Latido", "Alguien", ["Mi corazón late por tu amor"])
    service = VocabularyExtractionService(db_session, scorer)

    service.run()
    service.run()

    words = db_session.execute(select(Vocabulary.word)).scalars().all()
    assert len(words) == len(set(words))


def test_song_vocabulary_ranks_one_song(db_session, make_song, scorer):
    song = make_song("Latido", "Alguien", ["Mi corazón late por tu amor", "La gente baila sin parar"])

    words = VocabularyExtractionService(db_session, scorer).song_vocabulary(song, limit=3)

    assert [w.score.word for w in words] == ["corazón", "amor", "baila"]
    assert words[1].translation == "love"
    assert words[2].examples == ["La gente baila sin parar"]


def test_song_vocabulary_raises_on_malformed_lyrics(db_session, make_song, scorer):
    song = make_song("Roto", "Nadie", [], lyrics_raw='{"lines": "not a list"}')

    with pytest.raises(LyricsParseError):
        VocabularyExtractionService(db_session, scorer).song_vocabulary(song)
