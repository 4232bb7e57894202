"""
Unit tests for the phrase extraction job
"""
import pytest
from sqlalchemy import select

from lyriclearn.config.settings import ExtractionSettings
from lyriclearn.core.exceptions import LyricsParseError
from lyriclearn.models.phrase import Phrase, PhraseCategoryRecord
from lyriclearn.scoring.phrase_scoring import PhraseScorer
from lyriclearn.services.lyrics import parse_song_lyrics
from lyriclearn.services.phrase_extraction_service import (
    PhraseExtractionService,
    extract_song_phrases,
)


@pytest.fixture
def scorer(frequency_table):
    return PhraseScorer(frequency_table)


def test_extract_song_phrases_filters_lines(scorer):
    lines = ["Me gusta bailar contigo", "", "Hola", "Shakira", "la la la la", "Quiero bailar contigo"]
    translations = ["I like dancing with you", "", "Hello", "Shakira", "la la la la"]

    phrases = extract_song_phrases(
        lines,
        translations,
        scorer,
        artist="Shakira",
        synced_times=[1.5, 3.0, 4.0, 5.0, 6.0, 7.0],
    )

    assert len(phrases) == 1
    phrase = phrases[0]
    assert phrase.original_text == "Me gusta bailar contigo"
    assert phrase.translated_text == "I like dancing with you"
    assert phrase.line_index == 0
    assert phrase.timestamp == 1.5
    assert phrase.word_count == 4
    assert phrase.category == "expressions"
    assert phrase.usefulness_score == pytest.approx(0.896875)


def test_extract_song_phrases_without_timestamps(scorer):
    phrases = extract_song_phrases(["  Me gusta bailar contigo  "], ["I like dancing with you"], scorer)

    assert phrases[0].timestamp is None
    assert phrases[0].original_text == "Me gusta bailar contigo"


def test_artist_name_match_is_case_insensitive(scorer):
    phrases = extract_song_phrases(["ME GUSTA BAILAR"], ["x"], scorer, artist="me gusta bailar")

    assert phrases == []


def test_service_run_stores_phrases_and_counts(db_session, make_song, scorer):
    make_song(
        "Bailando",
        "Enrique",
        ["Me gusta bailar contigo", "Quiero bailar contigo", "la la la la"],
        translation=["I like dancing with you", "I want to dance with you", "la la la la"],
        synced_times=[10.0, 12.5, 15.0],
    )
    make_song("Sin traducción", "Nadie", ["Me gusta bailar contigo"])

    report = PhraseExtractionService(db_session, scorer, ExtractionSettings()).run()

    assert report.songs_processed == 1
    assert report.songs_failed == 0
    assert report.total_phrases == 2
    assert report.category_counts == {"expressions": 1, "actions": 1}

    stored = db_session.execute(select(Phrase).order_by(Phrase.line_index)).scalars().all()
    assert [p.original_text for p in stored] == ["Me gusta bailar contigo", "Quiero bailar contigo"]
    assert stored[1].timestamp == 12.5

    categories = {
        c.name: c for c in db_session.execute(select(PhraseCategoryRecord)).scalars()
    }
    assert len(categories) == 8
    assert categories["expressions"].phrase_count == 1
    assert categories["actions"].phrase_count == 1
    assert categories["greetings"].phrase_count == 0
    assert categories["greetings"].order == 1


def test_service_run_skips_malformed_lyrics(db_session, make_song, scorer):
    make_song("Roto", "Nadie", [], translation=["x"], lyrics_raw="{not json")
    make_song(
        "Bien",
        "Alguien",
        ["Me gusta bailar contigo"],
        translation=["I like dancing with you"],
    )

    report = PhraseExtractionService(db_session, scorer).run()

    assert report.songs_failed == 1
    assert report.songs_processed == 1
    assert report.total_phrases == 1


def test_service_run_clears_previous_phrases(db_session, make_song, scorer):
    make_song("Bailando", "Enrique", ["Me gusta bailar contigo"], translation=["I like dancing with you"])
    service = PhraseExtractionService(db_session, scorer)

    service.run()
    service.run()

    assert len(db_session.execute(select(Phrase)).scalars().all()) == 1


def test_extract_from_song_raises_on_malformed_lyrics(db_session, make_song, scorer):
    song = make_song("Roto", "Nadie", [], translation=["x"], lyrics_raw='["not", "an", "object"]')

    with pytest.raises(LyricsParseError):
        PhraseExtractionService(db_session, scorer).extract_from_song(song)


def test_initialize_categories_is_idempotent(db_session, scorer):
    service = PhraseExtractionService(db_session, scorer)

    service.initialize_categories()
    service.initialize_categories()
    db_session.commit()

    assert len(db_session.execute(select(PhraseCategoryRecord)).scalars().all()) == 8


@pytest.mark.parametrize("synchronized", ["[1, 2]", '"10s"'])
def test_non_object_synchronized_block_is_a_parse_error(db_session, make_song, synchronized):
    song = make_song(
        "Roto", "Nadie", [], translation=["x"],
        lyrics_raw='{"lines": ["hola"], "synchronized": %s}' % synchronized,
    )

    with pytest.raises(LyricsParseError):
        parse_song_lyrics(song)


def test_service_run_skips_song_with_malformed_synchronized_block(db_session, make_song, scorer):
    make_song(
        "Roto", "Nadie", [], translation=["Hello, how are you"],
        lyrics_raw='{"lines": ["Me gusta bailar contigo"], "synchronized": [1, 2]}',
    )
    make_song("Bien", "Alguien", ["Me gusta bailar contigo"], translation=["I like dancing with you"])

    report = PhraseExtractionService(db_session, scorer).run()

    assert report.songs_failed == 1
    assert report.songs_processed == 1
    assert len(db_session.execute(select(Phrase)).scalars().all()) == 1
