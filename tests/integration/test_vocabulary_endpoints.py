"""
Integration tests for the vocabulary endpoints
"""
import pytest

from lyriclearn.scoring.vocabulary_scoring import VocabularyScorer
from lyriclearn.services.vocabulary_extraction_service import VocabularyExtractionService

LYRICS = ["Mi corazón late por tu amor", "La gente baila sin parar"]


@pytest.fixture
def song(make_song):
    return make_song("Latido", "Alguien", LYRICS)


@pytest.fixture
def stored_vocabulary(db_session, song, frequency_table):
    return VocabularyExtractionService(db_session, VocabularyScorer(frequency_table)).run()


def test_list_vocabulary(client, stored_vocabulary):
    r = client.get("/vocabulary")

    assert r.status_code == 200
    data = r.json()["data"]
    assert data["total_count"] == stored_vocabulary.stored
    assert data["vocabulary"][0]["word"] == "corazón"
    assert data["vocabulary"][0]["translation"] == "heart"
    assert data["vocabulary"][0]["examples"] == ["Mi corazón late por tu amor"]


def test_search_vocabulary_keeps_total_count(client, stored_vocabulary):
    r = client.get("/vocabulary", params={"search": "LOVE", "limit": 10})

    data = r.json()["data"]
    assert [v["word"] for v in data["vocabulary"]] == ["amor"]
    assert data["total_count"] == stored_vocabulary.stored


def test_song_vocabulary(client, song):
    r = client.get(f"/songs/{song.id}/vocabulary", params={"limit": 2})

    assert r.status_code == 200
    data = r.json()["data"]
    assert data["song_id"] == song.id
    assert data["language"] == "es"
    assert [v["word"] for v in data["vocabulary"]] == ["corazón", "amor"]
    assert data["vocabulary"][0]["part_of_speech"] == "noun"
    assert data["vocabulary"][1]["translation"] == "love"


def test_song_vocabulary_not_found(client):
    r = client.get("/songs/999/vocabulary")

    assert r.status_code == 404
    body = r.json()
    assert body["error_code"] == "SONG_NOT_FOUND"
    assert body["details"] == {"song_id": 999}


def test_song_vocabulary_malformed_lyrics(client, make_song):
    broken = make_song("Roto", "Nadie", [], lyrics_raw="{not json")

    r = client.get(f"/songs/{broken.id}/vocabulary")

    assert r.status_code == 422
    assert r.json()["error_code"] == "LYRICS_PARSE_FAILED"
