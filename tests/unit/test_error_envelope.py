"""
Unit tests for the error response envelope
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import ValidationError

from lyriclearn.core.error_handlers import ErrorHandler, setup_error_handlers
from lyriclearn.core.exceptions import (
    ErrorCode,
    FrequencyTableError,
    LyricsParseError,
    ServiceUnavailableError,
    SongNotFoundError,
)
from lyriclearn.schemas.base import StandardErrorResponse


@pytest.fixture
def failing_client():
    app = FastAPI()
    setup_error_handlers(app)

    @app.get("/missing-song")
    async def missing_song():
        raise SongNotFoundError(42)

    @app.get("/broken-lyrics")
    async def broken_lyrics():
        raise LyricsParseError(7, "invalid JSON")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("unexpected")

    @app.get("/typed/{value}")
    async def typed(value: int):
        return {"value": value}

    return TestClient(app, raise_server_exceptions=False)


def test_exception_status_codes():
    assert SongNotFoundError(1).status_code == 404
    assert LyricsParseError(1, "bad").status_code == 422
    assert FrequencyTableError("x.json", "missing").status_code == 500
    assert ServiceUnavailableError("phrase_scorer").status_code == 503


def test_song_not_found_envelope(failing_client):
    r = failing_client.get("/missing-song")

    assert r.status_code == 404
    body = r.json()
    assert body["error_code"] == ErrorCode.SONG_NOT_FOUND.value
    assert body["details"] == {"song_id": 42}
    assert "request_id" in body
    assert "timestamp" in body


def test_lyrics_parse_error_envelope(failing_client):
    r = failing_client.get("/broken-lyrics")

    assert r.status_code == 422
    assert r.json()["error_code"] == "LYRICS_PARSE_FAILED"


def test_validation_error_envelope(failing_client):
    r = failing_client.get("/typed/not-a-number")

    assert r.status_code == 422
    body = r.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert body["details"]["validation_errors"][0]["field"] == "path.value"


def test_unknown_route_envelope(failing_client):
    r = failing_client.get("/nowhere")

    assert r.status_code == 404
    assert r.json()["error_code"] == "NOT_FOUND"


def test_unexpected_exception_envelope(failing_client):
    r = failing_client.get("/boom")

    assert r.status_code == 500
    body = r.json()
    assert body["error_code"] == "INTERNAL_SERVER_ERROR"
    assert "unexpected" not in body["message"]


def test_error_statistics_are_tracked():
    handler = ErrorHandler()
    handler._track_error("SONG_NOT_FOUND")
    handler._track_error("SONG_NOT_FOUND")

    stats = handler.get_error_statistics()

    assert stats["error_counts"] == {"SONG_NOT_FOUND": 2}
    assert stats["total_errors"] == 2


def test_error_code_must_be_uppercase():
    with pytest.raises(ValidationError):
        StandardErrorResponse(error_code="not_upper", message="x")
