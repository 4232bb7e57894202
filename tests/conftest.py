"""
Shared fixtures: an in-memory SQLite database, a small fixed frequency
table and an application wired to both.
"""
import json

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lyriclearn.config.settings import Settings
from lyriclearn.core.db import Base, get_db
from lyriclearn.core.dependencies import ServiceContainer
from lyriclearn.core.metrics import reset_metrics
from lyriclearn.main import create_app
from lyriclearn.models.song import Song, SongTranslation
from lyriclearn.scoring.frequency import FrequencyTable
import lyriclearn.models  # noqa: F401

TEST_FREQUENCIES = {
    "me": 5.2,
    "gusta": 4.0,
    "bailar": 4.0,
    "contigo": 3.5,
    "corazón": 4.2,
    "amor": 4.4,
    "gente": 8.0,
}


@pytest.fixture
def frequency_table():
    return FrequencyTable(TEST_FREQUENCIES, source="test")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def make_song(db_session):
    """Insert a song with stored lyrics and, optionally, an English translation."""
    def _make_song(title, artist, lines, translation=None, synced_times=None, lyrics_raw=None):
        if lyrics_raw is None:
            payload = {"lines": lines}
            if synced_times is not None:
                payload["synchronized"] = {"lines": [{"time": t} for t in synced_times]}
            lyrics_raw = json.dumps(payload, ensure_ascii=False)

        song = Song(
            title=title,
            artist=artist,
            language="es",
            lyrics_raw=lyrics_raw,
            has_translations=translation is not None,
        )
        if translation is not None:
            song.translations.append(SongTranslation(
                target_lang="en",
                lyrics_lines=json.dumps(translation, ensure_ascii=False),
            ))
        db_session.add(song)
        db_session.commit()
        return song

    return _make_song


@pytest.fixture
def app(session_factory, frequency_table):
    settings = Settings(environment="testing", log_json=False)
    application = create_app(settings, ServiceContainer(frequency_table))

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    application.dependency_overrides[get_db] = override_get_db
    reset_metrics()
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(app, frequency_table):
    # ASGITransport does not run the lifespan, so wire the container by hand
    container = ServiceContainer(frequency_table)
    container.initialize_services()
    app.state.service_container = container

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    container.cleanup_services()
