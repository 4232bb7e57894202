"""
Basic test to verify the project setup is working correctly.
"""

import pytest
from fastapi.testclient import TestClient

from lyriclearn import __version__
from lyriclearn.config.settings import ScoringSettings, Settings
from lyriclearn.core.dependencies import ServiceContainer
from lyriclearn.core.exceptions import ServiceUnavailableError
from lyriclearn.main import app


def test_app_creation():
    """Test that the FastAPI app can be created successfully."""
    assert app is not None
    assert app.title == "LyricLearn"
    assert app.version == __version__


def test_root_endpoint(client):
    """Test the root endpoint returns expected response."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data
    assert data["status"] == "running"


def test_service_container_lifecycle(frequency_table):
    """Scorers are only available between initialize and cleanup."""
    container = ServiceContainer(frequency_table)
    assert not container.is_initialized

    with pytest.raises(ServiceUnavailableError):
        container.phrase_scorer

    container.initialize_services()
    assert container.is_initialized
    assert container.frequency_table is frequency_table
    assert container.vocabulary_scorer.frequency_table is frequency_table
    assert container.difficulty_scorer.frequency_table is frequency_table

    container.cleanup_services()
    assert not container.is_initialized


def test_service_container_loads_packaged_table():
    container = ServiceContainer()
    container.initialize_services()

    assert len(container.frequency_table) > 100
    container.cleanup_services()


def test_scorers_unavailable_before_startup(app):
    # Without the lifespan the container is never attached to the app
    client = TestClient(app, raise_server_exceptions=False)

    response = client.post("/scoring/phrase", json={"phrase": "Hola"})

    assert response.status_code == 503
    assert response.json()["error_code"] == "SERVICE_UNAVAILABLE"


def test_service_container_reads_configured_idioms(frequency_table, tmp_path):
    idioms_file = tmp_path / "idioms.json"
    idioms_file.write_text('["media naranja"]', encoding="utf-8")
    settings = Settings(scoring=ScoringSettings(idioms_path=str(idioms_file)))

    container = ServiceContainer(frequency_table)
    container.initialize_services(settings)

    assert container.difficulty_scorer.idioms == ("media naranja",)
    container.cleanup_services()
