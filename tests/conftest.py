"""
Shared test fixtures and configuration for json-mock-server tests.
"""
import json
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from mockserver import create_app
from mockserver.config import Config
from mockserver.storage.json_store import JsonStore
from mockserver.storage.memory import MemoryStore
from mockserver.storage.records import RecordStore


SAMPLE_DOCUMENT = {
    "notes": [
        {"id": 1, "title": "a"},
        {"id": 3, "title": "c", "tags": ["x"]},
        {"id": 4, "title": "d"},
    ],
    "users": [
        {"id": 1, "name": "Ada"},
    ],
    "empty": [],
    "settings": {"theme": "dark"},
}


@pytest.fixture
def sample_document() -> dict:
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def data_file(tmp_path: Path, sample_document: dict) -> Path:
    """Write the sample document to a temporary backing file."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_document, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def json_store(data_file: Path) -> JsonStore:
    return JsonStore(data_file)


@pytest.fixture
def memory_store(sample_document: dict) -> MemoryStore:
    return MemoryStore(sample_document)


@pytest.fixture
def records(memory_store: MemoryStore) -> RecordStore:
    return RecordStore(memory_store)


@pytest.fixture
def app(data_file: Path) -> Flask:
    """Create a test Flask application serving the temporary backing file."""
    config_class = type("TestConfig", (Config,), {"TESTING": True, "DATA_FILE": data_file})
    app = create_app(config_class)
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()
