"""Pytest configuration and fixtures."""

import json

import pytest
from fastapi.testclient import TestClient

from charity_api.app.core.config import settings


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    """Point the JSON document storage at an empty temporary file."""
    path = tmp_path / "organizations.json"
    path.write_text(json.dumps({"orphanages": [], "oldageHomes": []}), encoding="utf-8")
    monkeypatch.setattr(settings, "data_file", str(path))
    return path


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the SQLite store at a temporary database file."""
    path = tmp_path / "charity.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    return path


@pytest.fixture
def write_document(data_file):
    """Return a helper that replaces the document on disk."""

    def _write(orphanages=None, oldage_homes=None):
        document = {"orphanages": orphanages or [], "oldageHomes": oldage_homes or []}
        data_file.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
        return document

    return _write


@pytest.fixture
def read_document(data_file):
    def _read():
        return json.loads(data_file.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def client(data_file, database):
    """A test client for a freshly created application."""
    from charity_api.app.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
