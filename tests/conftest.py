"""Shared fixtures: a temporary store root and an API client bound to it."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core import config
from app.main import app
from app.services.file_store import FileStore


@pytest.fixture
def store_root(tmp_path: Path, monkeypatch) -> Path:
    root = tmp_path / "store"
    root.mkdir()
    monkeypatch.setattr(config, "FILESTORE_ROOT", str(root))
    return root


@pytest.fixture
def store(store_root: Path) -> FileStore:
    return FileStore(str(store_root))


@pytest.fixture
def client(store_root: Path):
    with TestClient(app) as test_client:
        yield test_client
