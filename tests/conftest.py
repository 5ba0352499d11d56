"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings pointed at per-test temporary files
- A loaded FlatFileRecordStore
- A test client wired to the real application
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.adapters.audit.file_log import FileAuditLog
from src.adapters.repository.flatfile import FlatFileRecordStore
from src.config.settings import get_settings


@pytest.fixture
def settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Point settings at tmp_path files and use a cheap bcrypt cost."""
    monkeypatch.setenv("STORE_PATH", str(tmp_path / "users.csv"))
    monkeypatch.setenv("AUDIT_LOG_PATH", str(tmp_path / "log.txt"))
    monkeypatch.setenv("BCRYPT_COST", "4")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def file_store(settings_env: None) -> FlatFileRecordStore:
    """Loaded record store backed by the configured tmp file."""
    store = FlatFileRecordStore(get_settings().store_path)
    store.load()
    return store


@pytest.fixture
def app_client(file_store: FlatFileRecordStore) -> TestClient:
    """Test client for the real app with state wired to tmp files."""
    from src.api.main import app

    app.state.store = file_store
    app.state.audit_log = FileAuditLog(get_settings().audit_log_path)
    return TestClient(app)
