"""
Shared fixtures for adversarial tests.

Provides a file-backed store and registration service for concurrent
registration scenarios.
"""

from pathlib import Path

import pytest

from src.adapters.repository.flatfile import FlatFileRecordStore
from src.domain.registration import RegistrationService

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "users.csv"


@pytest.fixture
def store(store_path: Path) -> FlatFileRecordStore:
    """Create a loaded, empty store for each test."""
    store = FlatFileRecordStore(store_path)
    store.load()
    return store


@pytest.fixture
def service(store: FlatFileRecordStore) -> RegistrationService:
    return RegistrationService(store=store, bcrypt_rounds=4)
