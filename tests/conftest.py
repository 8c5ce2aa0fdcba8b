"""
Shared pytest fixtures.

Usage:
    def test_something(store, client):
        store.seed([ExerciseCategory(name="Legs")])
        response = client.get("/categories")
"""

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.deps import get_settings
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeObjectStore, create_object_store


@pytest.fixture
def test_settings() -> Settings:
    """Settings that never read .env and never touch the file system."""
    return Settings(environment="test", store_backend="memory", _env_file=None)


@pytest.fixture
def store() -> FakeObjectStore:
    """A fake object store seeded with the sample library."""
    return create_object_store(with_library=True)


@pytest.fixture
def empty_store() -> FakeObjectStore:
    return create_object_store()


@pytest.fixture
def app(test_settings: Settings, store: FakeObjectStore) -> FastAPI:
    """App wired to the fake store; get_settings is overridden to test settings."""
    application = create_app(settings=test_settings, store=store)
    application.dependency_overrides[get_settings] = lambda: test_settings
    return application


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
