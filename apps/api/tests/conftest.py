"""
Shared fixtures for the character API tests.

Every test gets a freshly built app (and therefore a fresh seeded store),
so nothing leaks between tests.
"""
import pytest
from fastapi.testclient import TestClient

from app.core.store import CharacterStore
from app.main import create_app


@pytest.fixture
def store() -> CharacterStore:
    return CharacterStore.seeded()


@pytest.fixture
def client(store: CharacterStore) -> TestClient:
    return TestClient(create_app(store=store), raise_server_exceptions=False)


@pytest.fixture
def harry(client: TestClient) -> dict:
    return client.get("/char").json()[0]
