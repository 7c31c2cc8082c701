# tests/api_tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from typing import Generator

from api_server.main import app

TEST_API_KEY = "test_happ_crypto_api_key"

@pytest.fixture(scope="session")
def api_key() -> Generator[str, None, None]:
    """Sets the key the server expects for the whole test session."""
    mp = pytest.MonkeyPatch()
    mp.setenv("HAPP_CRYPTO_API_KEY", TEST_API_KEY)
    yield TEST_API_KEY
    mp.undo()

@pytest.fixture(scope="session")
def api_client(api_key: str) -> Generator[TestClient, None, None]:
    """
    Provides an authenticated in-process client (httpx under the hood) rooted at /api/v1.
    The 'with' block runs the app's lifespan startup and shutdown.
    """
    headers = {
        "X-API-Key": api_key,
        "accept": "application/json",
    }
    with TestClient(app, base_url="http://testserver/api/v1") as client:
        client.headers.update(headers)
        yield client

@pytest.fixture(scope="session")
def anonymous_client() -> Generator[TestClient, None, None]:
    with TestClient(app) as client:
        yield client

@pytest.fixture(scope="module")
def subscription_url() -> str:
    return "https://subscription.link.com/s/remnawavetop"
