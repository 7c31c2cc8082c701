# tests/api_tests/test_crypto_link_endpoints.py
import base64

import pytest
from fastapi.testclient import TestClient


def test_api_root_is_accessible(anonymous_client: TestClient):
    response = anonymous_client.get("/")
    assert response.status_code == 200, f"Root / endpoint failed: {response.text}"
    assert response.json()["message"] == "Welcome to the Happ Crypto Link API!"

def test_create_crypto_link_defaults_to_v4(api_client: TestClient, subscription_url: str):
    response = api_client.post("/crypto-link", json={"content": subscription_url})
    assert response.status_code == 200, f"Create failed: {response.text}"
    data = response.json()
    assert data["version"] == "v4"
    assert data["deep_link"] == "happ://crypt4/"
    assert data["link"] == data["deep_link"] + data["encrypted_content"]
    assert len(base64.b64decode(data["encrypted_content"], validate=True)) == 512

@pytest.mark.parametrize("version, prefix, key_bytes", [
    ("v2", "happ://crypt2/", 256),
    ("v3", "happ://crypt3/", 512),
    ("v4", "happ://crypt4/", 512),
])
def test_create_crypto_link_per_version(api_client: TestClient, subscription_url: str, version: str, prefix: str, key_bytes: int):
    response = api_client.post("/crypto-link", json={"content": subscription_url, "version": version})
    assert response.status_code == 200, f"Create {version} failed: {response.text}"
    data = response.json()
    assert data["version"] == version
    assert data["link"].startswith(prefix)
    assert len(base64.b64decode(data["encrypted_content"])) == key_bytes

def test_repeated_requests_give_different_ciphertexts(api_client: TestClient, subscription_url: str):
    first = api_client.post("/crypto-link", json={"content": subscription_url}).json()
    second = api_client.post("/crypto-link", json={"content": subscription_url}).json()
    assert first["deep_link"] == second["deep_link"]
    assert first["encrypted_content"] != second["encrypted_content"]

def test_oversize_content_is_uniform_failure(api_client: TestClient):
    response = api_client.post("/crypto-link", json={"content": "a" * 502, "version": "v4"})
    assert response.status_code == 422
    assert response.json()["detail"] == "Encryption failed."

def test_unknown_version_is_rejected_by_validation(api_client: TestClient, subscription_url: str):
    response = api_client.post("/crypto-link", json={"content": subscription_url, "version": "v9"})
    assert response.status_code == 422
    assert isinstance(response.json()["detail"], list)

def test_encrypt_url_endpoint(api_client: TestClient, subscription_url: str):
    response = api_client.post("/encrypt", json={"url": subscription_url})
    assert response.status_code == 200, f"Encrypt failed: {response.text}"
    encrypted_link = response.json()["encrypted_link"]
    assert encrypted_link.startswith("happ://crypt4/")
    assert len(base64.b64decode(encrypted_link[len("happ://crypt4/"):])) == 512

def test_encrypt_url_oversize(api_client: TestClient):
    response = api_client.post("/encrypt", json={"url": "https://example.com/" + "x" * 600})
    assert response.status_code == 422
    assert response.json()["detail"] == "Encryption failed."

def test_missing_api_key(anonymous_client: TestClient, subscription_url: str):
    response = anonymous_client.post("/api/v1/crypto-link", json={"content": subscription_url})
    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated: X-API-Key header missing."

def test_invalid_api_key(anonymous_client: TestClient, subscription_url: str):
    response = anonymous_client.post(
        "/api/v1/encrypt", json={"url": subscription_url}, headers={"X-API-Key": "wrong-key"}
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid API Key."
