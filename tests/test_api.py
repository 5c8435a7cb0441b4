"""Tests for the HTTP API."""

import inspect

import pytest
from fastapi.testclient import TestClient

from codecracker.api.v1.endpoints import crack, decrypt, detect, encrypt, solvers
from codecracker.core.config import Settings, get_settings
from codecracker.main import create_app
from codecracker.models.schemas import CipherType

API = "/api/v1"


class TestAPI:
    """Exercise every route through the FastAPI test client."""

    @pytest.fixture
    def app(self):
        return create_app()

    @pytest.fixture
    def client(self, app):
        return TestClient(app)

    def test_crack(self, client):
        response = client.post(f"{API}/crack", json={"ciphertext": "SGVsbG8gV29ybGQ="})
        assert response.status_code == 200
        body = response.json()
        assert body["results"][0]["plaintext"] == "Hello World"
        assert body["results"][0]["cipher_type"] == "base64"

    def test_crack_with_options(self, client):
        response = client.post(
            f"{API}/crack",
            json={"ciphertext": "Khoor Zruog", "max_results": 2, "max_depth": 1},
        )
        assert response.status_code == 200
        body = response.json()
        assert len(body["results"]) <= 2
        assert any("Short input" in w for w in body["warnings"])

    def test_crack_empty_rejected(self, client):
        response = client.post(f"{API}/crack", json={"ciphertext": ""})
        assert response.status_code == 422

    def test_crack_too_long(self, app, client):
        app.dependency_overrides[get_settings] = lambda: Settings(max_ciphertext_length=5)
        response = client.post(f"{API}/crack", json={"ciphertext": "Khoor Zruog"})
        assert response.status_code == 400
        assert "maximum length" in response.json()["detail"]

    def test_decrypt(self, client):
        response = client.post(
            f"{API}/decrypt",
            json={"ciphertext": "Khoor Zruog", "cipher_type": "caesar"},
        )
        assert response.status_code == 200
        assert response.json()["results"][0]["plaintext"] == "Hello World"

    def test_decrypt_with_key(self, client):
        response = client.post(
            f"{API}/decrypt",
            json={"ciphertext": "LXFOPVEFRNHR", "cipher_type": "vigenere", "key": "LEMON"},
        )
        assert response.status_code == 200
        result = response.json()["results"][0]
        assert result["plaintext"] == "ATTACKATDAWN"
        assert result["key"] == "lemon"

    def test_decrypt_unknown_cipher(self, client):
        response = client.post(
            f"{API}/decrypt",
            json={"ciphertext": "abc", "cipher_type": "enigma"},
        )
        assert response.status_code == 404

    def test_encrypt(self, client):
        response = client.post(
            f"{API}/encrypt",
            json={"plaintext": "Hello", "cipher_type": "caesar", "key": "3"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["ciphertext"] == "Khoor"
        assert body["key"] == 3

    def test_encrypt_not_supported(self, client):
        response = client.post(
            f"{API}/encrypt",
            json={"plaintext": "password", "cipher_type": "hash-lookup"},
        )
        assert response.status_code == 400

    def test_encrypt_missing_key(self, client):
        response = client.post(
            f"{API}/encrypt",
            json={"plaintext": "hello", "cipher_type": "vigenere"},
        )
        assert response.status_code == 400
        assert "vigenere" in response.json()["detail"]

    def test_encrypt_unknown_cipher(self, client):
        response = client.post(
            f"{API}/encrypt",
            json={"plaintext": "hello", "cipher_type": "enigma"},
        )
        assert response.status_code == 404

    def test_detect(self, client):
        response = client.post(f"{API}/detect", json={"ciphertext": "... --- ..."})
        assert response.status_code == 200
        assert response.json()["candidates"][0]["cipher_type"] == "morse"

    def test_detect_blank(self, client):
        response = client.post(f"{API}/detect", json={"ciphertext": "   "})
        assert response.status_code == 200
        assert response.json()["candidates"] == []

    def test_solvers(self, client):
        response = client.get(f"{API}/solvers")
        assert response.status_code == 200
        body = response.json()
        assert set(body["registered"]) == {t.value for t in CipherType}
        assert "hash-lookup" not in body["encryptable"]
        assert len(body["encryptable"]) == len(CipherType) - 1

    @pytest.mark.parametrize("endpoint", [
        crack.crack_ciphertext,
        decrypt.decrypt_ciphertext,
        detect.detect_cipher,
        encrypt.encrypt_plaintext,
        solvers.list_solvers,
    ])
    def test_endpoints_run_in_threadpool(self, endpoint):
        # Plain functions are run off the event loop by FastAPI
        assert not inspect.iscoroutinefunction(endpoint)
