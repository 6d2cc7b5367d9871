"""
Tests for the HTTP API.
"""

import base64
import hashlib

from docvault.core.config import settings


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def upload(client, content: bytes, **metadata):
    return client.post("/api/documents/upload", json={"contentBase64": b64(content), **metadata})


class TestRoot:
    """Tests for service info and health."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert body["name"] == settings.app_name
        assert body["health"] == "/api/health"

    def test_health(self, client, registry):
        registry.register(b"hello")
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["documents"] == 1


class TestUpload:
    """Tests for document registration."""

    def test_upload(self, client, sample_content):
        response = upload(client, sample_content, fileName="verify-test.txt", mimeType="text/plain")
        assert response.status_code == 201

        body = response.json()
        expected_hash = hashlib.sha256(sample_content).hexdigest()
        assert body["docId"] == expected_hash
        assert body["contentHash"] == expected_hash
        assert body["commitment"] == hashlib.sha256(
            sample_content + bytes.fromhex(body["nonce"])
        ).hexdigest()
        assert body["fileName"] == "verify-test.txt"
        assert body["mimeType"] == "text/plain"
        assert body["registeredOnChain"] is False
        assert "createdAt" in body

    def test_collection_alias(self, client, registry):
        response = client.post("/api/documents", json={"contentBase64": b64(b"hello")})
        assert response.status_code == 201
        assert registry.get(response.json()["id"]).doc_id == response.json()["docId"]

    def test_snake_case_field_names_accepted(self, client):
        response = client.post(
            "/api/documents/upload",
            json={"content_base64": b64(b"hello"), "file_name": "a.txt"}
        )
        assert response.status_code == 201
        assert response.json()["fileName"] == "a.txt"

    def test_empty_content(self, client):
        response = client.post("/api/documents/upload", json={"contentBase64": ""})
        assert response.status_code == 201
        assert response.json()["contentHash"] == hashlib.sha256(b"").hexdigest()

    def test_missing_content(self, client, registry):
        response = client.post("/api/documents/upload", json={"fileName": "a.txt"})
        assert response.status_code == 422
        assert registry.count() == 0

    def test_invalid_base64(self, client, registry):
        response = client.post("/api/documents/upload", json={"contentBase64": "not base64!"})
        assert response.status_code == 422
        assert registry.count() == 0

    def test_non_string_content(self, client):
        response = client.post("/api/documents/upload", json={"contentBase64": 42})
        assert response.status_code == 422

    def test_content_over_limit(self, client, monkeypatch):
        monkeypatch.setattr(settings, "max_content_bytes", 4)
        response = upload(client, b"hello")
        assert response.status_code == 422


class TestListAndGet:
    """Tests for listing and fetching documents."""

    def test_list(self, client):
        ids = [upload(client, content).json()["id"] for content in (b"a", b"b")]
        response = client.get("/api/documents")
        assert response.status_code == 200
        assert [doc["id"] for doc in response.json()] == ids

    def test_list_empty(self, client):
        assert client.get("/api/documents").json() == []

    def test_get_by_id(self, client):
        created = upload(client, b"hello").json()
        response = client.get(f"/api/documents/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_by_doc_id(self, client):
        created = upload(client, b"hello").json()
        response = client.get(f"/api/documents/{created['docId']}")
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_get_not_found(self, client):
        response = client.get("/api/documents/nonexistent-id")
        assert response.status_code == 404
        assert response.json()["detail"] == "Document not found"

    def test_anchored_flag_exposed(self, client, registry):
        created = upload(client, b"hello").json()
        registry.mark_anchored(created["id"])
        assert client.get(f"/api/documents/{created['id']}").json()["registeredOnChain"] is True


class TestVerify:
    """Tests for document verification."""

    def test_valid(self, client):
        created = upload(client, b"hello").json()
        response = client.post(
            f"/api/documents/{created['id']}/verify",
            json={"contentBase64": b64(b"hello")}
        )
        assert response.status_code == 200
        assert response.json() == {
            "valid": True,
            "docId": created["docId"],
            "commitment": created["commitment"]
        }

    def test_invalid(self, client):
        created = upload(client, b"hello").json()
        response = client.post(
            f"/api/documents/{created['id']}/verify",
            json={"contentBase64": b64(b"hello!")}
        )
        assert response.status_code == 200
        assert response.json()["valid"] is False

    def test_by_doc_id(self, client):
        created = upload(client, b"hello").json()
        response = client.post(
            f"/api/documents/{created['docId']}/verify",
            json={"contentBase64": b64(b"hello")}
        )
        assert response.json()["valid"] is True

    def test_not_found(self, client):
        response = client.post(
            "/api/documents/nonexistent-id/verify",
            json={"contentBase64": b64(b"hello")}
        )
        assert response.status_code == 404

    def test_missing_content(self, client):
        created = upload(client, b"hello").json()
        response = client.post(f"/api/documents/{created['id']}/verify", json={})
        assert response.status_code == 422


class TestHash:
    """Tests for the hash utility route."""

    def test_hash(self, client, registry):
        response = client.post("/api/documents/hash", json={"contentBase64": b64(b"hello")})
        assert response.status_code == 200
        assert response.json() == {"hash": hashlib.sha256(b"hello").hexdigest()}
        assert registry.count() == 0

    def test_invalid_base64(self, client):
        response = client.post("/api/documents/hash", json={"contentBase64": "***"})
        assert response.status_code == 422
