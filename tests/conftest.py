"""
Pytest configuration and fixtures for DocVault tests.
"""

import pytest
from fastapi.testclient import TestClient

from docvault.core.registry import get_registry
from docvault.db.repositories.document_repository import InMemoryDocumentStore
from docvault.domains.documents.services import DocumentRegistry
from docvault.main import app


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryDocumentStore()


@pytest.fixture
def registry(store):
    """Registry over a fresh store."""
    return DocumentRegistry(store)


@pytest.fixture
def client(registry):
    """HTTP client with the registry dependency pointed at the test registry."""
    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_content():
    """Small legal document body."""
    return b"Legal Document - Verification Test\nDate: 2024-01-15T10:00:00Z"
