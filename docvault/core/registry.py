from docvault.db.repositories.document_repository import InMemoryDocumentStore
from docvault.domains.documents.services import DocumentRegistry

# Process-wide registry backing the HTTP API
registry = DocumentRegistry(InMemoryDocumentStore())


# Dependency for FastAPI routes
def get_registry() -> DocumentRegistry:
    return registry
