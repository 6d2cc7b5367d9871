from docvault.db.repositories.document_repository import DocumentStore, InMemoryDocumentStore

__all__ = [
    "DocumentStore",
    "InMemoryDocumentStore"
]
