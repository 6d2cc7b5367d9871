import logging
from typing import List, Optional

from docvault.core.commitment import hash_content, verify_commitment
from docvault.core.errors import DocumentNotFoundError
from docvault.db.repositories.document_repository import DocumentStore, InMemoryDocumentStore
from docvault.domains.documents.entities import DocumentRecord, VerificationResult

logger = logging.getLogger(__name__)


class DocumentRegistry:
    """Registration, lookup and verification of committed documents"""

    def __init__(self, store: Optional[DocumentStore] = None):
        self.store = store if store is not None else InMemoryDocumentStore()

    def register(
        self,
        content: bytes,
        file_name: Optional[str] = None,
        mime_type: Optional[str] = None
    ) -> DocumentRecord:
        """Commit to content and store the new record"""
        record = DocumentRecord.create_record(content, file_name=file_name, mime_type=mime_type)
        self.store.insert(record)

        logger.info(f"Registered document {record.id} (docId {record.doc_id}, {len(content)} bytes)")
        return record

    def get(self, record_id: str) -> DocumentRecord:
        """Record by registration id"""
        record = self.store.get_by_id(record_id)
        if record is None:
            raise DocumentNotFoundError(record_id)
        return record

    def get_by_doc_id(self, doc_id: str) -> DocumentRecord:
        """First registered record for the content hash"""
        record = self.store.get_by_content_key(doc_id)
        if record is None:
            raise DocumentNotFoundError(doc_id)
        return record

    def resolve(self, identifier: str) -> DocumentRecord:
        """Record by id, falling back to docId"""
        record = self.store.get_by_id(identifier)
        if record is None:
            record = self.store.get_by_content_key(identifier)
        if record is None:
            logger.warning(f"No document for identifier {identifier}")
            raise DocumentNotFoundError(identifier)
        return record

    def list(self) -> List[DocumentRecord]:
        return self.store.list_all()

    def count(self) -> int:
        return self.store.count()

    def verify(self, identifier: str, content: bytes) -> VerificationResult:
        """Check presented content against the commitment of the resolved record"""
        record = self.resolve(identifier)
        valid = verify_commitment(content, record.nonce, record.commitment)

        if valid:
            logger.info(f"Content verified against document {record.id}")
        else:
            logger.warning(f"Content does not match document {record.id}")

        return VerificationResult(valid=valid, doc_id=record.doc_id, commitment=record.commitment)

    def mark_anchored(self, record_id: str) -> None:
        """Flag the record as registered on chain, unknown ids are ignored"""
        record = self.store.set_flag(record_id)
        if record is None:
            logger.warning(f"Cannot mark unknown document {record_id} as anchored")
            return
        logger.info(f"Document {record_id} marked as registered on chain")

    @staticmethod
    def hash(content: bytes) -> str:
        return hash_content(content)
