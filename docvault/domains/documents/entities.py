import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from docvault.core.commitment import commit, generate_nonce, hash_content


@dataclass(frozen=True)
class DocumentRecord:
    """Registered document: content commitment plus the nonce needed to re-check it"""

    id: str
    doc_id: str
    commitment: str
    nonce: str
    content_hash: str
    created_at: datetime
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    registered_on_chain: bool = False

    @classmethod
    def create_record(
        cls,
        content: bytes,
        file_name: Optional[str] = None,
        mime_type: Optional[str] = None
    ) -> "DocumentRecord":
        """Build a record for content with a fresh id and nonce"""
        content_hash = hash_content(content)
        nonce = generate_nonce()

        return cls(
            id=str(uuid.uuid4()),
            # docId is content-addressed, duplicate uploads share it
            doc_id=content_hash,
            commitment=commit(content, nonce),
            nonce=nonce.hex(),
            content_hash=content_hash,
            created_at=datetime.now(timezone.utc),
            file_name=file_name,
            mime_type=mime_type,
            registered_on_chain=False
        )

    def mark_registered_on_chain(self) -> "DocumentRecord":
        """Copy of the record with the on-chain flag set"""
        if self.registered_on_chain:
            return self
        return replace(self, registered_on_chain=True)

    def __repr__(self) -> str:
        return f"DocumentRecord(id={self.id}, doc_id={self.doc_id}, registered_on_chain={self.registered_on_chain})"


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of checking presented content against a record"""

    valid: bool
    doc_id: str
    commitment: str
