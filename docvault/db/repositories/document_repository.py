import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, TYPE_CHECKING

from docvault.core.errors import DuplicateDocumentError

if TYPE_CHECKING:
    from docvault.domains.documents.entities import DocumentRecord

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    """Storage for document records, keyed by id and by content hash"""

    @abstractmethod
    def insert(self, record: "DocumentRecord") -> "DocumentRecord":
        """Store a new record, the id must not exist yet"""

    @abstractmethod
    def get_by_id(self, record_id: str) -> Optional["DocumentRecord"]:
        """Record by registration id"""

    @abstractmethod
    def get_by_content_key(self, doc_id: str) -> Optional["DocumentRecord"]:
        """First registered record with the given docId"""

    @abstractmethod
    def list_all(self) -> List["DocumentRecord"]:
        """All records in registration order"""

    @abstractmethod
    def set_flag(self, record_id: str) -> Optional["DocumentRecord"]:
        """Set registered_on_chain, None if the record is unknown"""

    @abstractmethod
    def count(self) -> int:
        """Number of stored records"""


class InMemoryDocumentStore(DocumentStore):
    """Process-local store, contents are lost on restart"""

    def __init__(self):
        self._lock = threading.RLock()
        self._records: Dict[str, "DocumentRecord"] = {}
        # docId -> id of the first record registered with that content
        self._first_by_doc_id: Dict[str, str] = {}

    def insert(self, record: "DocumentRecord") -> "DocumentRecord":
        with self._lock:
            if record.id in self._records:
                raise DuplicateDocumentError(record.id)

            self._records[record.id] = record
            self._first_by_doc_id.setdefault(record.doc_id, record.id)

        return record

    def get_by_id(self, record_id: str) -> Optional["DocumentRecord"]:
        with self._lock:
            return self._records.get(record_id)

    def get_by_content_key(self, doc_id: str) -> Optional["DocumentRecord"]:
        with self._lock:
            record_id = self._first_by_doc_id.get(doc_id)
            if record_id is None:
                return None
            return self._records[record_id]

    def list_all(self) -> List["DocumentRecord"]:
        with self._lock:
            return list(self._records.values())

    def set_flag(self, record_id: str) -> Optional["DocumentRecord"]:
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return None

            updated = record.mark_registered_on_chain()
            if updated is not record:
                self._records[record_id] = updated
                logger.debug(f"Record {record_id} flagged as registered on chain")

            return updated

    def count(self) -> int:
        with self._lock:
            return len(self._records)
