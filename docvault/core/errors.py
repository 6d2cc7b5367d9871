class DocVaultError(Exception):
    """Base error for document registry operations"""


class InvalidInputError(DocVaultError, ValueError):
    """Content could not be decoded or is out of bounds"""


class DocumentNotFoundError(DocVaultError, LookupError):
    """No record resolves for the given identifier"""

    def __init__(self, identifier: str):
        super().__init__(f"Document not found: {identifier}")
        self.identifier = identifier


class DuplicateDocumentError(DocVaultError):
    """A record with the same id is already stored"""

    def __init__(self, record_id: str):
        super().__init__(f"Document already exists: {record_id}")
        self.record_id = record_id
