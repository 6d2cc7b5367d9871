from docvault.domains.documents.entities import DocumentRecord, VerificationResult
from docvault.domains.documents.schemas import (
    DocumentUpload, DocumentResponse, VerifyRequest, VerifyResponse,
    HashRequest, HashResponse
)
from docvault.domains.documents.services import DocumentRegistry

__all__ = [
    "DocumentRecord", "VerificationResult",
    "DocumentUpload", "DocumentResponse", "VerifyRequest", "VerifyResponse",
    "HashRequest", "HashResponse",
    "DocumentRegistry"
]
