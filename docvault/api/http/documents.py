from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from docvault.core.config import settings
from docvault.core.errors import DocumentNotFoundError
from docvault.core.registry import get_registry
from docvault.domains.documents.entities import DocumentRecord
from docvault.domains.documents.schemas import (
    DocumentUpload, DocumentResponse, VerifyRequest, VerifyResponse,
    HashRequest, HashResponse
)
from docvault.domains.documents.services import DocumentRegistry

router = APIRouter(prefix=f"{settings.api_prefix}/documents", tags=["documents"])


def to_response(record: DocumentRecord) -> DocumentResponse:
    return DocumentResponse(
        id=record.id,
        doc_id=record.doc_id,
        commitment=record.commitment,
        content_hash=record.content_hash,
        nonce=record.nonce,
        file_name=record.file_name,
        mime_type=record.mime_type,
        created_at=record.created_at,
        registered_on_chain=record.registered_on_chain
    )


@router.post("/upload", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    upload: DocumentUpload,
    registry: DocumentRegistry = Depends(get_registry)
):
    """Register a document and return its commitment record"""
    record = registry.register(
        upload.content,
        file_name=upload.file_name,
        mime_type=upload.mime_type
    )
    return to_response(record)


# Alias of /upload on the collection path
@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    upload: DocumentUpload,
    registry: DocumentRegistry = Depends(get_registry)
):
    """Register a document"""
    return await upload_document(upload, registry)


@router.get("", response_model=List[DocumentResponse])
async def list_documents(registry: DocumentRegistry = Depends(get_registry)):
    """All registered documents in registration order"""
    return [to_response(record) for record in registry.list()]


@router.post("/hash", response_model=HashResponse)
async def hash_document(request: HashRequest):
    """SHA-256 of the content without registering it"""
    return HashResponse(hash=DocumentRegistry.hash(request.content))


@router.get("/{identifier}", response_model=DocumentResponse)
async def get_document(
    identifier: str,
    registry: DocumentRegistry = Depends(get_registry)
):
    """Document by id or docId"""
    try:
        record = registry.resolve(identifier)
    except DocumentNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )

    return to_response(record)


@router.post("/{identifier}/verify", response_model=VerifyResponse)
async def verify_document(
    identifier: str,
    request: VerifyRequest,
    registry: DocumentRegistry = Depends(get_registry)
):
    """Check content against the stored commitment of a document"""
    try:
        result = registry.verify(identifier, request.content)
    except DocumentNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )

    return VerifyResponse(
        valid=result.valid,
        doc_id=result.doc_id,
        commitment=result.commitment
    )
