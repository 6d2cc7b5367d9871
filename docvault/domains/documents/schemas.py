import base64
import binascii
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from docvault.core.config import settings
from docvault.core.errors import InvalidInputError


def decode_content(value: str) -> bytes:
    """Decode base64 content, rejecting malformed input and oversized documents"""
    try:
        content = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidInputError("contentBase64 is not valid base64")

    if len(content) > settings.max_content_bytes:
        raise InvalidInputError(
            f"Content exceeds the limit of {settings.max_content_bytes} bytes"
        )
    return content


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentPayload(CamelModel):
    """Request body carrying base64 encoded document content"""
    content_base64: bytes = Field(..., description="Document content, base64 encoded")

    @field_validator("content_base64", mode="before")
    @classmethod
    def validate_content(cls, v):
        if not isinstance(v, str):
            raise InvalidInputError("contentBase64 must be a string")
        return decode_content(v)

    @property
    def content(self) -> bytes:
        return self.content_base64


class DocumentUpload(ContentPayload):
    """Schema for registering a document"""
    file_name: Optional[str] = Field(None, max_length=255)
    mime_type: Optional[str] = Field(None, max_length=255)


class VerifyRequest(ContentPayload):
    """Schema for checking content against a registered document"""
    pass


class HashRequest(ContentPayload):
    """Schema for hashing content without registering it"""
    pass


class DocumentResponse(CamelModel):
    """Registered document as returned to clients"""
    id: str
    doc_id: str
    commitment: str
    content_hash: str
    nonce: str
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    created_at: datetime
    registered_on_chain: bool


class VerifyResponse(CamelModel):
    """Schema for the verification outcome"""
    valid: bool
    doc_id: str
    commitment: str


class HashResponse(BaseModel):
    hash: str
