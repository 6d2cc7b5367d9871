from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from docvault.core.config import settings
from docvault.core.registry import get_registry
from docvault.domains.documents.services import DocumentRegistry

router = APIRouter(prefix=f"{settings.api_prefix}/health", tags=["health"])


@router.get("")
async def health(registry: DocumentRegistry = Depends(get_registry)):
    """Liveness check with the number of registered documents"""
    return {
        "status": "ok",
        "documents": registry.count(),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
