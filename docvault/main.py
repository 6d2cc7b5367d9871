import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docvault.core.config import settings
from docvault.api.http.health import router as health_router
from docvault.api.http.documents import router as documents_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title=settings.app_name,
    description="Document registration and authenticity verification via content commitments",
    version=settings.app_version
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(documents_router)


@app.get("/")
async def root():
    """Service information"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": f"{settings.api_prefix}/documents",
        "health": f"{settings.api_prefix}/health"
    }
