from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "DocVault API"
    app_version: str = "0.1.0"
    api_prefix: str = "/api"

    # Upper bound for decoded document content, 10 MB
    max_content_bytes: int = Field(10 * 1024 * 1024, gt=0)

    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "DOCVAULT_", "extra": "ignore"}


settings = Settings()
