from functools import lru_cache
from typing import Dict, Optional

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings

from .schemas import CallerOptions


class Settings(BaseSettings):
    base_url: Optional[str] = Field(None, description="Default REST base URL")
    request_timeout: float = Field(10.0, description="HTTP timeout in seconds")
    default_headers: Dict[str, str] = Field(default_factory=dict)

    class Config:
        env_prefix = "HTTPCALLER_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def create_http_client(settings: Optional[Settings] = None) -> httpx.AsyncClient:
    settings = settings or get_settings()
    return httpx.AsyncClient(timeout=settings.request_timeout)


def caller_options_from_settings(
    settings: Optional[Settings] = None,
    base_success_response: Optional[dict] = None,
) -> CallerOptions:
    settings = settings or get_settings()
    return CallerOptions(
        default_headers=dict(settings.default_headers),
        base_success_response=base_success_response,
    )
