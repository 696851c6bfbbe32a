"""Runtime configuration for deploying bundles to a Sling instance."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values mapped from environment variables."""

    # Target instance
    sling_url: str = Field(
        "http://localhost:8080/system/console",
        description="URL of the running Sling instance; the default only suits WebConsole deployment",
    )
    sling_url_suffix: Optional[str] = Field(
        None,
        description="Suffix resolved against sling_url to form the real target URL",
    )
    sling_user: str = "admin"
    sling_password: str = "admin"
    sling_fail_on_error: bool = True

    # HTTP client
    sling_http_connect_timeout_sec: int = Field(10, ge=0)
    sling_http_response_timeout_sec: int = Field(60, ge=0)

    # Deployment
    sling_deploy_method: Optional[str] = Field(
        None,
        description="WebConsole, WebDAV or SlingPostServlet",
    )
    sling_use_put: bool = Field(False, description="Deprecated, use sling_deploy_method=WebDAV")
    sling_mime_type: str = "application/java-archive"
    sling_bundle_start_level: str = "20"
    sling_bundle_start: bool = True
    sling_refresh_packages: bool = True

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
