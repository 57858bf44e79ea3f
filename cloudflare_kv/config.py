"""
Configuration Management Module

Configures client parameters via environment variables or .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_BASE_URL = "https://api.cloudflare.com/client/v4"


class Settings(BaseSettings):
    """
    Client Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Account Config
    # Cloudflare account id, substituted into every request path
    CLOUDFLARE_ACCOUNT_ID: str = ""
    # Default KV namespace id, used when a call does not override it
    CLOUDFLARE_NAMESPACE_ID: str = ""
    # API token with Workers KV Storage permissions
    CLOUDFLARE_ACCESS_TOKEN: str = ""

    # HTTP Client Config
    # API root, override for testing against a local stub
    CLOUDFLARE_API_BASE_URL: str = DEFAULT_API_BASE_URL
    # Request timeout (seconds); None disables the client-side timeout
    HTTP_TIMEOUT: Optional[float] = None

    # Logging Config
    DEBUG: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get client configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Configuration instance
    """
    return Settings()
