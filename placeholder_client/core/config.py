"""
core/config.py
----------------

Application configuration module.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``. These settings control the upstream base URL,
the HTTP timeout and the log level. The base URL is read once here and
injected into :class:`~placeholder_client.clients.http_client.ApiClient`
at construction time, so no request helper depends on a hidden global.
"""

from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``PLACEHOLDER_``.  For example, to point the client at
    a local mock server you can set
    ``PLACEHOLDER_BASE_URL=http://localhost:3000``.
    """

    base_url: str = Field(DEFAULT_BASE_URL, description="Base URL every endpoint is appended to.")
    http_timeout: float = Field(10.0, gt=0, description="Hard timeout for HTTP requests in seconds.")
    log_level: str = Field("INFO", description="Level for the shared application logger.")

    model_config = SettingsConfigDict(env_prefix="PLACEHOLDER_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""
    return Settings()
