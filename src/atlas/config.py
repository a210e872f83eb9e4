"""
Atlas Gateway - Configuration and settings.

GatewaySettings is read from the environment (and an optional .env file).
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Operation = Literal["read", "create", "update", "delete"]


class GatewaySettings(BaseSettings):
    """
    Settings for the resource gateway.

    Supabase credentials are only required when the Supabase backend
    is selected; the in-memory backend runs without them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    atlas_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Backend
    atlas_backend: Literal["supabase", "memory"] = "supabase"
    supabase_url: str | None = None
    supabase_anon_key: str | None = None

    # Routing
    api_prefix: str = "/api"

    # CORS headers stamped on every response
    cors_allow_origin: str = "*"
    cors_allow_headers: str = "authorization, x-client-info, apikey, content-type"
    cors_allow_methods: str = "GET, POST, PUT, PATCH, DELETE, OPTIONS"

    # Capability map: {"suppliers": ["read", "create"], ...}
    # None = pass every resource name through to the backend
    atlas_resources: dict[str, list[Operation]] | None = None

    # Requests slower than this are logged as warnings
    slow_request_ms: int = 1000

    @field_validator("api_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = "/" + value.strip("/")
        return "" if value == "/" else value

    @model_validator(mode="after")
    def _check_backend_credentials(self) -> "GatewaySettings":
        if self.atlas_backend == "supabase" and not (self.supabase_url and self.supabase_anon_key):
            raise ValueError(
                "SUPABASE_URL and SUPABASE_ANON_KEY are required when ATLAS_BACKEND=supabase"
            )
        return self

    @property
    def is_development(self) -> bool:
        return self.atlas_env == "development"

    @property
    def is_production(self) -> bool:
        return self.atlas_env == "production"

    @property
    def cors_headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Headers": self.cors_allow_headers,
            "Access-Control-Allow-Methods": self.cors_allow_methods,
        }


@lru_cache
def get_settings() -> GatewaySettings:
    """Get cached settings instance."""
    return GatewaySettings()


class _SettingsProxy:
    """Lazy proxy for settings to avoid loading .env at import time."""

    _instance: GatewaySettings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _SettingsProxy()
