"""
Centralized configuration for the CampusBuzz admin backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, MIRROR_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "CampusBuzz Admin API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # Console behaviour
    admin_identity: str = "admin"
    seed_sample_data: bool = True

    # Supabase (external directory mirror)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_storage_bucket: str = "id-documents"

    # Mirror behaviour
    mirror_timeout_seconds: float = 5.0
    signed_url_ttl_seconds: int = 7 * 24 * 60 * 60
    demo_storage_base_url: str = "https://storage.googleapis.com/campusbuzz-project.appspot.com"

    # Uploads
    max_upload_bytes: int = 5 * 1024 * 1024

    @property
    def mirror_configured(self) -> bool:
        """Whether credentials for the connected mirror are present."""
        return bool(self.supabase_url and self.supabase_service_role_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
