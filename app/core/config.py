"""
Application configuration using Pydantic Settings
"""

from pathlib import Path
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    app_name: str = "JSA Render API"
    app_version: str = "1.0.0"
    port: int = 8080
    app_base_url: str = ""  # Falls back to http://localhost:<port>
    log_level: str = "INFO"
    cors_origins: str = "*"

    # Access Control
    api_key_allowlist: str = ""  # Comma-separated pre-shared keys
    rate_limit_requests: int = 50
    rate_limit_window_seconds: int = 60
    rate_limit_storage_uri: str = "memory://"  # e.g. redis://host:6379

    # Local Storage Settings
    internal_file_dir: str = "./files"
    static_max_age: int = 3600  # Cache lifetime for /files responses

    # Supabase Storage Settings
    supabase_url: str = ""
    supabase_service_role: str = ""
    supabase_bucket: str = ""
    signed_url_expires_in: int = 15 * 60  # 15 minutes

    # Request Settings
    max_body_size: int = 5 * 1024 * 1024  # 5MB

    # Declared for the vision integration, not used by rendering
    openai_api_key: str = ""

    @property
    def base_url(self) -> str:
        return (self.app_base_url or f"http://localhost:{self.port}").rstrip("/")

    @property
    def files_dir(self) -> Path:
        return Path(self.internal_file_dir).resolve()

    @property
    def api_keys(self) -> List[str]:
        return _split_csv(self.api_key_allowlist)

    @property
    def cors_origin_list(self) -> List[str]:
        return _split_csv(self.cors_origins)

    @property
    def use_remote_storage(self) -> bool:
        return bool(
            self.supabase_url and self.supabase_service_role and self.supabase_bucket
        )

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
