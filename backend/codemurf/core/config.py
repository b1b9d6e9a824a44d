"""
Configuration management using Pydantic Settings
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from project root
# config.py is at: backend/codemurf/core/config.py
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent.parent
_project_root = _backend_dir.parent
ENV_FILE = _project_root / ".env"
# Fallback: try in backend/ directory if not found in project root
if not ENV_FILE.exists():
    ENV_FILE = _backend_dir / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE, override=True)

PROJECT_ROOT = _project_root


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "Codemurf"
    app_env: str = Field(default="development", description="Application environment")
    api_host: str = Field(default="0.0.0.0", description="Web server host")
    api_port: int = Field(default=3000, ge=1, le=65535, description="Web server port")
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_uvicorn_access: bool = Field(default=False, description="Enable Uvicorn access logging")
    log_module_levels: Optional[str] = Field(
        default=None,
        description='Module-specific log levels (JSON string, e.g., {"codemurf.services": "DEBUG"})'
    )
    log_format: str = Field(
        default="json",
        description="Log format: 'json' for structured logging, 'text' for plain text"
    )
    log_file_enabled: bool = Field(default=True, description="Enable file logging")
    log_file_path: str = Field(
        default="logs/codemurf.log",
        description="Path to log file (relative to project root)"
    )
    log_file_rotation: str = Field(
        default="midnight",
        description="Log file rotation: 'midnight' or 'W0'..'W6' (weekly)"
    )
    log_file_retention: int = Field(default=30, ge=1, description="Number of rotated log files to keep")
    log_sensitive_data: bool = Field(
        default=False,
        description="Enable logging of sensitive data (tokens, API keys) - NOT RECOMMENDED"
    )

    # External backend API
    backend_api_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the backend REST API"
    )
    backend_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Timeout for a single backend request (seconds)"
    )
    backend_max_connections: int = Field(default=10, ge=1, description="Max concurrent backend connections")

    # Auth
    auth_cookie_name: str = Field(
        default="__session",
        description="Cookie holding the session token when no Authorization header is sent"
    )
    sign_in_url: str = Field(default="/sign-in", description="Where the sign-in links point (hosted auth page)")

    # Catalog
    catalog_source: str = Field(
        default="sample",
        description="Where gallery items come from: 'sample' (bundled data) or 'backend'"
    )
    catalog_page_size: int = Field(default=12, ge=1, le=100, description="Items per 'load more' batch")
    catalog_fetch_limit: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Maximum number of items fetched from the backend for a gallery"
    )
    detail_load_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Maximum wait for a single item before showing the not-found view"
    )

    # Site
    templates_dir: Optional[str] = Field(
        default=None,
        description="Override for the Jinja2 templates directory"
    )
    enable_metrics: bool = Field(default=True, description="Expose Prometheus metrics")

    @field_validator("catalog_source")
    @classmethod
    def validate_catalog_source(cls, v: str) -> str:
        """Only bundled sample data or the backend API are supported"""
        v = v.strip().lower()
        if v not in ("sample", "backend"):
            raise ValueError("catalog_source must be 'sample' or 'backend'")
        return v

    @field_validator("backend_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
