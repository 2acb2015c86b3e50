"""
Centralized Configuration Module

Provides configuration classes and environment variable loading for the API.

Usage:
    from propfinder.config import get_config

    config = get_config()
    supabase_url = config.supabase.url
    api_port = config.api.port
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# .env.local wins over .env; neither overrides real environment variables
load_dotenv(".env.local")
load_dotenv(".env")


def _get_project_root() -> Path:
    """Get the project root directory."""
    # config.py -> propfinder -> src -> project_root
    return Path(__file__).resolve().parent.parent.parent


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str) -> List[str]:
    raw = os.getenv(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class AppConfig:
    """Application identity and runtime environment."""

    name: str = "PropFinder API"
    version: str = "1.0.0"
    description: str = "API para la plataforma inmobiliaria PropFinder"
    environment: str = field(default_factory=lambda: os.getenv(
        "PROPFINDER_ENV", os.getenv("NODE_ENV", "development")
    ))


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = field(default_factory=lambda: os.getenv(
        "PROPFINDER_API_HOST", "0.0.0.0"
    ))
    # Cloud Run injects PORT
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    debug: bool = field(default_factory=lambda: _env_flag("PROPFINDER_DEBUG"))
    frontend_dir: str = field(default_factory=lambda: os.getenv(
        "PROPFINDER_FRONTEND_DIR",
        str(_get_project_root() / "frontend" / "dist")
    ))
    backend_url: str = field(default_factory=lambda: os.getenv(
        "BACKEND_URL", "http://localhost:3000"
    ))


@dataclass
class SupabaseConfig:
    """Hosted database credentials."""

    url: Optional[str] = field(default_factory=lambda: os.getenv("SUPABASE_URL"))
    service_role_key: Optional[str] = field(default_factory=lambda: os.getenv(
        "SUPABASE_SERVICE_ROLE_KEY"
    ))
    table: str = field(default_factory=lambda: os.getenv(
        "PROPFINDER_PROPERTIES_TABLE", "properties"
    ))

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.service_role_key)


@dataclass
class CORSConfig:
    """Cross-origin settings applied with flask-cors."""

    allowed_origins: List[str] = field(default_factory=lambda: [
        "http://localhost:3000",
        "http://localhost:5173",
        r"^https://[^/]+\.a\.run\.app$",  # Google Cloud Run
    ] + _env_list("PROPFINDER_CORS_ORIGINS"))
    credentials: bool = True
    methods: List[str] = field(default_factory=lambda: [
        "GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS",
    ])
    allowed_headers: List[str] = field(default_factory=lambda: [
        "Content-Type", "Authorization", "Accept",
    ])


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv(
        "PROPFINDER_LOG_LEVEL", "INFO"
    ).upper())
    log_file: Optional[str] = field(default_factory=lambda: os.getenv(
        "PROPFINDER_LOG_FILE"
    ))

    def __post_init__(self):
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level not in valid_levels:
            self.level = "INFO"


@dataclass
class Config:
    """Main configuration container."""

    app: AppConfig = field(default_factory=AppConfig)
    api: APIConfig = field(default_factory=APIConfig)
    supabase: SupabaseConfig = field(default_factory=SupabaseConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config: The application configuration.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the configuration (useful for testing)."""
    global _config
    _config = None
