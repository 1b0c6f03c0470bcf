from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # repository root
PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default so the site starts with no environment at all.
    Values come from environment variables or a `.env` file at the repository root.
    """

    # Server settings
    host: str = Field(default="0.0.0.0", min_length=1, description="Listen address")
    port: int = Field(default=8080, ge=0, le=65535, description="Listen port (0 picks a free port)")
    idle_timeout: int = Field(default=60, ge=1, description="Keep-alive idle timeout in seconds")
    shutdown_timeout: int = Field(default=10, ge=1, description="Graceful shutdown window in seconds")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_file: Path | None = Field(default=None, description="Optional JSON log file")

    # Bundled content
    data_dir: Path = Field(default=PACKAGE_DIR / "data", description="Directory holding the JSON fixtures")
    templates_dir: Path = Field(default=PACKAGE_DIR / "templates", description="Directory holding the templates")
    template_pattern: str = Field(default="*.html", min_length=1, description="Glob of templates parsed at startup")
    static_dir: Path = Field(default=PACKAGE_DIR / "static", description="Directory served under /static")

    # Contact form
    contact_max_body_bytes: int = Field(default=10 * 1024 * 1024, ge=1, description="Maximum contact form body size")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("host", mode="after")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Ensure host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("host cannot be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Avoids re-reading the environment and `.env` file on every call.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
