from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # view-partials/

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default so the app starts from a bare checkout; override
    through environment variables or the .env file.

    Uses Pydantic v2 API:
    - model_config with SettingsConfigDict
    - @field_validator decorator
    """

    # API server settings
    api_host: str = Field(min_length=1, default="127.0.0.1", description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")
    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for the rotating JSON log")
    render_log_level: str | None = Field(default=None, description="Level for per-render partial logs")

    # Template settings
    templates_dir: Path = Field(default=BASE_DIR / "templates", description="Root directory for templates")
    template_extension: str = Field(default=".html", description="Suffix appended to resolved template paths")
    default_controller_path: str = Field(
        min_length=1,
        default="application",
        description="Directory used for partial names without a '/'",
    )
    autoescape: bool = Field(default=True, description="Enable Jinja2 autoescaping")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("log_level", "render_log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Normalise log levels and reject unknown names."""
        if v is None:
            return v
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("template_extension", mode="after")
    @classmethod
    def validate_template_extension(cls, v: str) -> str:
        """Ensure the extension is empty or starts with a dot."""
        v = v.strip()
        if v and not v.startswith("."):
            v = f".{v}"
        return v

    @field_validator("default_controller_path", mode="after")
    @classmethod
    def validate_default_controller_path(cls, v: str) -> str:
        """Strip surrounding slashes so lookup keys never contain '//'."""
        v = v.strip().strip("/")
        if not v:
            raise ValueError("default_controller_path must not be empty")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request. Use this with FastAPI's Depends() for
    dependency injection.

    Returns:
        Cached Settings instance

    Example:
        @app.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"host": settings.api_host}
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
