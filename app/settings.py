# app/settings.py
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.errors import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Fixed upload constraints
MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10 MiB
ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/png", "image/jpg")


class Settings(BaseSettings):
    """Service settings; each field reads the env var of the same name, upper-cased."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: str = Field(min_length=1)
    openai_api_key: str = Field(min_length=1)
    port: int = Field(default=5000, ge=1, le=65535)
    openai_model: str = "gpt-4o"
    openai_max_tokens: int = Field(default=2000, ge=1)
    openai_timeout_seconds: float = Field(default=60.0, gt=0)  # bounded wait on the vision call
    upload_dir: Path = PROJECT_ROOT / "uploads"
    keep_uploads: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[str] = ".env") -> "Settings":
        """
        Build settings from the environment and `env_file`.
        Raises ConfigError naming every missing required variable.
        """
        try:
            return cls(_env_file=env_file)
        except PydanticValidationError as e:
            missing = sorted({
                str(err["loc"][0]).upper()
                for err in e.errors()
                if err["type"] in ("missing", "string_too_short")
            })
            if missing:
                raise ConfigError(
                    "Missing required environment variables: " + ", ".join(missing)
                ) from e
            raise ConfigError(f"Invalid configuration: {e}") from e
