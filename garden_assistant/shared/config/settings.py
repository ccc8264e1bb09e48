# 📄 File: garden_assistant/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# One place that reads the assistant's settings (which AI model, where reminders are
# saved, how chatty the logs are) from the environment or a .env file.
#
# 🧪 Purpose (Technical Summary):
# pydantic-settings model for every runtime knob, normalized by field validators,
# plus small derived views (CORS origin list, storage path, model client config).
#
# 🔗 Dependencies:
# - pydantic-settings (python-dotenv backs the .env loading)
#
# 🔄 Connected Modules / Calls From:
# - garden_assistant.main (app factory, lifespan, uvicorn entry point)
# - Logging setup, service wiring, health checks

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "staging", "production", "test")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


def _one_of(value: str, allowed: Sequence[str], label: str) -> str:
    if value not in allowed:
        raise ValueError(f"{label} must be one of {list(allowed)}, got {value!r}")
    return value


class Settings(BaseSettings):
    """Runtime configuration, read from the environment with `.env` as fallback."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION & LOGGING
    # =========================================================================

    APP_NAME: str = "Garden Assistant API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Plant identification, care chat and watering reminders"
    ENVIRONMENT: str = Field(default="development", description="development, staging, production or test")
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(default="json", description="json or text")
    LOG_FILE: Optional[str] = Field(None, description="Also write logs to this file")

    # =========================================================================
    # SERVER
    # =========================================================================

    HOST: str = "127.0.0.1"
    PORT: int = 8000
    RELOAD: bool = True
    WORKERS: int = 1
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = True

    # =========================================================================
    # GENERATIVE MODEL (GOOGLE GEMINI)
    # =========================================================================

    GOOGLE_GEMINI_API_KEY: Optional[str] = None
    GOOGLE_GEMINI_MODEL: str = "gemini-2.5-flash"
    GOOGLE_GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    MODEL_REQUEST_TIMEOUT: Optional[int] = Field(
        None,
        description="Total timeout in seconds for model calls (unset means no timeout)"
    )

    # =========================================================================
    # LOCAL STORAGE & UPLOADS
    # =========================================================================

    STORAGE_DIR: str = Field(default=".garden_assistant", description="Directory for key-value files")
    REMINDER_STORAGE_KEY: str = "wateringReminders"
    MAX_IMAGE_SIZE: int = Field(default=10 * 1024 * 1024, description="Max image upload size in bytes")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        return _one_of(v.lower(), ENVIRONMENTS, "ENVIRONMENT")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return _one_of(v.upper(), LOG_LEVELS, "LOG_LEVEL")

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        return _one_of(v.lower(), LOG_FORMATS, "LOG_FORMAT")

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        bad = [o for o in _split_origins(v) if not o.startswith(("http://", "https://", "*"))]
        if bad:
            raise ValueError(f"Invalid CORS origin(s): {bad}")
        return v

    @field_validator("MODEL_REQUEST_TIMEOUT", "MAX_IMAGE_SIZE")
    @classmethod
    def validate_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("must be a positive number")
        return v

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def cors_origins_list(self) -> List[str]:
        return _split_origins(self.CORS_ORIGINS)

    @property
    def storage_path(self) -> Path:
        return Path(self.STORAGE_DIR).expanduser()

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"

    @property
    def model_configured(self) -> bool:
        return bool(self.GOOGLE_GEMINI_API_KEY)

    def get_model_api_config(self) -> dict:
        """Keyword config for create_gemini_client."""
        return {
            "api_key": self.GOOGLE_GEMINI_API_KEY,
            "api_url": self.GOOGLE_GEMINI_API_URL,
            "model": self.GOOGLE_GEMINI_MODEL,
            "timeout": self.MODEL_REQUEST_TIMEOUT,
        }


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings, loaded once."""
    return Settings()
