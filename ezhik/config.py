"""Application configuration using pydantic-settings."""

import json
from ast import literal_eval
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Ezhik Email Builder"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # API
    api_prefix: str = "/api"
    cors_origins: Annotated[list[str], NoDecode] = ["*"]

    # Groq chat completions
    groq_api_key: str | None = None
    groq_base_url: str = "https://api.groq.com/openai/v1"
    groq_model: str = "llama-3.3-70b-versatile"
    groq_timeout_seconds: float = 60.0

    # Uploaded images
    storage_dir: Path = Path("./storage")
    upload_max_bytes: int = 10_000_000

    # yt-dlp
    ytdlp_binary: str = "yt-dlp"
    ytdlp_tmp_dir: Path = Path("/tmp/ezhik-yt")
    ytdlp_timeout_seconds: float = 600.0
    ytdlp_cleanup_delay_seconds: float = 5.0

    # Static frontend
    frontend_dir: Path = Path("./frontend")

    @property
    def groq_enabled(self) -> bool:
        """Whether a Groq API key is configured."""
        return bool(self.groq_api_key)

    @field_validator("api_prefix", mode="before")
    @classmethod
    def _normalize_api_prefix(cls, value: object) -> object:
        """Normalize the prefix to `/segment` form, or empty for root."""
        if not isinstance(value, str):
            return value
        normalized = value.strip().strip("/")
        return f"/{normalized}" if normalized else ""

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value: object) -> object:
        """Accept JSON list/string or comma-separated values for CORS_ORIGINS."""
        def normalize(origin: object) -> str:
            return str(origin).strip().strip("'\"")

        if isinstance(value, list):
            return [normalize(origin) for origin in value if normalize(origin)]
        if not isinstance(value, str):
            return value

        raw = value.strip()
        if not raw:
            return []

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            try:
                parsed = literal_eval(raw)
            except (ValueError, SyntaxError):
                return [origin for origin in (normalize(o) for o in raw.split(",")) if origin]

        if isinstance(parsed, str):
            parsed = [parsed]
        if isinstance(parsed, tuple | set):
            parsed = list(parsed)
        if not isinstance(parsed, list):
            raise ValueError(
                "CORS_ORIGINS must be a JSON array, JSON string, or comma-separated string.",
            )
        return [normalize(origin) for origin in parsed if normalize(origin)]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
