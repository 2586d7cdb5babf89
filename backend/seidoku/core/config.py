from __future__ import annotations

from dataclasses import dataclass
import os


DEFAULT_CORS_ORIGINS = ("http://127.0.0.1:5173", "http://localhost:5173")
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com"


@dataclass(frozen=True)
class Settings:
    environment: str
    app_name: str
    host: str
    port: int
    gemini_api_key: str | None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_base_url: str = DEFAULT_GEMINI_BASE_URL
    gemini_timeout_seconds: float | None = None
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    translation_enabled: bool = True

    @property
    def gemini_configured(self) -> bool:
        return bool(self.gemini_api_key and self.gemini_api_key.strip())


def _env_flag(name: str, default: str = "1") -> bool:
    return os.getenv(name, default).lower() not in {"0", "false", "no"}


def load_settings() -> Settings:
    raw_cors_origins = os.getenv("SEIDOKU_CORS_ORIGINS", "")
    parsed_cors_origins = tuple(
        origin.strip()
        for origin in raw_cors_origins.split(",")
        if origin.strip()
    )
    raw_timeout = os.getenv("SEIDOKU_GEMINI_TIMEOUT_SECONDS", "").strip()
    return Settings(
        environment=os.getenv("SEIDOKU_ENV", "development"),
        app_name=os.getenv("SEIDOKU_APP_NAME", "seidoku-backend"),
        host=os.getenv("SEIDOKU_HOST", "127.0.0.1"),
        port=int(os.getenv("SEIDOKU_PORT", "8000")),
        gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip() or None,
        gemini_model=os.getenv("SEIDOKU_GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        gemini_base_url=os.getenv("SEIDOKU_GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL),
        gemini_timeout_seconds=float(raw_timeout) if raw_timeout else None,
        cors_origins=parsed_cors_origins or DEFAULT_CORS_ORIGINS,
        translation_enabled=_env_flag("SEIDOKU_TRANSLATION_ENABLED"),
    )
