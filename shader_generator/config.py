"""Configuration for the shader generator server."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

load_dotenv()

# Groq completion API
GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
GROQ_MODEL = "llama-3.3-70b-versatile"
TEMPERATURE = 0.7
REQUEST_TIMEOUT_SECONDS = 30.0

# Browser frontends allowed to call the API
DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:3001",
    "https://twotabshadergeneratorcalc.netlify.app",
)

# Server
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4000
DEFAULT_LOG_LEVEL = "info"

# uvicorn level names; "trace" has no stdlib counterpart and maps to DEBUG
LOG_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


class Settings(BaseModel):
    """Process-wide settings, read once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    groq_api_key: str = ""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    allowed_origins: tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @property
    def python_log_level(self) -> int:
        return LOG_LEVELS[self.log_level]


def _parse_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_ALLOWED_ORIGINS
    origins = tuple(o.strip().rstrip("/") for o in raw.split(",") if o.strip())
    return origins or DEFAULT_ALLOWED_ORIGINS


def load_settings() -> Settings:
    """Build settings from the environment.

    A missing GROQ_API_KEY is not an error here; it surfaces per request.
    """
    return Settings(
        groq_api_key=os.getenv("GROQ_API_KEY", ""),
        host=os.getenv("HOST", DEFAULT_HOST),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        allowed_origins=_parse_origins(os.getenv("ALLOWED_ORIGINS")),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).lower(),
    )
