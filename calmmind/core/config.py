import os
import secrets
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()  # Load from .env file

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = ("memory", "database")


@dataclass
class Settings:
    # OpenAI
    openai_api_key: Optional[str]
    openai_chat_model: str
    openai_timeout: float

    # Storage
    storage_backend: str
    database_url: Optional[str]

    # Token & Auth
    secret_key: str
    algorithm: str
    access_token_expire_minutes: int

    cors_origins: List[str] = field(default_factory=list)
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Reads the process environment into a Settings object.

    Called once when the application is created; routes receive the result
    through `app.state.settings`.
    """
    g = os.getenv

    storage_backend = g("STORAGE_BACKEND", "memory").strip().lower()
    if storage_backend not in STORAGE_BACKENDS:
        raise RuntimeError(
            f"Unknown STORAGE_BACKEND '{storage_backend}'. Expected one of {', '.join(STORAGE_BACKENDS)}"
        )
    database_url = g("DATABASE_URL")
    if storage_backend == "database" and not database_url:
        raise RuntimeError("Missing DATABASE_URL in environment (required when STORAGE_BACKEND=database)")

    secret_key = g("SECRET_KEY")
    if not secret_key:
        logger.warning("SECRET_KEY not set; generating an ephemeral key. Issued tokens will not survive a restart.")
        secret_key = secrets.token_urlsafe(32)

    origins = g("CORS_ORIGINS", "")
    return Settings(
        openai_api_key=g("OPENAI_API_KEY") or None,
        openai_chat_model=g("OPENAI_CHAT_MODEL", "gpt-4o"),
        openai_timeout=float(g("OPENAI_TIMEOUT", "60")),
        storage_backend=storage_backend,
        database_url=database_url,
        secret_key=secret_key,
        algorithm=g("ALGORITHM", "HS256"),
        access_token_expire_minutes=int(g("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=g("LOG_LEVEL", "INFO").upper(),
    )
