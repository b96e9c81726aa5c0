# Role: Central configuration module. Loads .env into environment variables, computes runtime flags (DEBUG),
# and builds the immutable Settings object handed to the Dialogflow client and the server.
# Importers read intentbridge.config.DEBUG to control debug traces without threading flags through every call.

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

DEBUG: bool = False

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7000


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG.
    This makes DEBUG correct even if load_env() is called after import.
    """
    global DEBUG
    load_dotenv()
    DEBUG = _truthy(os.getenv("DEBUG", "0"))


def _truthy(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    project_id: Optional[str] = None
    credentials_path: Optional[str] = None
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        # Key line: empty strings count as "not set" so a blank .env entry does not reach the client.
        return cls(
            host=os.getenv("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST,
            port=int(os.getenv("PORT", "").strip() or DEFAULT_PORT),
            project_id=os.getenv("PROJECT_ID", "").strip() or None,
            credentials_path=os.getenv("CREDENTIALS_PATH", "").strip() or None,
            debug=_truthy(os.getenv("DEBUG", "0")),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
