"""Settings read from the environment (with defaults good enough to run locally)."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Project root, like: BASE_DIR / '.env'
BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = BASE_DIR / ".env"

DEFAULT_DATABASE_URL = "sqlite:///./courtside.db"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    db_echo: bool = False
    log_level: str = "INFO"
    seed: Optional[int] = None


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@lru_cache
def get_settings() -> Settings:
    """
    Read once per process. Call get_settings.cache_clear() after changing the environment (tests).

    Variables already set in the environment win over the ones in the .env file.
    """
    load_dotenv(ENV_FILE)
    seed = os.environ.get("ROTATION_SEED")
    return Settings(
        database_url=os.environ.get("ROTATION_DATABASE_URL", DEFAULT_DATABASE_URL),
        db_echo=_env_flag("ROTATION_DB_ECHO"),
        log_level=os.environ.get("ROTATION_LOG_LEVEL", "INFO").upper(),
        seed=int(seed) if seed else None,
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
