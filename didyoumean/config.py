# DidYouMean - Configuration
# ==========================
"""Environment-driven settings."""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    DB_PATH: str = ":memory:"
    TABLE: str = "records"
    READ_ONLY: bool = False
    SCAN_LIMIT: Optional[int] = None  # cap on the fallback full-table scan
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            DB_PATH=os.getenv("DIDYOUMEAN_DB_PATH", ":memory:"),
            TABLE=os.getenv("DIDYOUMEAN_TABLE", "records"),
            READ_ONLY=_env_bool("DIDYOUMEAN_READ_ONLY"),
            SCAN_LIMIT=_env_optional_int("DIDYOUMEAN_SCAN_LIMIT"),
            LOG_LEVEL=os.getenv("DIDYOUMEAN_LOG_LEVEL", "INFO").upper(),
        )


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Read settings from the environment, loading a .env file first if present.

    Variables already set in the environment win over the .env file.
    """
    env_path = Path(env_file) if env_file else Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    return Settings.from_env()


def configure_logging(settings: Optional[Settings] = None) -> int:
    """
    Set up root logging at ``settings.LOG_LEVEL``.

    Settings are read from the environment when not given. Unknown level
    names fall back to INFO.

    Returns:
        The numeric level applied
    """
    if settings is None:
        settings = Settings.from_env()
    level = getattr(logging, settings.LOG_LEVEL.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
