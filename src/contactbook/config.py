"""Settings from the environment (and a .env file) plus logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/contactbook/config.py go up to repo root.
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """
    default_region: ISO 3166 region used to read numbers written without a
    leading + (e.g. "US"); None means such numbers are compared as text.
    """

    default_region: str | None = None
    log_level: int = logging.INFO


def load_env_file() -> Path | None:
    """Load .env from repo root or current dir. Returns the file used, if any."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def load_settings() -> Settings:
    load_env_file()
    region = os.environ.get("CONTACTBOOK_DEFAULT_REGION", "").strip().upper()
    level_name = os.environ.get("CONTACTBOOK_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown CONTACTBOOK_LOG_LEVEL: {level_name!r}")
    return Settings(default_region=region or None, log_level=level)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)
