import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///data/jobs.db"


def load_env() -> None:
    """Load .env from the working directory if present."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


def database_url() -> str:
    return os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO")


def log_dir() -> Optional[Path]:
    """Directory for log files, or None when file logging is off."""
    value = os.getenv("LOG_DIR")
    return Path(value) if value else None
