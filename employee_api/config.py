"""
Runtime configuration for the Employee API.

Values are read once from the environment. A `.env` file at the repository
root is loaded first if present; variables already set in the environment
take precedence over it.
"""
import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parent.parent / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE, override=False)


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


APP_TITLE = "Employee API"
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")

# API Gateway stage prefix, e.g. "/prod". Routes stay unprefixed.
ROOT_PATH = os.getenv("ROOT_PATH", "")

LOG_LEVEL: int = _int("LOG_LEVEL", 1)  # 0 = silent, 1 = info, 2 = debug

CORS_ORIGINS: List[str] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

CLOUDWATCH_METRICS = _flag("CLOUDWATCH_METRICS")
CLOUDWATCH_NAMESPACE = os.getenv("CLOUDWATCH_NAMESPACE", "EmployeeAPI/API")

DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL") or None
