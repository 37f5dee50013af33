"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

# Load .env from project root if present
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


def _int(key: str, default: int) -> int:
    raw = _str(key)
    return int(raw) if raw else default


def _bool(key: str) -> bool:
    return _str(key).lower() in ("1", "true", "yes", "on")


# Server
HOST = _str("MD_TO_NOTION_HOST", "0.0.0.0")
PORT = _int("MD_TO_NOTION_PORT", 8000)

# Conversion
DEFAULT_CODE_LANGUAGE = _str("MD_TO_NOTION_CODE_LANGUAGE", "javascript")

# Logging
LOG_LEVEL = _str("LOG_LEVEL", "INFO").upper()
LOG_JSON = _bool("LOG_JSON")
