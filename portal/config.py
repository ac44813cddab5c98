# portal/config.py
"""
Portal configuration.

Values come from the environment, with a project-root .env loaded first
(python-dotenv) so local runs do not need exported variables. Anything set
in the real environment wins over .env.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]

DEFAULT_MAX_CONTENT_LENGTH = 2 * 1024 * 1024   # ~2 MB upload cap
DEFAULT_MENU_TEXT_MAX_CHARS = 200_000


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config(env_file: Path = ROOT / ".env") -> Dict[str, Any]:
    """Read portal settings into a dict suitable for app.config.update()."""
    load_dotenv(env_file, override=False)
    return {
        "SECRET_KEY": os.getenv("SECRET_KEY") or "dev-secret-change-me",
        "MAX_CONTENT_LENGTH": _int_env("MAX_CONTENT_LENGTH", DEFAULT_MAX_CONTENT_LENGTH),
        "MENU_TEXT_MAX_CHARS": _int_env("MENU_TEXT_MAX_CHARS", DEFAULT_MENU_TEXT_MAX_CHARS),
        "DEFAULT_MENU_NAME": (os.getenv("DEFAULT_MENU_NAME") or "").strip(),
        "LOG_LEVEL": (os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    }
