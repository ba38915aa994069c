from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../virtualvault
load_dotenv(dotenv_path=ROOT_DIR / ".env")

DEFAULT_API_URL = "http://localhost:8000"


def _get_env(*keys, default=None):
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_float(*keys, default=None):
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return float(v)


@dataclass(frozen=True)
class ClientSettings:
    api_url: str
    storage_path: str | None
    timeout: float | None


def load_settings():
    """Читает настройки клиента из окружения (и .env рядом с manage.py)."""
    return ClientSettings(
        api_url=(_get_env("SHOP_API_URL", default=DEFAULT_API_URL) or DEFAULT_API_URL).rstrip("/"),
        storage_path=_get_env("SHOP_STORAGE_PATH"),
        timeout=_get_float("SHOP_API_TIMEOUT"),
    )
