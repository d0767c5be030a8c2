"""Environment configuration for the store layer and logging."""

from __future__ import annotations

import os
from pathlib import Path

STORE_BACKENDS = ("json", "sql")


def data_dir() -> Path:
    return Path(os.getenv("CATALOG_DATA_DIR", "data"))


def store_backend_name() -> str:
    name = os.getenv("CATALOG_STORE_BACKEND", "json").strip().lower()

    if name not in STORE_BACKENDS:
        raise RuntimeError(
            f"CATALOG_STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, got '{name}'"
        )

    return name


def log_level() -> str:
    return os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL must be set when CATALOG_STORE_BACKEND=sql")

    return url
