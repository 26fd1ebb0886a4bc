"""Environment-driven settings and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from molbalance.structures.pubchem import DEFAULT_BASE_URL

ENV_PREFIX = "MOLBALANCE_"
DEFAULT_DB_PATH = Path.home() / ".molbalance" / "history.sqlite"


def _env(key: str, default: str = "") -> str:
    v = os.getenv(ENV_PREFIX + key)
    return default if v is None else str(v).strip()


def _env_bool(key: str, default: bool = False) -> bool:
    v = _env(key)
    if v == "":
        return default
    return v.lower() in {"1", "true", "yes", "y", "on"}


def _env_float(key: str, default: float) -> float:
    v = _env(key)
    if v == "":
        return default
    try:
        return float(v)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    pubchem_url: str = DEFAULT_BASE_URL
    pubchem_timeout: float = 5.0
    online: bool = False
    db_path: Path = DEFAULT_DB_PATH


def load_settings() -> Settings:
    return Settings(
        log_level=_env("LOG_LEVEL", "WARNING").upper(),
        pubchem_url=_env("PUBCHEM_URL", DEFAULT_BASE_URL),
        pubchem_timeout=_env_float("PUBCHEM_TIMEOUT", 5.0),
        online=_env_bool("ONLINE", False),
        db_path=Path(_env("DB", str(DEFAULT_DB_PATH))).expanduser(),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
