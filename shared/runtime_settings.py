"""Runtime env parsing helpers used by the CLI and host wiring."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from shared.config import DEFAULT_CATALOG_DIR, DEFAULT_CONFIG_PATH

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RuntimeSettings:
    """Paths and switches read from the environment."""

    catalog_dir: Path
    config_path: Path
    log_level: str
    strict_catalogs: bool


def env_flag(name: str, default: bool = False, environ: Mapping[str, str] | None = None) -> bool:
    """Read boolean env values from common truthy/falsey forms."""
    env = os.environ if environ is None else environ
    val = env.get(name, "").strip().lower()
    if not val:
        return default
    return val in ("1", "true", "yes", "on")


def parse_log_level(raw: str, fallback: str = "WARNING") -> str:
    level = (raw or "").strip().upper()
    if level in LOG_LEVELS:
        return level
    return fallback


def load_runtime_settings(environ: Mapping[str, str] | None = None) -> RuntimeSettings:
    env = os.environ if environ is None else environ
    catalog_dir = env.get("JOBSWITCH_CATALOG_DIR", "").strip()
    config_path = env.get("JOBSWITCH_CONFIG_PATH", "").strip()
    return RuntimeSettings(
        catalog_dir=Path(catalog_dir) if catalog_dir else Path(DEFAULT_CATALOG_DIR),
        config_path=Path(config_path) if config_path else Path(DEFAULT_CONFIG_PATH),
        log_level=parse_log_level(env.get("JOBSWITCH_LOG_LEVEL", "")),
        strict_catalogs=env_flag("JOBSWITCH_STRICT_CATALOGS", default=False, environ=env),
    )
