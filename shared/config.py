"""Shared configuration constants used by the switcher core and the CLI."""
from __future__ import annotations

import os
from pathlib import Path

# Project root: resolve relative to this file's location
_PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Bundled catalog data (class_jobs.yaml, phantom_jobs.yaml)
DEFAULT_CATALOG_DIR = os.environ.get("JOBSWITCH_CATALOG_DIR", str(_PROJECT_ROOT / "data" / "catalogs"))

# Plugin settings file (JSON, versioned)
DEFAULT_CONFIG_PATH = os.environ.get("JOBSWITCH_CONFIG_PATH", str(_PROJECT_ROOT / "data" / "config.json"))

# Example host session (loadout slots + current zone) used by `jobswitch run`
DEFAULT_SESSION_PATH = str(_PROJECT_ROOT / "data" / "sessions" / "example.yaml")

CATALOG_FILES: dict[str, str] = {
    "class_job": "class_jobs.yaml",
    "phantom_job": "phantom_jobs.yaml",
}
