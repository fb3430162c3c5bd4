"""``jobswitch doctor`` — environment health check.

Checks: Python version, deps installed, catalog files load, settings file
readable.
"""
from __future__ import annotations

import importlib.util
import sys

from shared.config import CATALOG_FILES
from shared.runtime_settings import load_runtime_settings

# ANSI helpers (no-op on dumb terminals)
_COLOR = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _ok(msg: str) -> str:
    return f"  [OK]   {msg}" if not _COLOR else f"  \033[32m[OK]\033[0m   {msg}"


def _warn(msg: str) -> str:
    return f"  [WARN] {msg}" if not _COLOR else f"  \033[33m[WARN]\033[0m {msg}"


def _fail(msg: str) -> str:
    return f"  [FAIL] {msg}" if not _COLOR else f"  \033[31m[FAIL]\033[0m {msg}"


def _section(title: str) -> str:
    return f"\n{'=' * 60}\n  {title}\n{'=' * 60}"


def register(subparsers) -> None:
    p = subparsers.add_parser("doctor", help="Check environment health")
    p.set_defaults(func=run)


def _check_python() -> bool:
    v = sys.version_info
    ok = v >= (3, 10)
    line = f"Python {v.major}.{v.minor}.{v.micro}"
    print(_ok(line) if ok else _fail(f"{line} — need 3.10+"))
    return ok


def _check_deps() -> list[str]:
    required = ["pydantic", "yaml"]
    missing = []
    for mod in required:
        try:
            if importlib.util.find_spec(mod) is None:
                missing.append(mod)
        except (ImportError, ValueError):
            missing.append(mod)
    if missing:
        print(_fail(f"Missing packages: {', '.join(missing)}"))
        print(f"         Run: pip install -e .")
    else:
        print(_ok(f"All {len(required)} required packages installed"))
    return missing


def _check_catalogs(settings) -> bool:
    from switcher.catalog.loader import load_catalog

    all_ok = True
    for category, filename in CATALOG_FILES.items():
        path = settings.catalog_dir / filename
        catalog = load_catalog(category, path)
        if catalog is None:
            print(_warn(f"Catalog {category}: unavailable at {path} — its commands will not register"))
            all_ok = False
            continue
        registrable = sum(1 for e in catalog.entries if e.is_registrable())
        print(_ok(f"Catalog {category}: {len(catalog)} entries ({registrable} with acronyms)"))
    return all_ok


def _check_config(settings) -> bool:
    from switcher.config import ConfigStore

    path = settings.config_path
    if not path.exists():
        print(_warn(f"No settings file at {path} — defaults apply"))
        return True
    config = ConfigStore(path).load()
    print(_ok(f"Settings: {path} (version {config.version})"))
    return True


def run(args) -> int:
    settings = load_runtime_settings()
    print("Fast Job Switcher Doctor")
    print(_section("Environment"))
    issues = 0
    if not _check_python():
        issues += 1
    if _check_deps():
        # Nothing below can run without the deps
        return 1

    print(_section("Data"))
    if not _check_catalogs(settings):
        issues += 1
    _check_config(settings)

    print()
    if issues:
        print(f"  {issues} issue(s) found.")
        return 1
    print("  All checks passed.")
    return 0
