"""``jobswitch config`` — show, change or migrate the settings file.

Saving goes through the host so the command set is rebuilt to match, the way
the in-game settings panel does it.
"""
from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from pydantic import ValidationError

from shared.runtime_settings import load_runtime_settings
from switcher.config import ConfigStore, PluginConfig
from jobswitch.runtime.host import HostError, build_host

SETTABLE_KEYS: tuple[str, ...] = (
    "is_visible",
    "register_class_jobs",
    "register_phantom_jobs",
    "register_uppercase",
    "register_lowercase",
    "prefix",
    "suffix",
)


def register(subparsers) -> None:
    p = subparsers.add_parser("config", help="Show, change or migrate settings")
    p.add_argument("--path", type=str, help="Settings file (default: JOBSWITCH_CONFIG_PATH)")
    actions = p.add_subparsers(dest="config_action")

    actions.add_parser("show", help="Print the effective settings")

    s = actions.add_parser("set", help="Change one setting and re-register commands")
    s.add_argument("key", choices=SETTABLE_KEYS)
    s.add_argument("value")

    actions.add_parser("migrate", help="Rewrite the settings file in the current format")
    p.set_defaults(func=run)


def _store_path(args) -> Path:
    return Path(args.path) if args.path else load_runtime_settings().config_path


def _show(config: PluginConfig) -> None:
    print(config.to_json())


def _set(args, path: Path) -> int:
    settings = replace(load_runtime_settings(), config_path=path)
    try:
        host = build_host(settings)
    except HostError as e:
        print(f"  ERROR: {e}")
        return 1

    try:
        before = host.switcher.registry.registered_commands
        try:
            updated = host.switcher.config.model_copy()
            setattr(updated, args.key, args.value)
        except ValidationError as e:
            print(f"  ERROR: invalid value for {args.key}: {e.errors()[0].get('msg')}")
            return 1
        host.save_config(updated)
        after = host.switcher.registry.registered_commands
        print(f"  [OK] {args.key} = {getattr(updated, args.key)!r} saved to {path}")
        print(f"       commands: {len(before)} -> {len(after)}")
        return 0
    finally:
        host.close()


def run(args) -> int:
    path = _store_path(args)
    action = args.config_action or "show"
    store = ConfigStore(path)

    if action == "show":
        _show(store.load())
        return 0
    if action == "set":
        return _set(args, path)
    if action == "migrate":
        config = store.load()
        store.save(config)
        print(f"  [OK] {path} written as version {config.version}")
        return 0
    return 1
