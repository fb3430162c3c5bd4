"""Tests for the CLI host wiring: services bundle, session files and settings saves."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from shared.config import DEFAULT_CATALOG_DIR, DEFAULT_SESSION_PATH
from shared.runtime_settings import RuntimeSettings
from jobswitch.runtime.host import HostError, build_host, load_gateway
from switcher.config import PluginConfig


class _Notifier:
    def __init__(self) -> None:
        self.messages: list[str] = []
        self.errors: list[str] = []

    def print(self, message: str) -> None:
        self.messages.append(message)

    def print_error(self, message: str) -> None:
        self.errors.append(message)


def _settings(tmp_path: Path, *, catalog_dir: Path | None = None, strict: bool = False) -> RuntimeSettings:
    return RuntimeSettings(
        catalog_dir=catalog_dir or Path(DEFAULT_CATALOG_DIR),
        config_path=tmp_path / "config.json",
        log_level="WARNING",
        strict_catalogs=strict,
    )


def test_example_session_switches(tmp_path):
    host = build_host(_settings(tmp_path), session_path=DEFAULT_SESSION_PATH, notifier=_Notifier())
    try:
        outcome = host.dispatch("/pld")
        assert outcome.ok
        assert outcome.loadout.name == "PLD savage"

        outcome = host.dispatch("/pj cannon")
        assert outcome.ok
        assert outcome.entry.name_alt == "Phantom Cannoneer"
        assert host.gateway.actions == [("equip_loadout", 0), ("select_catalog_entry", 9)]
    finally:
        host.close()


def test_unknown_command_raises(tmp_path):
    host = build_host(_settings(tmp_path), notifier=_Notifier())
    try:
        with pytest.raises(HostError, match="Unknown command"):
            host.dispatch("/nothing")
    finally:
        host.close()


def test_save_config_reregisters(tmp_path):
    host = build_host(_settings(tmp_path), notifier=_Notifier())
    try:
        assert "/pld" in host.sink.commands
        host.save_config(PluginConfig(register_class_jobs=False))
        assert set(host.sink.commands) == {"/pj", "/PJ", "/fjs"}
        data = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
        assert data["RegisterClassJobs"] is False
    finally:
        host.close()
    assert host.sink.commands == {}


def test_loads_saved_config(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"Version": 1, "RegisterPhantomJobs": False}), encoding="utf-8")
    host = build_host(_settings(tmp_path), notifier=_Notifier())
    try:
        assert "/pj" not in host.sink.commands
        assert "/whm" in host.sink.commands
    finally:
        host.close()


def test_strict_mode_requires_catalogs(tmp_path):
    with pytest.raises(HostError, match="Catalogs unavailable"):
        build_host(_settings(tmp_path, catalog_dir=tmp_path / "empty", strict=True), notifier=_Notifier())


def test_lenient_mode_runs_without_catalogs(tmp_path):
    host = build_host(_settings(tmp_path, catalog_dir=tmp_path / "empty"), notifier=_Notifier())
    try:
        assert set(host.sink.commands) == {"/fjs"}
    finally:
        host.close()


def test_missing_session_file(tmp_path):
    with pytest.raises(HostError, match="Session file not found"):
        load_gateway(tmp_path / "missing.yaml")


def test_settings_command_toggles_visibility(tmp_path):
    notifier = _Notifier()
    host = build_host(_settings(tmp_path), notifier=notifier)
    try:
        outcome = host.dispatch("/fjs")
        assert outcome.ok
        assert host.switcher.config.is_visible is False
        data = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
        assert data["IsVisible"] is False
        assert notifier.messages == ["JobSwitch: Settings window hidden"]

        host.dispatch("/fjs")
        assert host.switcher.config.is_visible is True
        assert "/pld" in host.sink.commands
    finally:
        host.close()
    assert host.sink.commands == {}
