"""Minimal smoke tests for the jobswitch CLI wrapper.

Run with: python -m pytest tests/test_cli.py -v
"""
from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def cli_env(tmp_path):
    env = dict(os.environ)
    env["JOBSWITCH_CONFIG_PATH"] = str(tmp_path / "config.json")
    env.pop("JOBSWITCH_CATALOG_DIR", None)
    env["PYTHONIOENCODING"] = "utf-8"
    env["PYTHONPATH"] = str(ROOT) + os.pathsep + env.get("PYTHONPATH", "")
    return env


def _run_cli(*args: str, env: dict | None = None, timeout: int = 30) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "jobswitch", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=timeout,
        cwd=str(ROOT),
        env=env,
    )


class TestCLIHelp:
    """Verify that all subcommands register and print help without errors."""

    def test_main_help(self, cli_env):
        result = _run_cli("--help", env=cli_env)
        assert result.returncode == 0
        for name in ("doctor", "catalog", "commands", "resolve", "run", "config"):
            assert name in result.stdout

    def test_resolve_help(self, cli_env):
        result = _run_cli("resolve", "--help", env=cli_env)
        assert result.returncode == 0
        assert "--phantom" in result.stdout


class TestResolve:
    def test_class_job(self, cli_env):
        result = _run_cli("resolve", "/PLD", env=cli_env)
        assert result.returncode == 0
        assert "Paladin" in result.stdout

    def test_phantom_job_json(self, cli_env):
        result = _run_cli("resolve", "--phantom", "cnr", "--json", env=cli_env)
        assert result.returncode == 0
        payload = json.loads(result.stdout)
        assert payload["name_alt"] == "Phantom Cannoneer"
        assert payload["tier"] == "subsequence"
        assert payload["score"] == 3

    def test_not_found(self, cli_env):
        result = _run_cli("resolve", "/zzz", "--json", env=cli_env)
        assert result.returncode == 1
        assert json.loads(result.stdout)["error_code"] == "NOT_FOUND"

    def test_blank_phantom_query(self, cli_env):
        result = _run_cli("resolve", "--phantom", " ", "--json", env=cli_env)
        assert result.returncode == 1
        assert json.loads(result.stdout)["error_code"] == "INVALID_QUERY"


class TestRun:
    def test_dispatches_against_example_session(self, cli_env):
        result = _run_cli("run", "/pld", "/pj knight", env=cli_env)
        assert result.returncode == 0
        assert "action: equip_loadout(0)" in result.stdout
        assert "action: select_catalog_entry(1)" in result.stdout

    def test_wrong_zone_fails(self, cli_env):
        result = _run_cli("run", "/pj knight", "--zone", "1", env=cli_env)
        assert result.returncode == 1
        assert "Occult Crescent" in result.stderr
        assert "action:" not in result.stdout


class TestConfig:
    def test_set_then_show(self, cli_env, tmp_path):
        result = _run_cli("config", "set", "prefix", "j", env=cli_env)
        assert result.returncode == 0
        data = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
        assert data["Prefix"] == "j"

        result = _run_cli("config", "show", env=cli_env)
        assert '"Prefix": "j"' in result.stdout

        result = _run_cli("commands", env=cli_env)
        assert "/jpld" in result.stdout

    def test_migrate_old_file(self, cli_env, tmp_path):
        (tmp_path / "config.json").write_text(json.dumps({"Version": 0, "Prefix": "x"}), encoding="utf-8")
        result = _run_cli("config", "migrate", env=cli_env)
        assert result.returncode == 0
        data = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
        assert data["Version"] == 2
        assert data["Prefix"] == "x"


class TestDoctorRuns:
    def test_doctor_exits_cleanly(self, cli_env):
        result = _run_cli("doctor", env=cli_env)
        assert result.returncode in (0, 1)
        assert "Fast Job Switcher Doctor" in result.stdout
