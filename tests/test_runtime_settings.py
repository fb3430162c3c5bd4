from pathlib import Path

from shared.config import DEFAULT_CATALOG_DIR
from shared.runtime_settings import env_flag, load_runtime_settings, parse_log_level


def test_env_flag_truthy_and_falsey() -> None:
    assert env_flag("X", default=False, environ={"X": "true"}) is True
    assert env_flag("X", default=True, environ={"X": "0"}) is False
    assert env_flag("X", default=True, environ={}) is True


def test_parse_log_level_falls_back_on_garbage() -> None:
    assert parse_log_level("debug") == "DEBUG"
    assert parse_log_level("loud") == "WARNING"
    assert parse_log_level("") == "WARNING"


def test_load_runtime_settings_reads_expected_keys() -> None:
    settings = load_runtime_settings(
        {
            "JOBSWITCH_CATALOG_DIR": "/tmp/catalogs",
            "JOBSWITCH_CONFIG_PATH": "/tmp/fjs.json",
            "JOBSWITCH_LOG_LEVEL": "info",
            "JOBSWITCH_STRICT_CATALOGS": "yes",
        }
    )
    assert settings.catalog_dir == Path("/tmp/catalogs")
    assert settings.config_path == Path("/tmp/fjs.json")
    assert settings.log_level == "INFO"
    assert settings.strict_catalogs is True


def test_load_runtime_settings_defaults() -> None:
    settings = load_runtime_settings({})
    assert settings.catalog_dir == Path(DEFAULT_CATALOG_DIR)
    assert settings.strict_catalogs is False
