"""Plugin settings: one current schema, migrations from older file versions, JSON persistence.

File versions:
    0 - IsVisible, Prefix, Suffix, RegisterLowercaseCommands, RegisterUppercaseCommands
    1 - IsVisible, RegisterClassJobs, RegisterPhantomJobs
    2 - current (union of the above)
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

CURRENT_VERSION = 2


class LegacyConfigV0(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: int = Field(default=0, alias="Version")
    is_visible: bool = Field(default=True, alias="IsVisible")
    prefix: str = Field(default="", alias="Prefix")
    suffix: str = Field(default="", alias="Suffix")
    register_lowercase: bool = Field(default=True, alias="RegisterLowercaseCommands")
    register_uppercase: bool = Field(default=True, alias="RegisterUppercaseCommands")


class LegacyConfigV1(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: int = Field(default=1, alias="Version")
    is_visible: bool = Field(default=True, alias="IsVisible")
    register_class_jobs: bool = Field(default=True, alias="RegisterClassJobs")
    register_phantom_jobs: bool = Field(default=True, alias="RegisterPhantomJobs")


class PluginConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", validate_assignment=True)

    version: int = Field(default=CURRENT_VERSION, alias="Version")
    is_visible: bool = Field(default=True, alias="IsVisible")
    register_class_jobs: bool = Field(default=True, alias="RegisterClassJobs")
    register_phantom_jobs: bool = Field(default=True, alias="RegisterPhantomJobs")
    register_uppercase: bool = Field(default=True, alias="RegisterUppercaseCommands")
    register_lowercase: bool = Field(default=True, alias="RegisterLowercaseCommands")
    prefix: str = Field(default="", alias="Prefix")
    suffix: str = Field(default="", alias="Suffix")

    def to_json(self) -> str:
        return json.dumps(self.model_dump(by_alias=True), indent=2)


def _from_v0(raw: dict[str, Any]) -> PluginConfig:
    old = LegacyConfigV0.model_validate(raw)
    return PluginConfig(
        is_visible=old.is_visible,
        register_class_jobs=old.register_lowercase or old.register_uppercase,
        register_uppercase=old.register_uppercase,
        register_lowercase=old.register_lowercase,
        prefix=old.prefix,
        suffix=old.suffix,
    )


def _from_v1(raw: dict[str, Any]) -> PluginConfig:
    old = LegacyConfigV1.model_validate(raw)
    return PluginConfig(
        is_visible=old.is_visible,
        register_class_jobs=old.register_class_jobs,
        register_phantom_jobs=old.register_phantom_jobs,
    )


def _from_current(raw: dict[str, Any]) -> PluginConfig:
    return PluginConfig.model_validate({**raw, "Version": CURRENT_VERSION})


MIGRATIONS: dict[int, Callable[[dict[str, Any]], PluginConfig]] = {
    0: _from_v0,
    1: _from_v1,
    CURRENT_VERSION: _from_current,
}


def migrate_config(raw: dict[str, Any] | None) -> PluginConfig:
    """Turn a settings document of any known version into the current schema.

    A document without ``Version`` is a version 0 file. Unknown versions fall
    back to defaults.
    """
    if not raw:
        return PluginConfig()
    try:
        version = int(raw.get("Version", 0))
    except (TypeError, ValueError):
        logger.warning("Unreadable config version %r; using defaults", raw.get("Version"))
        return PluginConfig()

    migrate = MIGRATIONS.get(version)
    if migrate is None:
        logger.warning("Unknown config version %d; using defaults", version)
        return PluginConfig()
    config = migrate(raw)
    if version != CURRENT_VERSION:
        logger.info("Migrated config from version %d to %d", version, CURRENT_VERSION)
    return config


class ConfigStore:
    """JSON settings file. ``on_save`` runs after every successful save."""

    def __init__(self, path: str | Path, on_save: Callable[[PluginConfig], None] | None = None) -> None:
        self.path = Path(path)
        self.on_save = on_save

    def load(self) -> PluginConfig:
        if not self.path.exists():
            return PluginConfig()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to read config %s: %s; using defaults", self.path, e)
            return PluginConfig()
        if not isinstance(raw, dict):
            logger.warning("Config %s is not an object; using defaults", self.path)
            return PluginConfig()
        try:
            return migrate_config(raw)
        except ValidationError as e:
            logger.warning("Invalid config %s: %s; using defaults", self.path, e)
            return PluginConfig()

    def save(self, config: PluginConfig) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(config.to_json() + "\n", encoding="utf-8")
        if self.on_save is not None:
            self.on_save(config)
