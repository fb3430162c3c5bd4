"""Command registry: keeps the host's command table in step with the current settings.

Commands are derived from catalog entries and added in bulk by ``register``;
``unregister`` removes exactly what this registry added. Settings changes run
``unregister`` then ``register`` so the live set never holds stale or
duplicate commands.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from switcher.catalog.types import CATEGORY_LABELS, CLASS_JOB, PHANTOM_JOB, Catalog, CatalogEntry
from switcher.config import PluginConfig
from switcher.services import CommandHandler, CommandSink

logger = logging.getLogger(__name__)

PHANTOM_JOB_COMMAND = "pj"
PHANTOM_JOB_HELP_NAME = "Phantom Job (fuzzy search)"


@dataclass(frozen=True)
class CommandRegistration:
    command: str
    category: str
    help_message: str
    entry: CatalogEntry | None = None


def class_job_commands(entry: CatalogEntry, config: PluginConfig) -> list[str]:
    """Command strings for one class/job entry under ``config`` (upper first, deduped)."""
    base = "/" + config.prefix + entry.acronym.strip() + config.suffix
    out: list[str] = []
    if config.register_uppercase:
        out.append(base.upper())
    if config.register_lowercase and base.lower() not in out:
        out.append(base.lower())
    return out


def phantom_job_commands() -> list[str]:
    base = "/" + PHANTOM_JOB_COMMAND
    return [base.lower(), base.upper()]


class CommandRegistry:
    def __init__(self, sink: CommandSink, handler: CommandHandler, logger_: logging.Logger | None = None) -> None:
        self.sink = sink
        self.handler = handler
        self.log = logger_ or logger
        self._registrations: dict[str, CommandRegistration] = {}

    @property
    def registered_commands(self) -> frozenset[str]:
        return frozenset(self._registrations)

    def registration_for(self, command: str) -> CommandRegistration | None:
        return self._registrations.get(command)

    def register(self, config: PluginConfig, catalogs: dict[str, Catalog | None]) -> list[CommandRegistration]:
        """Add every command the settings enable. Returns the registrations added by this call."""
        added: list[CommandRegistration] = []

        if config.register_class_jobs:
            catalog = catalogs.get(CLASS_JOB)
            if catalog is None:
                self.log.warning("Class/Job catalog unavailable; no class/job commands registered")
            else:
                for entry in catalog.entries:
                    if not entry.is_registrable():
                        continue
                    for command in class_job_commands(entry, config):
                        reg = self._add(command, CLASS_JOB, entry.name, entry)
                        if reg is not None:
                            added.append(reg)

        if config.register_phantom_jobs:
            if catalogs.get(PHANTOM_JOB) is None:
                self.log.warning("Phantom Job catalog unavailable; no phantom job commands registered")
            else:
                for command in phantom_job_commands():
                    reg = self._add(command, PHANTOM_JOB, PHANTOM_JOB_HELP_NAME, None)
                    if reg is not None:
                        added.append(reg)

        return added

    def unregister(self) -> None:
        """Remove every command this registry added. Safe to call repeatedly."""
        for command in list(self._registrations):
            if self.sink.contains(command):
                self.sink.remove_handler(command)
        self._registrations.clear()

    def reregister(self, config: PluginConfig, catalogs: dict[str, Catalog | None]) -> list[CommandRegistration]:
        self.unregister()
        return self.register(config, catalogs)

    def _add(self, command: str, category: str, name: str, entry: CatalogEntry | None) -> CommandRegistration | None:
        if command in self._registrations or self.sink.contains(command):
            self.log.warning("Command already exists: %s", command)
            return None
        label = CATEGORY_LABELS.get(category, category)
        reg = CommandRegistration(
            command=command,
            category=category,
            help_message=f"Switches to {name} {label}",
            entry=entry,
        )
        self.sink.add_handler(command, self.handler, help_message=reg.help_message, show_in_help=False)
        self._registrations[command] = reg
        self.log.info("Registered command: %s for %s %s", command, name, label)
        return reg
