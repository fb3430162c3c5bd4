"""Command handler: resolves typed commands to catalog entries and performs the switch."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from switcher.catalog.types import CLASS_JOB, PHANTOM_JOB, Catalog, CatalogEntry
from switcher.command_registry import PHANTOM_JOB_COMMAND, CommandRegistry
from switcher.config import PluginConfig
from switcher.core.error_handling import (
    ActionFailedError,
    CatalogUnavailableError,
    EntryNotFoundError,
    InvalidQueryError,
    PreconditionFailedError,
    SwitchError,
    log_error_with_context,
)
from switcher.gateway import PHANTOM_JOB_ZONE
from switcher.loadouts import LoadoutSlot, equip_best_loadout
from switcher.resolvers import fuzzy_search, normalize_command, resolve_exact
from switcher.services import Services

MESSAGE_PREFIX = "JobSwitch: "


@dataclass(frozen=True)
class SwitchOutcome:
    status: Literal["ok", "ignored", "error"]
    message: str = ""
    entry: CatalogEntry | None = None
    loadout: LoadoutSlot | None = None
    error_code: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class JobSwitcher:
    def __init__(self, services: Services, config: PluginConfig | None = None) -> None:
        self.services = services
        self.config = config or PluginConfig()
        self.log = services.logger
        self.registry = CommandRegistry(services.commands, self.handle_command, services.logger)
        self.catalogs: dict[str, Catalog | None] = {}
        self._load_catalogs()
        self.registry.register(self.config, self.catalogs)

    def _load_catalogs(self) -> None:
        provider = self.services.catalogs
        self.catalogs = {category: provider.get(category) for category in (CLASS_JOB, PHANTOM_JOB)}

    def dispose(self) -> None:
        self.registry.unregister()

    def apply_config(self, config: PluginConfig) -> None:
        """Swap settings and rebuild the command set to match them."""
        self.config = config
        self.registry.reregister(self.config, self.catalogs)

    def reload_catalogs(self) -> None:
        self.services.catalogs.reload()
        self._load_catalogs()
        self.registry.reregister(self.config, self.catalogs)

    def handle_command(self, command: str, arguments: str) -> SwitchOutcome:
        """Host callback for every registered command."""
        if not command or not command.strip():
            return SwitchOutcome(status="ignored")

        is_phantom = normalize_command(command).casefold() == PHANTOM_JOB_COMMAND
        try:
            if is_phantom:
                return self._switch_phantom_job(arguments)
            return self._switch_class_job(command)
        except SwitchError as e:
            return self._fail(e, PHANTOM_JOB if is_phantom else CLASS_JOB, command)

    def _fail(self, error: SwitchError, operation: str, command: str) -> SwitchOutcome:
        msg = error.message if error.message.startswith(MESSAGE_PREFIX) else MESSAGE_PREFIX + error.message
        log_error_with_context(error, operation, command=command, extra_context=error.details)
        self.services.notifier.print_error(msg)
        return SwitchOutcome(status="error", message=msg, error_code=error.error_code)

    def _catalog(self, category: str) -> Catalog:
        catalog = self.catalogs.get(category)
        if catalog is None:
            raise CatalogUnavailableError(f"{category} data is not loaded")
        return catalog

    def _switch_class_job(self, command: str) -> SwitchOutcome:
        catalog = self._catalog(CLASS_JOB)
        entry = resolve_exact(command, catalog, self.config.prefix, self.config.suffix)
        if entry is None:
            raise EntryNotFoundError(f"No class job found for command: {normalize_command(command)}")

        try:
            slot = equip_best_loadout(self.services.gateway, entry.id)
        except Exception as e:
            raise ActionFailedError(f"Failed to equip gearset for {entry.name}: {e}") from e
        if slot is None:
            raise EntryNotFoundError(f"No gearset found for class job: {entry.name}", details={"job_id": entry.id})

        msg = f"Equipped best gearset for class job: {entry.name}"
        self.log.info("%s%s", MESSAGE_PREFIX, msg)
        return SwitchOutcome(status="ok", message=msg, entry=entry, loadout=slot)

    def _switch_phantom_job(self, query: str) -> SwitchOutcome:
        if not query or not query.strip():
            raise InvalidQueryError(
                f"Please provide a search query for the Phantom Job (e.g., /{PHANTOM_JOB_COMMAND} knight)"
            )
        catalog = self._catalog(PHANTOM_JOB)
        match = fuzzy_search(query, catalog.entries)
        if match is None:
            raise EntryNotFoundError(f"No Phantom Job found matching: {query}")

        job = match.entry
        gateway = self.services.gateway
        try:
            zone = gateway.current_zone()
        except Exception as e:
            raise ActionFailedError(f"Failed to read current zone: {e}") from e
        if zone != PHANTOM_JOB_ZONE:
            raise PreconditionFailedError("You can only use this command while in the Occult Crescent")

        job_name = job.name_alt or job.name
        self.log.info("Switching to Phantom Job: %s (matched from query: %s)", job_name, query)
        try:
            gateway.select_catalog_entry(job.id)
        except Exception as e:
            raise ActionFailedError(f"Failed to switch Phantom Job: {e}") from e

        return SwitchOutcome(status="ok", message=f"Switched to Phantom Job: {job_name}", entry=job)
