"""In-process stand-in for the plugin host.

Builds the services bundle (command table, notifier, gateway, catalogs) the
switcher expects, wires the settings store so every save re-registers
commands, owns the ``/fjs`` settings toggle, and exposes ``dispatch`` for
typed chat lines.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from shared.runtime_settings import RuntimeSettings
from switcher.catalog.loader import CatalogProvider
from switcher.config import ConfigStore, PluginConfig
from switcher.gateway import InMemoryGateway
from switcher.job_switcher import MESSAGE_PREFIX, JobSwitcher, SwitchOutcome
from switcher.services import ConsoleNotifier, InMemoryCommandSink, Notifier, Services

logger = logging.getLogger(__name__)

SETTINGS_COMMAND = "/fjs"


class HostError(RuntimeError):
    """Raised for host setup failures (bad session file, missing catalogs in strict mode)."""


@dataclass
class Host:
    switcher: JobSwitcher
    sink: InMemoryCommandSink
    gateway: InMemoryGateway
    store: ConfigStore

    def dispatch(self, line: str) -> SwitchOutcome:
        try:
            result = self.sink.dispatch(line)
        except KeyError as e:
            raise HostError(f"Unknown command: {e.args[0]}") from e
        return result

    def save_config(self, config: PluginConfig) -> None:
        self.store.save(config)

    def toggle_settings(self, command: str, arguments: str) -> SwitchOutcome:
        """Handler for the settings command: flip window visibility and persist it."""
        current = self.switcher.config
        config = current.model_copy(update={"is_visible": not current.is_visible})
        self.store.save(config)
        msg = f"Settings window {'shown' if config.is_visible else 'hidden'}"
        self.switcher.services.notifier.print(MESSAGE_PREFIX + msg)
        return SwitchOutcome(status="ok", message=msg)

    def close(self) -> None:
        if self.sink.contains(SETTINGS_COMMAND):
            self.sink.remove_handler(SETTINGS_COMMAND)
        self.switcher.dispose()


def load_gateway(session_path: str | Path | None) -> InMemoryGateway:
    if not session_path:
        return InMemoryGateway()
    path = Path(session_path)
    if not path.exists():
        raise HostError(f"Session file not found: {path}")
    try:
        return InMemoryGateway.from_yaml(path)
    except (ValueError, TypeError) as e:
        raise HostError(f"Invalid session file {path}: {e}") from e


def build_host(
    settings: RuntimeSettings,
    *,
    session_path: str | Path | None = None,
    notifier: Notifier | None = None,
    config: PluginConfig | None = None,
) -> Host:
    store = ConfigStore(settings.config_path)
    services = Services(
        notifier=notifier or ConsoleNotifier(),
        catalogs=CatalogProvider(settings.catalog_dir),
        commands=InMemoryCommandSink(),
        gateway=load_gateway(session_path),
    )
    switcher = JobSwitcher(services, config or store.load())

    if settings.strict_catalogs:
        missing = [c for c, catalog in switcher.catalogs.items() if catalog is None]
        if missing:
            switcher.dispose()
            raise HostError(f"Catalogs unavailable: {', '.join(sorted(missing))}")

    store.on_save = switcher.apply_config
    host = Host(switcher=switcher, sink=services.commands, gateway=services.gateway, store=store)
    if services.commands.contains(SETTINGS_COMMAND):
        logger.warning("Command already exists: %s", SETTINGS_COMMAND)
    else:
        services.commands.add_handler(SETTINGS_COMMAND, host.toggle_settings, help_message="Toggles the settings window")
    return host
