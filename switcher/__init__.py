"""Job switching core: catalogs, resolvers, loadout selection, and the command registry."""
from .catalog.types import CLASS_JOB, PHANTOM_JOB, Catalog, CatalogEntry, FuzzyMatch
from .command_registry import CommandRegistration, CommandRegistry
from .config import ConfigStore, PluginConfig, migrate_config
from .job_switcher import JobSwitcher, SwitchOutcome

__all__ = [
    "CLASS_JOB",
    "PHANTOM_JOB",
    "Catalog",
    "CatalogEntry",
    "FuzzyMatch",
    "CommandRegistration",
    "CommandRegistry",
    "ConfigStore",
    "PluginConfig",
    "migrate_config",
    "JobSwitcher",
    "SwitchOutcome",
]
