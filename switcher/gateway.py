"""Action gateway: the only seam that touches host game state.

The core asks the gateway for loadout slots and the current zone, and calls it
to equip a loadout or select a catalog entry. ``InMemoryGateway`` is the
reference adapter used by the CLI host and the tests.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

import yaml

from switcher.loadouts import LOADOUT_TABLE_SIZE, LoadoutSlot

logger = logging.getLogger(__name__)

# Territory intended-use value of the Occult Crescent; Phantom Jobs exist only there.
PHANTOM_JOB_ZONE = 61


class ActionGateway(Protocol):
    def get_loadout(self, index: int) -> LoadoutSlot | None: ...

    def equip_loadout(self, index: int) -> None: ...

    def select_catalog_entry(self, entry_id: int) -> None: ...

    def current_zone(self) -> int: ...


class GatewayError(RuntimeError):
    """Raised by an adapter when the host rejects an action."""


@dataclass
class InMemoryGateway:
    """Gateway over plain data: loadout slots by ordinal, a zone, and an action log."""

    slots: dict[int, LoadoutSlot] = field(default_factory=dict)
    zone: int = 0
    actions: list[tuple[str, int]] = field(default_factory=list)
    fail_on: set[str] = field(default_factory=set)

    @classmethod
    def from_slots(cls, slots: list[LoadoutSlot], zone: int = 0, **kwargs: Any) -> "InMemoryGateway":
        # Keyed by list position so a slot whose stored index disagrees stays visible to the scan.
        return cls(slots={i: s for i, s in enumerate(slots)}, zone=zone, **kwargs)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "InMemoryGateway":
        """Load a session file: ``zone`` plus a ``loadouts`` list of slot mappings."""
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Session file {path} must be a mapping")
        slots: dict[int, LoadoutSlot] = {}
        for raw in data.get("loadouts") or []:
            if not isinstance(raw, dict) or "index" not in raw:
                logger.warning("Skipping malformed loadout in %s: %r", path, raw)
                continue
            slot = LoadoutSlot(
                index=int(raw["index"]),
                job_id=int(raw.get("job_id", 0)),
                item_level=int(raw.get("item_level", 0)),
                exists=bool(raw.get("exists", True)),
                name=str(raw.get("name") or ""),
            )
            ordinal = int(raw.get("slot", slot.index))
            slots[ordinal] = slot
        return cls(
            slots=slots,
            zone=int(data.get("zone", 0)),
            fail_on={str(a) for a in (data.get("fail_on") or [])},
        )

    def get_loadout(self, index: int) -> LoadoutSlot | None:
        if index < 0 or index >= LOADOUT_TABLE_SIZE:
            return None
        return self.slots.get(index)

    def equip_loadout(self, index: int) -> None:
        self._perform("equip_loadout", index)

    def select_catalog_entry(self, entry_id: int) -> None:
        self._perform("select_catalog_entry", entry_id)

    def current_zone(self) -> int:
        return self.zone

    def _perform(self, action: str, value: int) -> None:
        if action in self.fail_on:
            raise GatewayError(f"{action}({value}) rejected by host")
        self.actions.append((action, value))
        logger.debug("Gateway %s(%d)", action, value)
