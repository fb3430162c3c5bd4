"""Best-loadout (gearset) selection for a class/job."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from switcher.gateway import ActionGateway

logger = logging.getLogger(__name__)

# The host keeps 100 gearset slots.
LOADOUT_TABLE_SIZE = 100


@dataclass(frozen=True)
class LoadoutSlot:
    index: int
    job_id: int
    item_level: int = 0
    exists: bool = True
    name: str = ""


def select_best_loadout(
    get_slot: Callable[[int], LoadoutSlot | None],
    job_id: int,
    size: int = LOADOUT_TABLE_SIZE,
) -> LoadoutSlot | None:
    """Scan slots 0..size-1 and return the highest item level slot for ``job_id``.

    A slot counts only when it exists, its stored index equals its ordinal and
    its job matches. Ties keep the lowest ordinal.
    """
    best: LoadoutSlot | None = None
    for ordinal in range(size):
        slot = get_slot(ordinal)
        if slot is None or not slot.exists:
            continue
        if slot.index != ordinal or slot.job_id != job_id:
            continue
        if best is None or slot.item_level > best.item_level:
            best = slot
    return best


def equip_best_loadout(gateway: "ActionGateway", job_id: int, size: int = LOADOUT_TABLE_SIZE) -> LoadoutSlot | None:
    """Equip the best loadout for ``job_id``; None (and no equip call) when there is none."""
    best = select_best_loadout(gateway.get_loadout, job_id, size)
    if best is None:
        return None
    logger.info("Equipping loadout %d (item level %d) for job %d", best.index, best.item_level, job_id)
    gateway.equip_loadout(best.index)
    return best
