"""Tests for best-gearset selection."""
from __future__ import annotations

from switcher.gateway import InMemoryGateway
from switcher.loadouts import LOADOUT_TABLE_SIZE, LoadoutSlot, equip_best_loadout, select_best_loadout

JOB_A = 19
JOB_B = 24


def _table(*slots: LoadoutSlot):
    by_ordinal = dict(enumerate(slots))
    return by_ordinal.get


def test_picks_highest_item_level():
    get = _table(
        LoadoutSlot(index=0, job_id=JOB_A, item_level=50),
        LoadoutSlot(index=1, job_id=JOB_A, item_level=80),
    )
    best = select_best_loadout(get, JOB_A)
    assert best is not None
    assert best.index == 1


def test_tie_keeps_lowest_slot():
    get = _table(
        LoadoutSlot(index=0, job_id=JOB_A, item_level=80),
        LoadoutSlot(index=1, job_id=JOB_A, item_level=80),
    )
    assert select_best_loadout(get, JOB_A).index == 0


def test_ignores_missing_and_foreign_slots():
    get = _table(
        LoadoutSlot(index=0, job_id=JOB_A, item_level=99, exists=False),
        LoadoutSlot(index=1, job_id=JOB_B, item_level=90),
        LoadoutSlot(index=5, job_id=JOB_A, item_level=95),  # stored index disagrees with slot 2
        LoadoutSlot(index=3, job_id=JOB_A, item_level=10),
    )
    assert select_best_loadout(get, JOB_A).index == 3


def test_level_zero_slot_still_qualifies():
    get = _table(LoadoutSlot(index=0, job_id=JOB_A, item_level=0))
    assert select_best_loadout(get, JOB_A).index == 0


def test_no_match_returns_none():
    get = _table(LoadoutSlot(index=0, job_id=JOB_A, item_level=50))
    assert select_best_loadout(get, JOB_B) is None


def test_scan_is_bounded_to_table_size():
    seen: list[int] = []

    def get(i: int):
        seen.append(i)
        return None

    select_best_loadout(get, JOB_A)
    assert seen == list(range(LOADOUT_TABLE_SIZE))


def test_equip_calls_gateway_once():
    gateway = InMemoryGateway.from_slots(
        [
            LoadoutSlot(index=0, job_id=JOB_A, item_level=50),
            LoadoutSlot(index=1, job_id=JOB_A, item_level=80),
        ]
    )
    slot = equip_best_loadout(gateway, JOB_A)
    assert slot.index == 1
    assert gateway.actions == [("equip_loadout", 1)]


def test_equip_without_match_has_no_side_effect():
    gateway = InMemoryGateway.from_slots([LoadoutSlot(index=0, job_id=JOB_A, item_level=50)])
    assert equip_best_loadout(gateway, JOB_B) is None
    assert gateway.actions == []
