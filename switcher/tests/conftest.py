"""Shared fixtures: small catalogs and a recording notifier."""
from __future__ import annotations

import pytest

from switcher.catalog.index import build_catalog
from switcher.catalog.loader import CatalogProvider
from switcher.catalog.types import CLASS_JOB, PHANTOM_JOB, CatalogEntry
from switcher.gateway import PHANTOM_JOB_ZONE, InMemoryGateway
from switcher.loadouts import LoadoutSlot
from switcher.services import InMemoryCommandSink, Services

PALADIN = CatalogEntry(id=19, name="Paladin", acronym="PLD")
WHITE_MAGE = CatalogEntry(id=24, name="White Mage", acronym="WHM")
MINER = CatalogEntry(id=16, name="Miner", acronym="MIN")
ADVENTURER = CatalogEntry(id=0, name="Adventurer", acronym="ADV")
NAMELESS = CatalogEntry(id=50, name="", acronym="NOP")
NO_ACRONYM = CatalogEntry(id=51, name="Limited Job", acronym=" ")

FREELANCER = CatalogEntry(id=0, name="すっぴん士", name_alt="Phantom Freelancer")
KNIGHT = CatalogEntry(id=1, name="ナイト", name_alt="Phantom Knight")
MONK = CatalogEntry(id=3, name="モンク", name_alt="Phantom Monk")
CANNONEER = CatalogEntry(id=9, name="砲撃士", name_alt="Phantom Cannoneer")
CHEMIST = CatalogEntry(id=10, name="薬師", name_alt="Phantom Chemist")


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []
        self.errors: list[str] = []

    def print(self, message: str) -> None:
        self.messages.append(message)

    def print_error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def class_jobs():
    return build_catalog(CLASS_JOB, [ADVENTURER, PALADIN, WHITE_MAGE, MINER, NAMELESS, NO_ACRONYM])


@pytest.fixture
def phantom_jobs():
    return build_catalog(PHANTOM_JOB, [FREELANCER, KNIGHT, MONK, CANNONEER, CHEMIST])


@pytest.fixture
def catalogs(class_jobs, phantom_jobs):
    return {CLASS_JOB: class_jobs, PHANTOM_JOB: phantom_jobs}


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def gateway():
    return InMemoryGateway.from_slots(
        [
            LoadoutSlot(index=0, job_id=PALADIN.id, item_level=50),
            LoadoutSlot(index=1, job_id=PALADIN.id, item_level=80),
            LoadoutSlot(index=2, job_id=WHITE_MAGE.id, item_level=70),
        ],
        zone=PHANTOM_JOB_ZONE,
    )


@pytest.fixture
def services(class_jobs, phantom_jobs, notifier, gateway):
    return Services(
        notifier=notifier,
        catalogs=CatalogProvider.from_catalogs(class_jobs, phantom_jobs),
        commands=InMemoryCommandSink(),
        gateway=gateway,
    )
