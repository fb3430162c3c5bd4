from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

CLASS_JOB = "class_job"
PHANTOM_JOB = "phantom_job"

CATEGORY_LABELS: dict[str, str] = {
    CLASS_JOB: "Class/Job",
    PHANTOM_JOB: "Phantom Job",
}

# Row id 0 is the empty row of every game sheet.
SENTINEL_ID = 0


@dataclass(frozen=True)
class CatalogEntry:
    id: int
    name: str
    name_alt: str = ""
    acronym: str = ""

    def is_registrable(self) -> bool:
        """True when the entry can back a command: real id, non-blank name and acronym."""
        return self.id != SENTINEL_ID and bool(self.name.strip()) and bool(self.acronym.strip())


@dataclass(frozen=True)
class Catalog:
    category: str
    entries: tuple[CatalogEntry, ...] = ()
    by_acronym: dict[str, CatalogEntry] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return CATEGORY_LABELS.get(self.category, self.category)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class FuzzyMatch:
    entry: CatalogEntry
    tier: Literal["substring", "subsequence"]
    score: int
