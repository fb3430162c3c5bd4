"""Catalog loader: YAML catalog files validated into immutable catalogs."""
from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from shared.config import CATALOG_FILES, DEFAULT_CATALOG_DIR
from switcher.catalog.index import build_catalog
from switcher.catalog.types import Catalog, CatalogEntry

logger = logging.getLogger(__name__)


class CatalogRow(BaseModel):
    """One row of a catalog file."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(ge=0)
    name: str = ""
    name_alt: str = ""
    acronym: str = ""

    @field_validator("name", "name_alt", "acronym", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else str(v)

    def to_entry(self) -> CatalogEntry:
        return CatalogEntry(id=self.id, name=self.name, name_alt=self.name_alt, acronym=self.acronym)


def _read_yaml(path: Path) -> object:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def _coerce_rows(data: object) -> list:
    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        rows = data.get("entries")
        return rows if isinstance(rows, list) else []
    return []


def parse_catalog_rows(category: str, rows: list, *, source: str = "<memory>") -> Catalog:
    """Validate raw rows and build a catalog; invalid rows are skipped with a warning."""
    entries: list[CatalogEntry] = []
    for i, raw in enumerate(rows):
        if not isinstance(raw, dict):
            logger.warning("Skipping non-mapping row %d in %s", i, source)
            continue
        try:
            row = CatalogRow.model_validate(raw)
        except ValidationError as e:
            logger.warning("Skipping invalid row %d in %s: %s", i, source, e.errors()[0].get("msg"))
            continue
        entry = row.to_entry()
        logger.debug("%s row: %s", category, ", ".join(str(v) for v in (entry.id, entry.name, entry.name_alt, entry.acronym)))
        entries.append(entry)
    return build_catalog(category, entries)


def load_catalog(category: str, path: str | Path) -> Catalog | None:
    """Load one catalog file. Returns None (logged, non-fatal) when the data is unavailable."""
    fp = Path(path)
    if not fp.exists():
        logger.warning("Failed to load %s catalog: %s not found", category, fp)
        return None
    try:
        data = _read_yaml(fp)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load %s catalog from %s: %s", category, fp, e)
        return None

    rows = _coerce_rows(data)
    if not rows:
        logger.warning("Failed to load %s catalog: %s has no entries", category, fp)
        return None

    catalog = parse_catalog_rows(category, rows, source=str(fp))
    logger.info("Loaded %d %s entries from %s", len(catalog), category, fp)
    return catalog


class CatalogProvider:
    """Holds the currently loaded catalog per category; reloads replace them wholesale."""

    def __init__(self, catalog_dir: str | Path | None = None, files: dict[str, str] | None = None) -> None:
        self.catalog_dir = Path(catalog_dir) if catalog_dir else Path(DEFAULT_CATALOG_DIR)
        self.files = dict(CATALOG_FILES if files is None else files)
        self._catalogs: dict[str, Catalog | None] = {}

    @classmethod
    def from_catalogs(cls, *catalogs: Catalog) -> "CatalogProvider":
        """Provider pre-filled with in-memory catalogs (no files involved)."""
        provider = cls(files={})
        for catalog in catalogs:
            provider._catalogs[catalog.category] = catalog
        return provider

    def reload(self) -> dict[str, Catalog | None]:
        loaded: dict[str, Catalog | None] = {}
        for category, filename in self.files.items():
            loaded[category] = load_catalog(category, self.catalog_dir / filename)
        # Categories without a file (in-memory catalogs) survive a reload untouched.
        for category, catalog in self._catalogs.items():
            if category not in self.files:
                loaded[category] = catalog
        self._catalogs = loaded
        return dict(self._catalogs)

    def get(self, category: str) -> Catalog | None:
        if category not in self._catalogs and category in self.files:
            self._catalogs[category] = load_catalog(category, self.catalog_dir / self.files[category])
        return self._catalogs.get(category)
