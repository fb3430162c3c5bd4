from __future__ import annotations

import logging
from typing import Iterable

from switcher.catalog.types import Catalog, CatalogEntry

logger = logging.getLogger(__name__)


def acronym_key(value: str) -> str:
    """Case-insensitive lookup key for acronyms and command tokens."""
    return (value or "").strip().casefold()


def build_catalog(category: str, entries: Iterable[CatalogEntry]) -> Catalog:
    ordered = tuple(entries)
    by_acronym: dict[str, CatalogEntry] = {}
    for entry in ordered:
        key = acronym_key(entry.acronym)
        if not key:
            continue
        if key in by_acronym:
            # First entry in catalog order keeps the acronym.
            logger.warning(
                "Duplicate acronym %r in %s catalog: keeping %s, ignoring %s",
                entry.acronym,
                category,
                by_acronym[key].name,
                entry.name,
            )
            continue
        by_acronym[key] = entry

    return Catalog(category=category, entries=ordered, by_acronym=by_acronym)
