"""``jobswitch catalog`` — list the entries of a catalog."""
from __future__ import annotations

from shared.config import CATALOG_FILES
from shared.runtime_settings import load_runtime_settings
from switcher.catalog.loader import CatalogProvider


def register(subparsers) -> None:
    p = subparsers.add_parser("catalog", help="List catalog entries")
    p.add_argument("category", choices=sorted(CATALOG_FILES), help="Catalog to list")
    p.add_argument("--catalog-dir", type=str, help="Directory holding the catalog YAML files")
    p.set_defaults(func=run)


def run(args) -> int:
    settings = load_runtime_settings()
    provider = CatalogProvider(args.catalog_dir or settings.catalog_dir)
    catalog = provider.get(args.category)
    if catalog is None:
        print(f"  ERROR: {args.category} catalog not found in {provider.catalog_dir}")
        return 1

    for entry in catalog.entries:
        acronym = entry.acronym or "-"
        alt = f"  ({entry.name_alt})" if entry.name_alt else ""
        print(f"{entry.id:>4}  {acronym:<5} {entry.name}{alt}")
    return 0
