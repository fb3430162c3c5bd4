"""``jobswitch resolve`` — show which catalog entry a command or query resolves to.

Runs the resolvers only; nothing is equipped or selected.
"""
from __future__ import annotations

import json

from shared.runtime_settings import load_runtime_settings
from switcher.catalog.loader import CatalogProvider
from switcher.catalog.types import CLASS_JOB, PHANTOM_JOB
from switcher.config import ConfigStore
from switcher.core.error_handling import InvalidQueryError, create_error_response
from switcher.resolvers import fuzzy_search, resolve_exact


def register(subparsers) -> None:
    p = subparsers.add_parser("resolve", help="Resolve a class/job command or Phantom Job query")
    p.add_argument("text", help='Command token (e.g. "/pld") or, with --phantom, a search query')
    p.add_argument("--phantom", action="store_true", help="Fuzzy-search the Phantom Job catalog")
    p.add_argument("--json", action="store_true", help="Print the result as JSON")
    p.set_defaults(func=run)


def _emit(payload: dict, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, ensure_ascii=False))
        return
    if "error_code" in payload:
        print(f"  ERROR [{payload['error_code']}]: {payload['message']}")
        return
    line = f"{payload['id']}  {payload['name']}"
    if payload.get("name_alt"):
        line += f" ({payload['name_alt']})"
    if payload.get("tier"):
        line += f"  [{payload['tier']} score={payload['score']}]"
    print(line)


def run(args) -> int:
    settings = load_runtime_settings()
    provider = CatalogProvider(settings.catalog_dir)
    category = PHANTOM_JOB if args.phantom else CLASS_JOB
    catalog = provider.get(category)
    if catalog is None:
        _emit(create_error_response("CATALOG_UNAVAILABLE", f"{category} catalog not loaded"), args.json)
        return 1

    try:
        if args.phantom:
            match = fuzzy_search(args.text, catalog.entries)
            entry = match.entry if match else None
        else:
            config = ConfigStore(settings.config_path).load()
            match = None
            entry = resolve_exact(args.text, catalog, config.prefix, config.suffix)
    except InvalidQueryError as e:
        _emit(create_error_response(e.error_code, e.message), args.json)
        return 1

    if entry is None:
        _emit(create_error_response("NOT_FOUND", f"No {catalog.label} found for: {args.text}"), args.json)
        return 1

    payload = {"id": entry.id, "name": entry.name, "name_alt": entry.name_alt, "acronym": entry.acronym}
    if match is not None:
        payload.update({"tier": match.tier, "score": match.score})
    _emit(payload, args.json)
    return 0
