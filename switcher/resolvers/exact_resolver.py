from __future__ import annotations

from switcher.catalog.index import acronym_key
from switcher.catalog.types import Catalog, CatalogEntry
from switcher.core.error_handling import InvalidQueryError

COMMAND_MARKER = "/"


def _strip_prefix(value: str, prefix: str) -> str:
    if prefix and value.startswith(prefix):
        return value[len(prefix):]
    return value


def _strip_suffix(value: str, suffix: str) -> str:
    if suffix and len(value) > len(suffix) and value.endswith(suffix):
        return value[: -len(suffix)]
    return value


def normalize_command(token: str, prefix: str = "", suffix: str = "") -> str:
    """Strip the command marker and the configured prefix/suffix from a typed token.

    "/xPLDy" with prefix "x" and suffix "y" -> "pld". The result is casefolded;
    prefix and suffix are removed at most once each, compared in folded form
    so a folding that changes length ("ß" -> "ss") still strips cleanly.
    """
    value = (token or "").strip()
    if value.startswith(COMMAND_MARKER):
        value = value[len(COMMAND_MARKER):]
    value = value.casefold()
    value = _strip_prefix(value, prefix.casefold())
    value = _strip_suffix(value, suffix.casefold())
    return value


def resolve_exact(token: str, catalog: Catalog, prefix: str = "", suffix: str = "") -> CatalogEntry | None:
    """Case-insensitive exact acronym match. None means "not found"."""
    acronym = normalize_command(token, prefix, suffix)
    if not acronym.strip():
        raise InvalidQueryError("Empty class/job command")
    return catalog.by_acronym.get(acronym_key(acronym))
