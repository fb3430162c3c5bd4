from switcher.resolvers.exact_resolver import normalize_command, resolve_exact
from switcher.resolvers.fuzzy_resolver import character_match_score, fuzzy_search

__all__ = ["character_match_score", "fuzzy_search", "normalize_command", "resolve_exact"]
