"""Fuzzy catalog search used by the Phantom Job command.

Two tiers, checked per entry:

1. Substring: the query appears verbatim in the entry's name or in its
   alternate name (with the fixed ``"phantom "`` lead-in removed). Score is the
   earliest start index across both fields; lower is better.
2. Subsequence: only for entries with no substring hit. Score is the number of
   query characters found in order by a greedy left-to-right scan; higher is
   better.

Any substring hit beats every subsequence hit. Within a tier only a strictly
better score replaces the current best, so ties keep catalog order.
"""
from __future__ import annotations

import logging
from typing import Iterable

from switcher.catalog.types import CatalogEntry, FuzzyMatch
from switcher.core.error_handling import InvalidQueryError

logger = logging.getLogger(__name__)

DEFAULT_STRIP_PREFIX = "phantom "


def character_match_score(query: str, target: str) -> int:
    """Count query characters found in ``target`` in order, greedily, without backtracking.

    Examples:
        ("cnr", "cannoneer") -> 3
        ("kgt", "knight") -> 3
        ("xyz", "knight") -> 0
    """
    match_count = 0
    target_index = 0
    for query_char in query:
        while target_index < len(target):
            if target[target_index] == query_char:
                match_count += 1
                target_index += 1
                break
            target_index += 1
        if target_index >= len(target):
            break
    return match_count


def _strip_lead(value: str, lead: str) -> str:
    if lead and value.startswith(lead):
        return value[len(lead):]
    return value


def _substring_score(query: str, *fields: str) -> int | None:
    hits = [f.find(query) for f in fields if query in f]
    return min(hits) if hits else None


def fuzzy_search(
    query: str,
    entries: Iterable[CatalogEntry],
    strip_prefix: str = DEFAULT_STRIP_PREFIX,
) -> FuzzyMatch | None:
    """Return the best entry for a free-text query, or None when nothing matches.

    Raises:
        InvalidQueryError: the query is empty or whitespace only.
    """
    if not query or not query.strip():
        raise InvalidQueryError("Empty search query")

    search = query.strip().lower()
    lead = (strip_prefix or "").lower()

    best_substring: CatalogEntry | None = None
    best_substring_score: int | None = None
    best_char: CatalogEntry | None = None
    best_char_score = 0

    for entry in entries:
        name = (entry.name or "").lower()
        name_alt = _strip_lead((entry.name_alt or "").lower(), lead)

        score = _substring_score(search, name, name_alt)
        if score is not None:
            if best_substring_score is None or score < best_substring_score:
                best_substring_score = score
                best_substring = entry
            continue

        char_score = max(character_match_score(search, name), character_match_score(search, name_alt))
        if char_score > best_char_score:
            best_char_score = char_score
            best_char = entry

    if best_substring is not None and best_substring_score is not None:
        logger.debug("Fuzzy %r -> %s (substring @%d)", search, best_substring.name_alt or best_substring.name, best_substring_score)
        return FuzzyMatch(entry=best_substring, tier="substring", score=best_substring_score)
    if best_char is not None:
        logger.debug("Fuzzy %r -> %s (subsequence %d)", search, best_char.name_alt or best_char.name, best_char_score)
        return FuzzyMatch(entry=best_char, tier="subsequence", score=best_char_score)
    return None
