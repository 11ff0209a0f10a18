"""
Keyword matching against repository names.

Two case-insensitive tiers:

1. exact: the name contains the whole keyword;
2. fuzzy: the name contains any token of the keyword split on ``_``/``-``.

The fuzzy tier only runs when the exact tier finds nothing, so a precise
keyword is never diluted by broader token matches. Results keep the
order of the input names and never repeat a name.
"""

import re
from collections.abc import Iterable, Sequence

from smartclone.types.repos import MatchSet, MatchTier, RepositoryRecord

# Shell word splitting also broke keywords on whitespace
_TOKEN_SEPARATORS = re.compile(r"[_\-\s]+")


def split_keyword(keyword: str) -> list[str]:
    """Split a keyword into its non-empty tokens, separated by ``_``, ``-`` or whitespace."""
    return [token for token in _TOKEN_SEPARATORS.split(keyword) if token]


def _unique(names: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result


def exact_matches(keyword: str, names: Sequence[str]) -> list[str]:
    """Names containing the whole keyword, case-insensitively."""
    needle = keyword.casefold()
    return _unique(name for name in names if needle in name.casefold())


def fuzzy_matches(keyword: str, names: Sequence[str]) -> list[str]:
    """Names containing at least one keyword token, case-insensitively."""
    tokens = [token.casefold() for token in split_keyword(keyword)]
    if not tokens:
        return []
    return _unique(
        name for name in names if any(token in name.casefold() for token in tokens)
    )


def match_with_tier(keyword: str, names: Sequence[str]) -> tuple[list[str], MatchTier]:
    """Run the tiers in order and report which one produced the result."""
    exact = exact_matches(keyword, names)
    if exact:
        return exact, MatchTier.EXACT

    fuzzy = fuzzy_matches(keyword, names)
    if fuzzy:
        return fuzzy, MatchTier.FUZZY

    return [], MatchTier.NONE


def match(keyword: str, names: Sequence[str]) -> list[str]:
    """
    Match a keyword against repository names.

    Args:
        keyword: User-supplied search keyword
        names: Repository names in index order

    Returns:
        Matching names in index order; empty when neither tier matches
    """
    matched, _ = match_with_tier(keyword, names)
    return matched


def match_records(keyword: str, records: Sequence[RepositoryRecord]) -> MatchSet:
    """Match a keyword against fetched records and wrap the result in a MatchSet."""
    by_name: dict[str, RepositoryRecord] = {}
    for record in records:
        by_name.setdefault(record.name, record)

    matched, tier = match_with_tier(keyword, [record.name for record in records])
    return MatchSet(
        keyword=keyword,
        records=tuple(by_name[name] for name in matched),
        tier=tier,
    )


__all__ = [
    "split_keyword",
    "exact_matches",
    "fuzzy_matches",
    "match_with_tier",
    "match",
    "match_records",
]
