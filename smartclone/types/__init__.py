"""SmartClone type definitions.

This module exports all data model types used by the package.
"""

from smartclone.types.config import (
    ClonePreferences,
    Config,
    Credentials,
    FilterPreferences,
)
from smartclone.types.repos import CloneOutcome, MatchSet, MatchTier, RepositoryRecord

__all__ = [
    # Configuration types
    "Credentials",
    "ClonePreferences",
    "FilterPreferences",
    "Config",
    # Repository types
    "RepositoryRecord",
    "MatchTier",
    "MatchSet",
    "CloneOutcome",
]
