"""SmartClone - clone your GitHub repositories by keyword."""

__version__ = "0.1.0"

from smartclone.config import CredentialStore
from smartclone.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    CloneError,
    ConfigMissingError,
    DirectoryExistsError,
    InvalidSelectionError,
    NetworkError,
    NoMatchesError,
    SmartCloneError,
)
from smartclone.executor import CloneExecutor
from smartclone.git import GitHelper
from smartclone.index import RepositoryIndex, apply_filters
from smartclone.logging import configure_logging, get_logger
from smartclone.matcher import match, match_records
from smartclone.prompter import ConsolePrompter, Prompter
from smartclone.resolver import ResolutionState, SelectionResolver
from smartclone.session import Session
from smartclone.transport import HTTPTransport
from smartclone.types import (
    ClonePreferences,
    CloneOutcome,
    Config,
    Credentials,
    FilterPreferences,
    MatchSet,
    MatchTier,
    RepositoryRecord,
)

__all__ = [
    "__version__",
    # Pipeline
    "CredentialStore",
    "RepositoryIndex",
    "apply_filters",
    "match",
    "match_records",
    "SelectionResolver",
    "ResolutionState",
    "CloneExecutor",
    "Session",
    # Git Helper
    "GitHelper",
    # Prompting
    "Prompter",
    "ConsolePrompter",
    # Exceptions
    "SmartCloneError",
    "ConfigMissingError",
    "AuthenticationError",
    "AccountNotFoundError",
    "NetworkError",
    "NoMatchesError",
    "InvalidSelectionError",
    "DirectoryExistsError",
    "CloneError",
    # Types
    "Credentials",
    "ClonePreferences",
    "FilterPreferences",
    "Config",
    "RepositoryRecord",
    "MatchSet",
    "MatchTier",
    "CloneOutcome",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
