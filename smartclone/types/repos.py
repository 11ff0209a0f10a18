"""Repository-related data models."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

GITHUB_WEB_URL = "https://github.com"


@dataclass(frozen=True)
class RepositoryRecord:
    """One entry of an account's repository index."""

    name: str
    owner: str
    private: bool = False
    fork: bool = False
    language: str | None = None
    description: str | None = None

    @property
    def clone_url(self) -> str:
        """HTTPS clone endpoint derived from the owner and name."""
        return f"{GITHUB_WEB_URL}/{self.owner}/{self.name}.git"


class MatchTier(str, Enum):
    """Which matching pass produced a MatchSet."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclass(frozen=True)
class MatchSet:
    """Ordered, duplicate-free result of one matching pass."""

    keyword: str
    records: tuple[RepositoryRecord, ...] = ()
    tier: MatchTier = MatchTier.NONE

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[RepositoryRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> RepositoryRecord:
        return self.records[index]

    def __bool__(self) -> bool:
        return bool(self.records)

    @property
    def names(self) -> list[str]:
        return [record.name for record in self.records]


@dataclass
class CloneOutcome:
    """Result of a clone-or-enter action."""

    record: RepositoryRecord
    path: str
    action: str  # "cloned" or "entered"
    readme_preview: list[str] = field(default_factory=list)
    readme_truncated: bool = False
    recent_commits: list[str] = field(default_factory=list)
