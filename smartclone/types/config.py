"""Persisted configuration data models.

The on-disk layout is a fixed JSON document with five sections::

    {
      "github": {"username": "...", "token": "..."},
      "clone": {"default_path": "."},
      "favorites": [],
      "recent": [],
      "filters": {"show_private": true, "show_public": true,
                  "languages": [], "exclude_forks": false}
    }
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Credentials:
    """GitHub account identity."""

    username: str
    token: str = field(default="", repr=False)

    @property
    def is_authenticated(self) -> bool:
        """True when a token is present and the authenticated API path applies."""
        return bool(self.token)


@dataclass(frozen=True)
class ClonePreferences:
    """Clone defaults."""

    default_path: str = "."


@dataclass(frozen=True)
class FilterPreferences:
    """Which fetched repositories are eligible for matching."""

    show_private: bool = True
    show_public: bool = True
    languages: tuple[str, ...] = ()
    exclude_forks: bool = False

    @property
    def is_default(self) -> bool:
        return self == FilterPreferences()


@dataclass(frozen=True)
class Config:
    """Everything read from the credential file, passed by value."""

    github: Credentials
    clone: ClonePreferences = field(default_factory=ClonePreferences)
    favorites: tuple[str, ...] = ()
    recent: tuple[str, ...] = ()
    filters: FilterPreferences = field(default_factory=FilterPreferences)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Build a Config, filling any missing section with its defaults."""
        github = data.get("github") or {}
        clone = data.get("clone") or {}
        filters = data.get("filters") or {}
        defaults = FilterPreferences()
        return cls(
            github=Credentials(
                username=str(github.get("username") or ""),
                token=str(github.get("token") or ""),
            ),
            clone=ClonePreferences(
                default_path=str(clone.get("default_path") or "."),
            ),
            favorites=tuple(data.get("favorites") or ()),
            recent=tuple(data.get("recent") or ()),
            filters=FilterPreferences(
                show_private=bool(filters.get("show_private", defaults.show_private)),
                show_public=bool(filters.get("show_public", defaults.show_public)),
                languages=tuple(filters.get("languages") or ()),
                exclude_forks=bool(filters.get("exclude_forks", defaults.exclude_forks)),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with all five sections present."""
        return {
            "github": {
                "username": self.github.username,
                "token": self.github.token,
            },
            "clone": {"default_path": self.clone.default_path},
            "favorites": list(self.favorites),
            "recent": list(self.recent),
            "filters": {
                "show_private": self.filters.show_private,
                "show_public": self.filters.show_public,
                "languages": list(self.filters.languages),
                "exclude_forks": self.filters.exclude_forks,
            },
        }
