"""
Pytest fixtures for SmartClone testing.

Provides common fixtures for testing code built on SmartClone.
"""

import io
import json
import os
from collections.abc import Generator, Iterable
from pathlib import Path

import pytest
from rich.console import Console

from smartclone.config import CONFIG_FILE_MODE
from smartclone.testing.mock import MockGitHelper, MockRepositoryIndex, ScriptedPrompter
from smartclone.types.config import Config, Credentials
from smartclone.types.repos import RepositoryRecord


def create_mock_repository(
    name: str = "mock-repo",
    owner: str = "octocat",
    private: bool = False,
    fork: bool = False,
    language: str | None = None,
    description: str | None = None,
) -> RepositoryRecord:
    """Create a RepositoryRecord with sensible defaults."""
    return RepositoryRecord(
        name=name,
        owner=owner,
        private=private,
        fork=fork,
        language=language,
        description=description,
    )


def create_mock_config(username: str = "octocat", token: str = "", **kwargs) -> Config:
    """Create a Config for the given account."""
    return Config(github=Credentials(username=username, token=token), **kwargs)


def write_config_file(path: Path, data: dict) -> Path:
    """Write a raw config document with owner-only permissions."""
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    os.chmod(path, CONFIG_FILE_MODE)
    return path


def repo_payload(names: Iterable[str], **fields) -> list[dict]:
    """Minimal GitHub API list payload for the given names."""
    return [{"name": name, **fields} for name in names]


# ============================================================================
# Collaborator Fixtures
# ============================================================================


@pytest.fixture
def silent_prompter() -> ScriptedPrompter:
    """Provide a ScriptedPrompter with no answers; any question raises EOFError."""
    return ScriptedPrompter()


@pytest.fixture
def mock_index() -> Generator[MockRepositoryIndex, None, None]:
    """
    Provide a MockRepositoryIndex.

    Example:
        ```python
        def test_my_feature(mock_index):
            mock_index.configure_fetch(["alpha", "beta"])
            session = run(config, "alpha", prompter, index=mock_index)
            assert mock_index.was_called("fetch")
        ```
    """
    index = MockRepositoryIndex()
    yield index
    index.reset()


@pytest.fixture
def mock_git() -> MockGitHelper:
    """Provide a MockGitHelper that creates a README and two commits."""
    return MockGitHelper(
        readme="# Mock\n\nA mock repository.\n",
        commits=["abc1234 Second commit", "def5678 Initial commit"],
    )


@pytest.fixture
def quiet_console() -> Console:
    """Provide a Console writing into a StringIO (read it via ``.file.getvalue()``)."""
    return Console(file=io.StringIO(), width=200, color_system=None, soft_wrap=True)


@pytest.fixture
def restore_cwd() -> Generator[Path, None, None]:
    """Restore the working directory after tests that chdir."""
    original = Path.cwd()
    yield original
    os.chdir(original)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_credentials() -> Credentials:
    """Provide anonymous credentials."""
    return Credentials(username="octocat")


@pytest.fixture
def sample_config() -> Config:
    """Provide a Config with default preferences."""
    return create_mock_config()


@pytest.fixture
def sample_repository() -> RepositoryRecord:
    """Provide a sample RepositoryRecord."""
    return create_mock_repository(name="email_automation_private")


@pytest.fixture
def sample_repositories() -> list[RepositoryRecord]:
    """Provide a small index in GitHub's name order."""
    return [
        create_mock_repository(name="api-client", language="Python"),
        create_mock_repository(name="api-server", language="Go", private=True),
        create_mock_repository(name="email_automation_private", private=True),
        create_mock_repository(name="generate_html_from_csv", language="Python"),
        create_mock_repository(name="webapp", language="TypeScript", fork=True),
    ]


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Provide a path for a config file that does not exist yet."""
    return tmp_path / "config.json"
