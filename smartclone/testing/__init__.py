"""
SmartClone testing utilities.

Provides test doubles and fixtures for testing SmartClone and code that
drives it.
"""

from smartclone.testing.fixtures import (
    create_mock_config,
    create_mock_repository,
    repo_payload,
    write_config_file,
)
from smartclone.testing.mock import (
    MockCall,
    MockGitHelper,
    MockRepositoryIndex,
    MockResponse,
    ScriptedPrompter,
    clone_failure,
)

__all__ = [
    "ScriptedPrompter",
    "MockRepositoryIndex",
    "MockGitHelper",
    "MockCall",
    "MockResponse",
    "clone_failure",
    "create_mock_repository",
    "create_mock_config",
    "repo_payload",
    "write_config_file",
]
