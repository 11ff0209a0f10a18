"""
Pytest plugin for SmartClone testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use them in your tests, add this to your
conftest.py:

    pytest_plugins = ["smartclone.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from smartclone.testing.fixtures import (
    config_path,
    mock_git,
    mock_index,
    quiet_console,
    restore_cwd,
    sample_config,
    sample_credentials,
    sample_repositories,
    sample_repository,
    silent_prompter,
)

__all__ = [
    "mock_index",
    "mock_git",
    "silent_prompter",
    "quiet_console",
    "restore_cwd",
    "sample_credentials",
    "sample_config",
    "sample_repository",
    "sample_repositories",
    "config_path",
]
