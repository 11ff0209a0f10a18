"""
Git helper utilities for SmartClone.

Wraps the ``git`` executable for the two operations the clone flow
needs: cloning a repository and reading its latest commit summaries.
"""

import subprocess
from pathlib import Path

from smartclone.logging import get_logger, log_git_command

logger = get_logger("git")


class GitHelper:
    """
    Helper utilities for git operations.

    Example:
        ```python
        from smartclone.git import GitHelper

        git = GitHelper()
        git.clone("https://github.com/octocat/Hello-World.git", "./Hello-World")
        print(git.recent_commits("./Hello-World"))
        ```
    """

    def __init__(self, executable: str = "git") -> None:
        """
        Initialize GitHelper.

        Args:
            executable: Name or path of the git binary
        """
        self.executable = executable

    def clone(self, clone_url: str, local_path: str | Path) -> None:
        """
        Clone a repository to a local path.

        Args:
            clone_url: The repository clone URL
            local_path: Directory to clone into; must not exist yet

        Raises:
            subprocess.CalledProcessError: If git clone fails
            FileNotFoundError: If the git executable is missing
        """
        local_path = Path(local_path)

        cmd = [self.executable, "clone", clone_url, str(local_path)]

        log_git_command(cmd)
        subprocess.run(cmd, check=True, capture_output=True, text=True)
        logger.info("Cloned %s into %s", clone_url, local_path)

    def recent_commits(self, local_path: str | Path, count: int = 3) -> list[str]:
        """
        Get one-line summaries of the latest commits.

        Args:
            local_path: Path to local repository
            count: Number of commits to return

        Returns:
            Lines of ``git log --oneline``; empty for a repository without commits
        """
        cmd = [self.executable, "log", "--oneline", f"-{count}"]
        log_git_command(cmd, cwd=str(local_path))

        result = subprocess.run(
            cmd,
            cwd=Path(local_path),
            capture_output=True,
            text=True,
        )

        if result.returncode != 0:
            # An empty repository has no HEAD to log
            logger.debug("git log failed in %s: %s", local_path, result.stderr.strip())
            return []

        return [line for line in result.stdout.splitlines() if line.strip()]


__all__ = ["GitHelper"]
