"""
Clone executor.

Clones the resolved repository under a destination root, or enters an
existing checkout when the user asks for it, and summarizes the result.
"""

import os
import subprocess
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from smartclone.exceptions import CloneError, DirectoryExistsError
from smartclone.git import GitHelper
from smartclone.logging import get_logger
from smartclone.prompter import Prompter
from smartclone.types.repos import CloneOutcome, RepositoryRecord

logger = get_logger("executor")

README_PREVIEW_LINES = 5
RECENT_COMMIT_COUNT = 3
README_CANDIDATES = ("README.md", "README", "README.rst", "README.txt")
ENTER_EXISTING_QUESTION = "Enter existing directory anyway? (y/n):"


def find_readme(directory: Path) -> Path | None:
    """Locate a root-level README, preferring README.md, ignoring case."""
    try:
        entries = {entry.name.lower(): entry for entry in directory.iterdir() if entry.is_file()}
    except OSError:
        return None
    for candidate in README_CANDIDATES:
        entry = entries.get(candidate.lower())
        if entry is not None:
            return entry
    return None


def read_preview(path: Path, limit: int = README_PREVIEW_LINES) -> tuple[list[str], bool]:
    """Return the first ``limit`` lines of a file and whether more follow.

    An unreadable file yields no lines.
    """
    try:
        lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        return [], False
    return lines[:limit], len(lines) > limit


class CloneExecutor:
    """
    Performs the clone for a resolved repository.

    Example:
        ```python
        executor = CloneExecutor(prompter=ConsolePrompter())
        outcome = executor.execute(record, ".")
        print(outcome.path)
        ```
    """

    def __init__(
        self,
        prompter: Prompter,
        git: GitHelper | None = None,
        console: Console | None = None,
        change_directory: bool = True,
    ) -> None:
        """
        Initialize the executor.

        Args:
            prompter: Asks whether to enter an existing directory
            git: Git helper (default: GitHelper())
            console: Output console (default: a new rich Console)
            change_directory: Whether to chdir into the result
        """
        self.prompter = prompter
        self.git = git or GitHelper()
        self.console = console or Console()
        self.change_directory = change_directory

    def execute(self, record: RepositoryRecord, destination_root: str | Path) -> CloneOutcome:
        """
        Clone ``record`` into ``destination_root/<name>``.

        An existing target is never cloned into: the user may enter it
        instead, or the operation fails.

        Args:
            record: Repository to clone
            destination_root: Parent directory of the clone

        Returns:
            CloneOutcome describing what happened

        Raises:
            DirectoryExistsError: If the target exists and the user declines to enter it
            CloneError: If git clone fails
        """
        root = Path(destination_root).expanduser().absolute()
        target = root / record.name

        self.console.print()
        self.console.print(f"📦 Cloning: {record.name}", markup=False, highlight=False)
        self.console.print(f"🔗 URL: {record.clone_url}", markup=False, highlight=False)
        self.console.print(f"📍 Target: {target}", markup=False, highlight=False)
        self.console.print()

        if target.exists():
            return self._enter_existing(record, target)

        root.mkdir(parents=True, exist_ok=True)
        try:
            self.git.clone(record.clone_url, target)
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            logger.error("Clone failed for %s: %s", record.clone_url, stderr)
            raise CloneError(f"Failed to clone repository '{record.name}'", stderr=stderr) from e
        except FileNotFoundError as e:
            raise CloneError(f"git executable not found: {self.git.executable}") from e

        self._enter(target)

        outcome = CloneOutcome(record=record, path=str(target), action="cloned")
        readme = find_readme(target)
        if readme is not None:
            outcome.readme_preview, outcome.readme_truncated = read_preview(readme)
        outcome.recent_commits = self.git.recent_commits(target, RECENT_COMMIT_COUNT)

        self.report(outcome)
        return outcome

    def report(self, outcome: CloneOutcome) -> None:
        """Print the post-clone summary."""
        if outcome.action == "entered":
            self.console.print(f"📂 Entered: {outcome.path}", markup=False, highlight=False)
            return

        self.console.print(
            f"[green]✅ Successfully cloned and entered:[/green] {escape(outcome.path)}",
            highlight=False,
        )

        if outcome.readme_preview:
            self.console.print()
            self.console.print("📖 README preview:")
            for line in outcome.readme_preview:
                self.console.print(f"  {line}", markup=False, highlight=False)
            if outcome.readme_truncated:
                self.console.print("  ...")

        self.console.print()
        self.console.print("📝 Recent commits:")
        if outcome.recent_commits:
            for line in outcome.recent_commits:
                self.console.print(f"  {line}", markup=False, highlight=False)
        else:
            self.console.print("  No commits found")

    def _enter_existing(self, record: RepositoryRecord, target: Path) -> CloneOutcome:
        self.console.print(
            f"[yellow]⚠️  Directory '{escape(record.name)}' already exists![/yellow]", highlight=False
        )
        if not target.is_dir():
            raise DirectoryExistsError(str(target))

        answer = self.prompter.ask(ENTER_EXISTING_QUESTION).strip().lower()
        if answer not in ("y", "yes"):
            raise DirectoryExistsError(str(target))

        self._enter(target)
        outcome = CloneOutcome(record=record, path=str(target), action="entered")
        self.report(outcome)
        return outcome

    def _enter(self, target: Path) -> None:
        if self.change_directory:
            os.chdir(target)
            logger.debug("Working directory is now %s", target)


__all__ = ["CloneExecutor", "find_readme", "read_preview"]
