"""
One SmartClone invocation: fetch, filter, match, resolve, clone.

Each stage blocks on the previous one. The configuration is passed in by
value and nothing here is persisted.
"""

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from smartclone.executor import CloneExecutor
from smartclone.git import GitHelper
from smartclone.index import RepositoryIndex, apply_filters
from smartclone.logging import get_logger
from smartclone.matcher import match_records
from smartclone.prompter import Prompter
from smartclone.resolver import SelectionResolver
from smartclone.types.config import Config
from smartclone.types.repos import CloneOutcome, MatchSet, MatchTier, RepositoryRecord

logger = get_logger("session")


@dataclass
class Session:
    """State accumulated by one invocation."""

    config: Config
    keyword: str
    records: list[RepositoryRecord] = field(default_factory=list)
    candidates: list[RepositoryRecord] = field(default_factory=list)
    match_set: MatchSet | None = None
    selected: RepositoryRecord | None = None
    outcome: CloneOutcome | None = None

    @property
    def candidate_names(self) -> list[str]:
        return [record.name for record in self.candidates]


def run(
    config: Config,
    keyword: str,
    prompter: Prompter,
    index: RepositoryIndex | None = None,
    git: GitHelper | None = None,
    console: Console | None = None,
    destination: str | Path | None = None,
    change_directory: bool = True,
) -> Session:
    """
    Resolve ``keyword`` to one repository and clone it.

    Args:
        config: Loaded configuration
        keyword: Search keyword
        prompter: Answers the ambiguity and existing-directory questions
        index: Repository index fetcher (default: RepositoryIndex())
        git: Git helper passed to the executor
        console: Output console
        destination: Clone root (default: ``config.clone.default_path``)
        change_directory: Whether to chdir into the clone

    Returns:
        The completed Session

    Raises:
        SmartCloneError: Any stage failure; nothing is retried
    """
    console = console or Console()
    index = index or RepositoryIndex()
    session = Session(config=config, keyword=keyword)

    console.print(f"🔍 Searching repos for keyword: {keyword}", markup=False, highlight=False)
    console.print(f"👤 GitHub user: {config.github.username}", markup=False, highlight=False)

    session.records = index.fetch(config.github)
    session.candidates = apply_filters(session.records, config.filters)
    if len(session.candidates) != len(session.records):
        logger.info(
            "Filters kept %d of %d repositories",
            len(session.candidates),
            len(session.records),
        )

    session.match_set = match_records(keyword, session.candidates)
    if session.match_set.tier is not MatchTier.EXACT:
        console.print("🔍 No exact matches found. Trying fuzzy search...")

    resolver = SelectionResolver(prompter, console=console)
    session.selected = resolver.resolve(session.match_set, available=session.candidate_names)

    root = destination if destination is not None else config.clone.default_path
    executor = CloneExecutor(
        prompter,
        git=git,
        console=console,
        change_directory=change_directory,
    )
    session.outcome = executor.execute(session.selected, root)
    return session


__all__ = ["Session", "run"]
