"""Reduce a MatchSet to a single repository."""

from collections.abc import Sequence
from enum import Enum

from rich.console import Console

from smartclone.exceptions import InvalidSelectionError, NoMatchesError
from smartclone.logging import get_logger
from smartclone.prompter import Prompter
from smartclone.types.repos import MatchSet, MatchTier, RepositoryRecord

logger = get_logger("resolver")

HINT_LIMIT = 10


class ResolutionState(str, Enum):
    EMPTY = "empty"
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"
    RESOLVED = "resolved"


def classify(match_set: MatchSet) -> ResolutionState:
    """Initial state for a MatchSet of the given size."""
    if not match_set:
        return ResolutionState.EMPTY
    if len(match_set) == 1:
        return ResolutionState.UNIQUE
    return ResolutionState.AMBIGUOUS


def parse_selection(answer: str, size: int) -> int:
    """
    Turn a typed answer into a zero-based index.

    A blank answer selects the first entry. Anything that is not a
    decimal integer in ``[1, size]`` raises InvalidSelectionError.
    """
    text = answer.strip()
    if not text:
        return 0
    if not (text.isascii() and text.isdigit()):
        raise InvalidSelectionError(text, size)
    choice = int(text)
    if not 1 <= choice <= size:
        raise InvalidSelectionError(text, size)
    return choice - 1


class SelectionResolver:
    """
    Picks the clone target from a MatchSet.

    A unique match resolves without interaction. Several matches are
    listed 1-indexed and the user is asked exactly once; there is no
    retry on an invalid answer.
    """

    def __init__(self, prompter: Prompter, console: Console | None = None) -> None:
        self.prompter = prompter
        self.console = console or Console()
        self.state: ResolutionState | None = None

    def resolve(
        self, match_set: MatchSet, available: Sequence[str] = ()
    ) -> RepositoryRecord:
        """
        Resolve a MatchSet to one record.

        Args:
            match_set: Output of the keyword matcher
            available: All candidate names, used for the hint on NoMatchesError

        Returns:
            The chosen RepositoryRecord

        Raises:
            NoMatchesError: If the MatchSet is empty
            InvalidSelectionError: If the answer to the ambiguity prompt is invalid
        """
        self.state = classify(match_set)

        if self.state is ResolutionState.EMPTY:
            raise NoMatchesError(match_set.keyword, list(available)[:HINT_LIMIT])

        if self.state is ResolutionState.UNIQUE:
            record = match_set[0]
            label = "exact match" if match_set.tier is MatchTier.EXACT else "match"
            self.console.print(f"🎯 Found {label}: {record.name}", markup=False, highlight=False)
        else:
            record = self._choose(match_set)

        self.state = ResolutionState.RESOLVED
        logger.debug("Resolved '%s' to %s", match_set.keyword, record.name)
        return record

    def _choose(self, match_set: MatchSet) -> RepositoryRecord:
        size = len(match_set)
        self.console.print()
        self.console.print("📋 Multiple matches found:")
        for position, record in enumerate(match_set, start=1):
            self.console.print(f"  {position}) {record.name}", markup=False, highlight=False)
        self.console.print()

        answer = self.prompter.ask(f"Select repository (1-{size}) or press Enter for first:")
        return match_set[parse_selection(answer, size)]


__all__ = [
    "ResolutionState",
    "SelectionResolver",
    "classify",
    "parse_selection",
    "HINT_LIMIT",
]
