"""Line-based prompting behind a small request/response interface.

Every interactive step (credential entry, ambiguous-match choice,
existing-directory choice) goes through a ``Prompter`` so that the
components which ask questions never touch the terminal directly.
"""

from typing import Protocol, runtime_checkable

from rich.console import Console


@runtime_checkable
class Prompter(Protocol):
    """Anything that can answer a question with one line of text."""

    def ask(self, question: str, secret: bool = False) -> str:
        """
        Ask a question and return the answer without its trailing newline.

        Args:
            question: Prompt text shown to the user
            secret: When True the answer must not be echoed

        Returns:
            The raw answer; an empty string when the user just pressed Enter
        """
        ...


class ConsolePrompter:
    """Prompter backed by a rich Console reading from stdin."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, question: str, secret: bool = False) -> str:
        # EOFError and KeyboardInterrupt propagate; the CLI turns them into an abort
        return self.console.input(f"{question} ", markup=False, password=secret)


__all__ = ["Prompter", "ConsolePrompter"]
