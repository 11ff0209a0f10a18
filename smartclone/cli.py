"""
SmartClone CLI - clone one of your GitHub repositories by keyword.
"""

import logging
import shlex
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from smartclone import session
from smartclone.completion import complete_keyword
from smartclone.config import CredentialStore
from smartclone.exceptions import NoMatchesError, SmartCloneError
from smartclone.logging import configure_logging
from smartclone.prompter import ConsolePrompter

app = typer.Typer(
    name="smartclone",
    help="Clone one of your GitHub repositories by keyword",
    add_completion=True,
)
console = Console()

USAGE = """Usage: smartclone <keyword>
Example: smartclone email    (finds email_automation_private, etc.)
Example: smartclone html     (finds generate_html_from_csv, etc.)

💡 Tip: Use TAB completion for keyword suggestions
"""


def _fail(message: str) -> None:
    """Print a one-line error and exit with status 1.

    Raises:
        SystemExit: Always exits with code 1
    """
    console.print(f"[bold red]❌ {escape(message)}[/bold red]", highlight=False)
    raise typer.Exit(code=1)


def _report_no_matches(error: NoMatchesError) -> None:
    console.print(f"[bold red]❌ {escape(error.message)}[/bold red]", highlight=False)
    if error.available:
        console.print()
        console.print(f"📋 Available repos (first {len(error.available)}):")
        for name in error.available:
            console.print(f"  {name}", markup=False, highlight=False)
    raise typer.Exit(code=1)


@app.command()
def clone(
    keyword: str | None = typer.Argument(
        None,
        help="Keyword contained in the repository name (e.g. email, html)",
        autocompletion=complete_keyword,
        show_default=False,
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (default: $SMARTCLONE_CONFIG or ~/.github_clone_config.json)",
    ),
    dest: Path | None = typer.Option(
        None,
        "--dest",
        "-d",
        help="Directory to clone into (default: clone.default_path from the config)",
    ),
    reconfigure: bool = typer.Option(
        False,
        "--reconfigure",
        help="Enter GitHub username and token again",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Find a repository by KEYWORD and clone it.

    Repositories whose name contains the keyword are tried first; if none
    do, the keyword is split on '_', '-' and spaces and any part may match. One
    match is cloned directly, several are offered as a numbered list.
    """
    configure_logging(level=logging.DEBUG if verbose else logging.WARNING)

    prompter = ConsolePrompter(console)
    store = CredentialStore(prompter, config_path)

    try:
        if reconfigure:
            console.print("⚙️  GitHub configuration")
            store.reconfigure()
            console.print(f"[green]✅ Configuration saved to {escape(str(store.path))}[/green]", highlight=False)
            if not keyword:
                raise typer.Exit(code=0)

        if not keyword or not keyword.strip():
            console.print(USAGE, markup=False, highlight=False)
            raise typer.Exit(code=1)

        first_run = not store.exists()
        if first_run:
            console.print("⚙️  GitHub configuration not found. Let's set it up!")
            console.print("   Leave the token empty for public repos only.")
            console.print("   Create one at https://github.com/settings/tokens (scope: repo)")
        config = store.load_or_init()
        if first_run:
            console.print(f"[green]✅ Configuration saved to {escape(str(store.path))}[/green]", highlight=False)
            console.print()

        result = session.run(config, keyword.strip(), prompter, console=console, destination=dest)
    except NoMatchesError as e:
        _report_no_matches(e)
    except SmartCloneError as e:
        _fail(e.message)
    except (EOFError, KeyboardInterrupt):
        console.print()
        _fail("Aborted")
    else:
        if result.outcome is not None:
            # A child process cannot move its parent shell
            console.print()
            console.print(
                f"[dim]Run: cd {escape(shlex.quote(result.outcome.path))}[/dim]",
                highlight=False,
            )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
