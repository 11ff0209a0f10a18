"""
Credential store for SmartClone.

Owns the JSON file holding the GitHub identity, clone defaults,
favorites, recent list and filter preferences. The file is created on
first use from interactive answers and is only ever rewritten by an
explicit reconfigure.
"""

import json
import os
from pathlib import Path

from smartclone.exceptions import ConfigMissingError
from smartclone.logging import get_logger
from smartclone.prompter import Prompter
from smartclone.types.config import Config, Credentials

logger = get_logger("config")

CONFIG_ENV_VAR = "SMARTCLONE_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.github_clone_config.json")
CONFIG_FILE_MODE = 0o600

USERNAME_QUESTION = "Enter your GitHub username:"
TOKEN_QUESTION = "Enter GitHub token (optional, leave empty for public repos only):"
KEEP_USERNAME_QUESTION = "Keep current username '{username}'? (Y/n):"


def default_config_path() -> Path:
    """Resolve the config location from SMARTCLONE_CONFIG or the home directory."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


class CredentialStore:
    """
    Load, bootstrap and persist the SmartClone configuration file.

    Example:
        ```python
        from smartclone.config import CredentialStore
        from smartclone.prompter import ConsolePrompter

        store = CredentialStore(prompter=ConsolePrompter())
        config = store.load_or_init()
        print(config.github.username)
        ```
    """

    def __init__(self, prompter: Prompter, path: str | Path | None = None) -> None:
        """
        Initialize the store.

        Args:
            prompter: Used for first-run and reconfigure questions
            path: Config file location (default: SMARTCLONE_CONFIG or ~/.github_clone_config.json)
        """
        self.prompter = prompter
        self.path = Path(path).expanduser() if path is not None else default_config_path()

    def exists(self) -> bool:
        return self.path.is_file()

    def load_or_init(self, allow_init: bool = True) -> Config:
        """
        Return the stored configuration, creating it interactively if absent.

        Args:
            allow_init: When False an absent file is an error instead of a prompt

        Returns:
            The parsed configuration

        Raises:
            ConfigMissingError: If the file is absent and initialization is
                not allowed, or the user gives no username
        """
        if self.exists():
            return self.load()

        if not allow_init:
            raise ConfigMissingError(
                f"Configuration not found at {self.path}. Run 'smartclone --reconfigure' first."
            )

        logger.info("No configuration at %s, starting first-run setup", self.path)
        username = self._ask_username()
        token = self.prompter.ask(TOKEN_QUESTION, secret=True).strip()

        config = Config(github=Credentials(username=username, token=token))
        self.save(config)
        return config

    def load(self) -> Config:
        """
        Read and parse the configuration file without modifying it.

        Raises:
            ConfigMissingError: If the file is absent, unreadable, or has no username
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigMissingError(f"Configuration not found at {self.path}") from e
        except OSError as e:
            raise ConfigMissingError(f"Cannot read configuration at {self.path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigMissingError(f"Configuration at {self.path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigMissingError(f"Configuration at {self.path} must be a JSON object")

        try:
            config = Config.from_dict(data)
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigMissingError(f"Configuration at {self.path} is malformed: {e}") from e

        if not config.github.username:
            raise ConfigMissingError(
                "GitHub username not found in config. Run 'smartclone --reconfigure'."
            )

        logger.debug(
            "Loaded configuration for %s (authenticated=%s)",
            config.github.username,
            config.github.is_authenticated,
        )
        return config

    def save(self, config: Config) -> None:
        """
        Persist a configuration with owner-only permissions.

        Args:
            config: Configuration to write; all five sections are always emitted
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(config.to_dict(), indent=2) + "\n"

        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, CONFIG_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
        # O_CREAT's mode is ignored for an existing file and filtered by umask
        os.chmod(self.path, CONFIG_FILE_MODE)

        logger.info("Configuration saved to %s", self.path)

    def reconfigure(self, current: Config | None = None) -> Config:
        """
        Ask for credentials again and persist them.

        Clone defaults, favorites, recent entries and filters of the current
        configuration are carried over unchanged.
        A stored file that cannot be loaded is replaced.

        Args:
            current: Configuration to update (default: the stored one, if any)

        Returns:
            The new configuration
        """
        if current is None and self.exists():
            try:
                current = self.load()
            except ConfigMissingError as e:
                # A broken file is replaced rather than repaired
                logger.warning("Ignoring unusable configuration: %s", e.message)

        username = ""
        if current is not None and current.github.username:
            answer = self.prompter.ask(
                KEEP_USERNAME_QUESTION.format(username=current.github.username)
            ).strip().lower()
            if answer not in ("n", "no"):
                username = current.github.username

        if not username:
            username = self._ask_username()

        token = self.prompter.ask(TOKEN_QUESTION, secret=True).strip()
        credentials = Credentials(username=username, token=token)

        if current is None:
            config = Config(github=credentials)
        else:
            config = Config(
                github=credentials,
                clone=current.clone,
                favorites=current.favorites,
                recent=current.recent,
                filters=current.filters,
            )

        self.save(config)
        return config

    def _ask_username(self) -> str:
        username = self.prompter.ask(USERNAME_QUESTION).strip()
        if not username:
            raise ConfigMissingError("A GitHub username is required")
        return username


__all__ = [
    "CredentialStore",
    "default_config_path",
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_MODE",
]
