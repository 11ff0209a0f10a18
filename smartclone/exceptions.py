"""SmartClone exception classes."""


class SmartCloneError(Exception):
    """Base exception for all SmartClone errors."""

    code = "SMARTCLONE_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(f"[{self.code}] {message}")


class ConfigMissingError(SmartCloneError):
    """Raised when the credential file is absent and cannot be created."""

    code = "CONFIG_MISSING"


class AuthenticationError(SmartCloneError):
    """Raised when GitHub rejects the stored access token."""

    code = "AUTH_FAILURE"


class AccountNotFoundError(SmartCloneError):
    """Raised when the configured account does not exist."""

    code = "ACCOUNT_NOT_FOUND"

    def __init__(self, username: str, message: str | None = None) -> None:
        self.username = username
        super().__init__(message or f"User '{username}' not found on GitHub")


class NetworkError(SmartCloneError):
    """Raised when the index fetch fails or returns no usable body."""

    code = "NETWORK_FAILURE"


class NoMatchesError(SmartCloneError):
    """Raised when neither matching tier finds a repository."""

    code = "NO_MATCHES"

    def __init__(self, keyword: str, available: list[str] | None = None) -> None:
        self.keyword = keyword
        self.available = list(available or [])
        super().__init__(f"No repositories found matching '{keyword}'")


class InvalidSelectionError(SmartCloneError):
    """Raised when an ambiguous-match choice is not a valid index."""

    code = "INVALID_SELECTION"

    def __init__(self, answer: str, size: int) -> None:
        self.answer = answer
        self.size = size
        super().__init__(f"Invalid selection '{answer}' (expected 1-{size})")


class DirectoryExistsError(SmartCloneError):
    """Raised when the clone target exists and the user declines to enter it."""

    code = "DIRECTORY_EXISTS"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' already exists")


class CloneError(SmartCloneError):
    """Raised when ``git clone`` fails."""

    code = "CLONE_FAILURE"

    def __init__(self, message: str, stderr: str | None = None) -> None:
        self.stderr = stderr
        super().__init__(message)
