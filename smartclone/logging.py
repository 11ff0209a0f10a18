"""
SmartClone logging utilities.

Provides configurable logging for HTTP requests/responses and git operations.
Ensures no access token is ever written to a log record.
"""

import logging
import re
from typing import Any

# Create package-specific loggers
_root_logger = logging.getLogger("smartclone")
_http_logger = logging.getLogger("smartclone.http")
_git_logger = logging.getLogger("smartclone.git")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Classic and fine-grained GitHub personal access tokens
    (re.compile(r"\bgh[pousr]_[A-Za-z0-9]{20,}\b"), "[TOKEN_REDACTED]"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}\b"), "[TOKEN_REDACTED]"),
    # Authorization header values
    (re.compile(r"(Authorization['\"]?\s*[:=]\s*['\"]?)(token|bearer|basic)\s+[^\s'\"]+", re.IGNORECASE), r"\1\2 [REDACTED]"),
    # Credentials embedded in URLs
    (re.compile(r"(https?://)[^/\s:@]+:[^/\s@]+@"), r"\1[REDACTED]@"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password)(['\"]?\s*[:=]\s*)['\"][^'\"]+['\"]", re.IGNORECASE), r"\1\2'[REDACTED]'"),
]

_DEFAULT_SENSITIVE_KEYS = {"token", "authorization", "password", "secret"}


def configure_logging(
    level: int = logging.WARNING,
    http_level: int | None = None,
    git_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure SmartClone logging.

    Args:
        level: Default log level for all package loggers (default: WARNING)
        http_level: Log level for GitHub API request/response logging (default: same as level)
        git_level: Log level for git subprocess logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from smartclone.logging import configure_logging

        # Show every API call while keeping git quiet
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    # Replace rather than stack handlers when called more than once
    for existing in list(_root_logger.handlers):
        _root_logger.removeHandler(existing)

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _git_logger.setLevel(git_level if git_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a SmartClone logger.

    Args:
        name: Logger name suffix (e.g., "http", "git"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"smartclone.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces access tokens, Authorization header values and URL-embedded
    credentials with redacted placeholders.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: token, authorization, password, secret)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]" if value else value
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        headers: Request headers (optional)
        params: Query parameters (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if params:
        log_parts.append(f"params={safe_log_dict(params)}")

    if headers:
        log_parts.append(f"headers={safe_log_dict(dict(headers))}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    items: int | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        items: Number of entries in a list payload (optional)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_sensitive_data(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if items is not None:
        log_parts.append(f"items={items}")

    _http_logger.debug(" | ".join(log_parts))


def log_git_command(args: list[str], cwd: str | None = None) -> None:
    """
    Log a git invocation at DEBUG level.

    Args:
        args: Full argument vector, starting with "git"
        cwd: Working directory of the subprocess (optional)
    """
    if not _git_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [mask_sensitive_data(" ".join(args))]

    if cwd:
        log_parts.append(f"cwd={cwd}")

    _git_logger.debug(" | ".join(log_parts))


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_git_command",
]
