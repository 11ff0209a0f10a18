"""Static keyword hints offered by shell completion.

The vocabulary is fixed; it is not derived from the live repository index.
"""

KEYWORD_HINTS: tuple[str, ...] = (
    # purpose tags
    "email", "html", "csv", "wordpress", "woocommerce", "automation",
    "generate", "import", "install", "migration", "backup", "clone",
    "useful", "commands", "agent", "streamlit",
    "api", "web", "app", "bot", "tool", "script", "config", "setup",
    "test", "demo", "example", "template", "starter", "boilerplate",
    "admin", "dashboard", "frontend", "backend", "database", "auth",
    "docker", "kubernetes", "aws", "deploy", "ci", "cd", "monitor",
    # languages
    "python", "nodejs", "go",
)


def complete_keyword(incomplete: str) -> list[str]:
    """Hints starting with the partially typed word."""
    return [hint for hint in KEYWORD_HINTS if hint.startswith(incomplete)]


__all__ = ["KEYWORD_HINTS", "complete_keyword"]
