"""External tool collaborators (gh CLI)."""

from agentskills.services.gh_cli import (
    GhCliError,
    GhNotInstalledError,
    auth_token,
    current_pr_number,
    current_repository,
    ensure_gh_installed,
)

__all__ = [
    "GhCliError",
    "GhNotInstalledError",
    "auth_token",
    "current_pr_number",
    "current_repository",
    "ensure_gh_installed",
]
