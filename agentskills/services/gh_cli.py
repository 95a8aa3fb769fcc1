"""Run gh CLI commands: stored token, current branch PR, current repo.

The API calls themselves go through the GitHub adapter; gh is only used for
the local context it knows about (auth session and the checked-out branch).
"""

import logging
import shutil
import subprocess
from pathlib import Path

INSTALL_HINT = "Install it from https://cli.github.com/"


class GhCliError(Exception):
    """Raised when a gh command fails or gh is unavailable."""

    pass


class GhNotInstalledError(GhCliError):
    """Raised when the gh executable cannot be found."""

    pass


def ensure_gh_installed() -> None:
    """Raise GhNotInstalledError if gh is not on PATH."""
    if shutil.which("gh") is None:
        raise GhNotInstalledError(f"gh CLI is not installed. {INSTALL_HINT}")


def _run_gh(args: list[str], cwd: Path | None = None, log: logging.Logger | None = None) -> str:
    """Run gh command and return stripped stdout; raise GhCliError on non-zero exit."""
    cmd = ["gh"] + args
    try:
        result = subprocess.run(cmd, cwd=cwd, check=True, capture_output=True, text=True, timeout=60)
    except subprocess.CalledProcessError as e:
        err = (e.stderr or e.stdout or "").strip()
        if log:
            log.debug("gh %s failed: %s", args, err)
        raise GhCliError(f"gh {' '.join(args)}: {err}") from e
    except subprocess.TimeoutExpired as e:
        raise GhCliError(f"gh {' '.join(args)}: timed out") from e
    except FileNotFoundError as e:
        raise GhNotInstalledError(f"gh CLI is not installed. {INSTALL_HINT}") from e
    return (result.stdout or "").strip()


def auth_token(log: logging.Logger | None = None) -> str:
    """Token of the authenticated gh session."""
    try:
        token = _run_gh(["auth", "token"], log=log)
    except GhNotInstalledError:
        raise
    except GhCliError as e:
        raise GhCliError("gh CLI is not authenticated. Run: gh auth login") from e
    if not token:
        raise GhCliError("gh CLI is not authenticated. Run: gh auth login")
    return token


def current_pr_number(cwd: Path | None = None, log: logging.Logger | None = None) -> int:
    """Number of the open PR for the current branch."""
    try:
        out = _run_gh(["pr", "view", "--json", "number", "-q", ".number"], cwd=cwd, log=log)
    except GhNotInstalledError:
        raise
    except GhCliError as e:
        raise GhCliError(
            "No open PR found for the current branch. "
            "Either push your branch and open a PR, or pass --pr <number>."
        ) from e
    if not out.isdigit():
        raise GhCliError("Could not determine PR number for the current branch.")
    return int(out)


def current_repository(cwd: Path | None = None, log: logging.Logger | None = None) -> str:
    """owner/name of the repository in the current directory."""
    out = _run_gh(["repo", "view", "--json", "nameWithOwner", "-q", ".nameWithOwner"], cwd=cwd, log=log)
    if not out:
        raise GhCliError("Could not determine repository for the current directory.")
    return out
