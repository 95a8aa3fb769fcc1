"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import Iterator, List

from agentskills.models import ReviewComment, ReviewThread


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Read-only view of pull request review data on a Git hosting platform."""

    @abstractmethod
    def list_pr_review_comments(self, repo: str, pr_number: int) -> List[ReviewComment]:
        """Fetch all inline review comments on a PR (all pages)."""
        ...

    @abstractmethod
    def iter_review_threads(self, repo: str, pr_number: int) -> Iterator[ReviewThread]:
        """Yield every review thread on a PR with its resolution state."""
        ...
