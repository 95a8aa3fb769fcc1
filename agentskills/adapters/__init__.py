"""Git platform adapters."""

from agentskills.adapters.base import GitPlatformAdapter, GitPlatformError
from agentskills.adapters.github import GitHubAdapter

__all__ = ["GitHubAdapter", "GitPlatformAdapter", "GitPlatformError"]
