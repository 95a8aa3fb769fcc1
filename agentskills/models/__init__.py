"""Data models for review comments and review threads (Pydantic)."""

from agentskills.models.review_comment import ReviewComment, review_comment_from_api
from agentskills.models.review_thread import ReviewThread, ReviewThreadsPage

__all__ = ["ReviewComment", "ReviewThread", "ReviewThreadsPage", "review_comment_from_api"]
