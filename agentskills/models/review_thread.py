"""Review thread resolution state from the GraphQL API."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ReviewThread(BaseModel):
    """One pull request review thread and the database ids of its comments."""

    is_resolved: bool
    comment_ids: List[int] = Field(default_factory=list)


class ReviewThreadsPage(BaseModel):
    """One page of reviewThreads with its cursor info."""

    threads: List[ReviewThread] = Field(default_factory=list)
    has_next_page: bool = False
    end_cursor: str | None = None


def _thread_from_node(node: Dict[str, Any]) -> ReviewThread:
    comments = (node.get("comments") or {}).get("nodes") or []
    return ReviewThread(
        is_resolved=bool(node.get("isResolved")),
        comment_ids=[c["databaseId"] for c in comments if c and c.get("databaseId") is not None],
    )


def threads_page_from_api(review_threads: Dict[str, Any]) -> ReviewThreadsPage:
    """Build a page from the ``reviewThreads`` object of a GraphQL response."""
    page_info = review_threads.get("pageInfo") or {}
    return ReviewThreadsPage(
        threads=[_thread_from_node(n) for n in (review_threads.get("nodes") or []) if n],
        has_next_page=bool(page_info.get("hasNextPage")),
        end_cursor=page_info.get("endCursor"),
    )
