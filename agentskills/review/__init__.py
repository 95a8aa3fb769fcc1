"""Review comment fetcher: open bot comments on a pull request."""

from agentskills.review.fetch import fetch_open_review_comments
from agentskills.review.filter import collect_resolved_ids, drop_resolved, filter_by_author, to_output

__all__ = [
    "collect_resolved_ids",
    "drop_resolved",
    "fetch_open_review_comments",
    "filter_by_author",
    "to_output",
]
