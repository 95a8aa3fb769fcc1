"""
Fetch open (unresolved) bot review comments for a pull request.

1. List all inline review comments via REST (every page).
2. Keep the ones written by the review bot; stop early with [] if none.
3. Walk every page of review threads via GraphQL and collect the ids of
   comments in resolved threads.
4. Drop those comments and return JSON-ready dicts without internal fields.
"""

import logging
from typing import Any, Dict, List

from agentskills.adapters.base import GitPlatformAdapter
from agentskills.review.filter import (
    DEFAULT_BOT_LOGIN,
    collect_resolved_ids,
    drop_resolved,
    filter_by_author,
    to_output,
)


def fetch_open_review_comments(
    adapter: GitPlatformAdapter,
    repo: str,
    pr_number: int,
    bot_login: str = DEFAULT_BOT_LOGIN,
    log: logging.Logger | None = None,
) -> List[Dict[str, Any]]:
    """Return unresolved review comments by ``bot_login`` on the PR."""
    logger = log or logging.getLogger("agentskills.review.fetch")

    logger.info("Fetching inline review comments...")
    all_comments = adapter.list_pr_review_comments(repo, pr_number)

    logger.info("Filtering to %s comments...", bot_login)
    bot_comments = filter_by_author(all_comments, bot_login)
    logger.info("Found %s %s comment(s) total.", len(bot_comments), bot_login)
    if not bot_comments:
        return []

    logger.info("Checking thread resolution status via GraphQL...")
    resolved_ids = collect_resolved_ids(adapter.iter_review_threads(repo, pr_number))
    logger.info("Found %s comment(s) in resolved threads.", len(resolved_ids))

    open_comments = drop_resolved(bot_comments, resolved_ids)
    logger.info("Outputting %s open %s comment(s).", len(open_comments), bot_login)
    return to_output(open_comments)
