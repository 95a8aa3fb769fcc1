"""Select open bot review comments: author filter and resolved-thread subtraction."""

from typing import Any, Dict, Iterable, List, Set

from agentskills.models import ReviewComment, ReviewThread

DEFAULT_BOT_LOGIN = "coderabbitai[bot]"


def filter_by_author(comments: Iterable[ReviewComment], login: str = DEFAULT_BOT_LOGIN) -> List[ReviewComment]:
    """Keep comments written by ``login``, in their original order."""
    return [c for c in comments if c.user_login == login]


def collect_resolved_ids(threads: Iterable[ReviewThread]) -> Set[int]:
    """Database ids of every comment that sits in a resolved thread."""
    resolved: Set[int] = set()
    for thread in threads:
        if thread.is_resolved:
            resolved.update(thread.comment_ids)
    return resolved


def drop_resolved(comments: Iterable[ReviewComment], resolved_ids: Set[int]) -> List[ReviewComment]:
    return [c for c in comments if c.id not in resolved_ids]


def to_output(comments: Iterable[ReviewComment]) -> List[Dict[str, Any]]:
    return [c.to_output() for c in comments]
