"""Line-level or file-level comment on a pull request review."""

from datetime import datetime
from typing import Any, Dict, Literal

from pydantic import BaseModel

# Used for filtering only; never part of the printed payload
INTERNAL_FIELDS = {"user_login", "node_id"}


class ReviewComment(BaseModel):
    """Inline review comment as returned by the REST API.

    Field order is the order of keys in the printed JSON.
    """

    path: str
    line: int | None
    side: Literal["RIGHT", "LEFT"] = "RIGHT"
    body: str
    url: str
    id: int
    in_reply_to_id: int | None = None
    created_at: datetime
    updated_at: datetime
    user_login: str = ""
    node_id: str = ""

    def to_output(self) -> Dict[str, Any]:
        """JSON-ready dict without the internal fields."""
        return self.model_dump(mode="json", exclude=INTERNAL_FIELDS)


def review_comment_from_api(data: Dict[str, Any]) -> ReviewComment:
    """Build a ReviewComment from a REST pulls/{n}/comments item.

    ``line`` falls back to ``original_line`` for outdated comments and
    ``side`` defaults to RIGHT when the API reports none.
    """
    user = data.get("user") or {}
    line = data.get("line")
    if line is None:
        line = data.get("original_line")
    return ReviewComment(
        path=data.get("path") or "",
        line=line,
        side=data.get("side") or "RIGHT",
        body=data.get("body") or "",
        url=data.get("html_url") or "",
        id=data["id"],
        in_reply_to_id=data.get("in_reply_to_id"),
        created_at=data["created_at"],
        updated_at=data.get("updated_at") or data["created_at"],
        user_login=user.get("login", ""),
        node_id=data.get("node_id") or "",
    )
