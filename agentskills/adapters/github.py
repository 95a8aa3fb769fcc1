"""GitHub API adapter (REST for comments, GraphQL for thread resolution)."""

import logging
from typing import Any, Dict, Iterator, List

import requests
from pydantic import ValidationError

from agentskills.adapters.base import GitPlatformAdapter, GitPlatformError
from agentskills.models import ReviewComment, ReviewThread, ReviewThreadsPage, review_comment_from_api
from agentskills.models.review_thread import threads_page_from_api

REVIEW_THREADS_QUERY = """
query($owner: String!, $repo: String!, $pr: Int!, $first: Int!, $after: String) {
  repository(owner: $owner, name: $repo) {
    pullRequest(number: $pr) {
      reviewThreads(first: $first, after: $after) {
        pageInfo { hasNextPage endCursor }
        nodes {
          isResolved
          comments(first: 100) {
            nodes { databaseId }
          }
        }
      }
    }
  }
}
"""


def _split_repo(repo: str) -> tuple[str, str]:
    owner, sep, name = repo.partition("/")
    if not sep or not owner or not name:
        raise GitPlatformError(f"Invalid repository name: {repo!r} (expected owner/name)")
    return owner, name


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation."""

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com",
        page_size: int = 100,
        timeout: int = 30,
        log: logging.Logger | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._page_size = page_size
        self._timeout = timeout
        self._log = log or logging.getLogger("agentskills.adapters.github")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github+json"

    def _request(
        self,
        method: str,
        path_or_url: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        if path_or_url.startswith("http"):
            url = path_or_url
        elif path_or_url.startswith("/"):
            url = f"{self._api_url}{path_or_url}"
        else:
            url = f"{self._api_url}/{path_or_url}"
        self._log.debug("%s %s", method, url)
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=self._timeout)
        except requests.RequestException as e:
            raise GitPlatformError(f"Request to {url} failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except ValueError:
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def list_pr_review_comments(self, repo: str, pr_number: int) -> List[ReviewComment]:
        _split_repo(repo)
        url: str | None = f"/repos/{repo}/pulls/{pr_number}/comments"
        params: Dict[str, Any] | None = {"per_page": self._page_size}
        comments: List[ReviewComment] = []
        while url:
            resp = self._request("GET", url, params=params)
            data = resp.json() or []
            try:
                comments.extend(review_comment_from_api(d) for d in data)
            except (KeyError, TypeError, ValidationError) as e:
                raise GitPlatformError(f"Unexpected API payload: {e}") from e
            # The next link already carries the query string
            url = (resp.links or {}).get("next", {}).get("url")
            params = None
        return comments

    def graphql(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """Run a GraphQL query; raise GitPlatformError on HTTP or GraphQL errors."""
        resp = self._request("POST", "/graphql", json={"query": query, "variables": variables})
        payload = resp.json() or {}
        errors = payload.get("errors") or []
        if errors:
            messages = ". ".join(str(e.get("message", e)) for e in errors)
            raise GitPlatformError(f"GraphQL error: {messages}")
        return payload.get("data") or {}

    def list_review_threads_page(self, repo: str, pr_number: int, after: str | None = None) -> ReviewThreadsPage:
        owner, name = _split_repo(repo)
        data = self.graphql(
            REVIEW_THREADS_QUERY,
            {"owner": owner, "repo": name, "pr": pr_number, "first": self._page_size, "after": after},
        )
        repository = data.get("repository")
        if not repository:
            raise GitPlatformError(f"Not found: repository {repo}")
        pull_request = repository.get("pullRequest")
        if not pull_request:
            raise GitPlatformError(f"Not found: PR #{pr_number} in {repo}")
        try:
            return threads_page_from_api(pull_request.get("reviewThreads") or {})
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise GitPlatformError(f"Unexpected API payload: {e}") from e

    def iter_review_threads(self, repo: str, pr_number: int) -> Iterator[ReviewThread]:
        after: str | None = None
        page_no = 1
        while True:
            self._log.info("  Fetching review threads page %s...", page_no)
            page = self.list_review_threads_page(repo, pr_number, after=after)
            yield from page.threads
            if not page.has_next_page or not page.end_cursor:
                return
            after = page.end_cursor
            page_no += 1
