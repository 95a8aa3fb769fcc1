"""CLI: print open CodeRabbit inline review comments of a PR as a JSON array.

Usage: fetch-review-comments [--pr <number>] [--repo owner/name] [--author login]

Exit codes: 0 on success (including an empty result, printed as []),
1 on bad arguments, missing gh/auth, unresolvable PR, or API error.
Diagnostics go to stderr; only the JSON array goes to stdout.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from agentskills.adapters import GitHubAdapter, GitPlatformError
from agentskills.config import AppConfig, ConfigError, load_config
from agentskills.logging import SkillsLogging
from agentskills.review.fetch import fetch_open_review_comments
from agentskills.services import GhCliError, auth_token, current_pr_number, current_repository, ensure_gh_installed

LOGGER_NAME = "agentskills.review.run"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the review comment fetcher."""
    parser = argparse.ArgumentParser(
        prog="fetch-review-comments",
        description="Fetch open (unresolved) CodeRabbit inline review comments from a GitHub PR",
    )
    parser.add_argument("--pr", type=int, default=None, help="PR number (default: PR of the current branch)")
    parser.add_argument("--repo", default=None, help="Repository owner/name (default: detected via gh)")
    parser.add_argument("--author", default=None, help="Comment author login (default: coderabbitai[bot])")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: $AGENTSKILLS_CONFIG, else env only)",
    )
    return parser.parse_args(argv)


def resolve_token(config: AppConfig, log: logging.Logger) -> str:
    """Token from config/env, else from the gh session."""
    token = config.github_token_resolved
    if token:
        return token
    ensure_gh_installed()
    log.debug("No GITHUB_TOKEN configured, using gh auth token")
    return auth_token(log=log)


def run(args: argparse.Namespace, config: AppConfig, log: logging.Logger) -> list[dict]:
    token = resolve_token(config, log)

    pr_number = args.pr
    if pr_number is None:
        log.info("Auto-detecting PR number from current branch...")
        pr_number = current_pr_number(log=log)
    log.info("Using PR #%s", pr_number)

    repo = args.repo or config.github.repository
    if not repo:
        repo = current_repository(log=log)
    log.info("Repository: %s", repo)

    adapter = GitHubAdapter(
        token=token,
        api_url=config.github.api_url,
        page_size=config.review.page_size,
        timeout=config.github.timeout,
    )
    return fetch_open_review_comments(
        adapter,
        repo,
        pr_number,
        bot_login=args.author or config.review.bot_login,
        log=logging.getLogger("agentskills.review.fetch"),
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for fetch-review-comments."""
    try:
        args = parse_args(argv)
    except SystemExit as e:
        # argparse exits 2 on usage errors; this tool reports them as 1
        return 0 if e.code in (0, None) else 1

    try:
        config = load_config(args.config)
    except ConfigError as e:
        # Logging is configured from config, so report directly
        print(f"Error: {e}", file=sys.stderr)
        return 1
    skills_logging = SkillsLogging(config.logging)
    skills_logging.setup()
    log = skills_logging.get_logger(LOGGER_NAME)

    try:
        comments = run(args, config, log)
    except (ConfigError, GhCliError, GitPlatformError) as e:
        log.error("Error: %s", e)
        return 1
    except KeyboardInterrupt:
        return 1

    print(json.dumps(comments, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
