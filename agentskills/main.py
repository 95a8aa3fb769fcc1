"""agentskills entry point.

Two tools: review-comments (open CodeRabbit comments of a PR as JSON) and
oauth-key (ES256 JWK for ATProto OAuth). Usage:
agentskills review-comments [--pr N] | agentskills oauth-key [--public].
"""

import sys

USAGE = "usage: agentskills {review-comments,oauth-key} [options]"


def main(argv: list[str] | None = None) -> int:
    """Entry point: dispatch to the tool named by the first argument."""
    argv = argv if argv is not None else sys.argv[1:]
    if not argv or argv[0] in ("-h", "--help"):
        print(USAGE, file=sys.stderr)
        return 0 if argv else 1

    sub, rest = argv[0], argv[1:]
    if sub == "review-comments":
        from agentskills.review.run import main as review_main

        return review_main(rest)
    if sub == "oauth-key":
        from agentskills.oauth.run import main as oauth_main

        return oauth_main(rest)

    print(f"Unknown command: {sub}", file=sys.stderr)
    print(USAGE, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
