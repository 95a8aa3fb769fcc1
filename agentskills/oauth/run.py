"""CLI: print a fresh ES256 OAuth private key as an .env.local line."""

import argparse
import json
import sys
from pathlib import Path

from agentskills.config import ConfigError, load_config
from agentskills.logging import SkillsLogging
from agentskills.oauth.keygen import env_line, generate_private_jwk, public_jwk


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="generate-oauth-key",
        description="Generate an ES256 (P-256) private key in JWK format for ATProto OAuth",
    )
    parser.add_argument("--kid", default=None, help="Key id (default: key-1)")
    parser.add_argument(
        "--public",
        action="store_true",
        help="Also print the public JWKS document served to OAuth clients",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: $AGENTSKILLS_CONFIG, else env only)",
    )
    return parser.parse_args(argv)


def render(jwk: dict, var: str, include_public: bool = False) -> str:
    """Text block printed to stdout."""
    lines = [
        "",
        "=== ES256 OAuth Private Key (JWK) ===",
        "",
        "Add this line to your .env.local:",
        "",
        env_line(jwk, var=var),
        "",
        "IMPORTANT: Never commit this key to version control.",
        'NOTE: The JWKS endpoint will add key_ops: ["verify"] to the public key.',
        "",
    ]
    if include_public:
        lines += [
            "=== Public JWKS ===",
            "",
            json.dumps({"keys": [public_jwk(jwk)]}, indent=2),
            "",
        ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Entry point for generate-oauth-key."""
    try:
        args = parse_args(argv)
    except SystemExit as e:
        return 0 if e.code in (0, None) else 1

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Failed to generate key: {e}", file=sys.stderr)
        return 1
    skills_logging = SkillsLogging(config.logging)
    skills_logging.setup()
    log = skills_logging.get_logger("agentskills.oauth.run")

    try:
        jwk = generate_private_jwk(kid=args.kid or config.oauth.kid)
    except (ValueError, TypeError) as e:
        log.error("Failed to generate key: %s", e)
        return 1

    print(render(jwk, var=config.oauth.env_var, include_public=args.public))
    return 0


if __name__ == "__main__":
    sys.exit(main())
