"""ES256 JWK generation for ATProto OAuth."""

from agentskills.oauth.keygen import env_line, generate_private_jwk, public_jwk

__all__ = ["env_line", "generate_private_jwk", "public_jwk"]
