"""Generate an ES256 (P-256) private key in JWK format for ATProto OAuth."""

import base64
import json
from typing import Any, Dict

from cryptography.hazmat.primitives.asymmetric import ec

# P-256 coordinates and scalar are 32 bytes each
COORDINATE_SIZE = 32
PRIVATE_ONLY_MEMBERS = {"d"}


def _b64url_uint(value: int) -> str:
    """Unpadded base64url of a fixed-width big-endian integer (RFC 7518 6.2)."""
    raw = value.to_bytes(COORDINATE_SIZE, "big")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def private_key_to_jwk(key: ec.EllipticCurvePrivateKey, kid: str = "key-1") -> Dict[str, Any]:
    """Export a P-256 private key as a JWK with kid and alg.

    No key_ops on the private key; the JWKS endpoint adds ["verify"] to the
    public half it serves.
    """
    if not isinstance(key.curve, ec.SECP256R1):
        raise ValueError(f"Expected a P-256 key, got {key.curve.name}")
    numbers = key.private_numbers()
    public = numbers.public_numbers
    return {
        "kty": "EC",
        "crv": "P-256",
        "x": _b64url_uint(public.x),
        "y": _b64url_uint(public.y),
        "d": _b64url_uint(numbers.private_value),
        "kid": kid,
        "alg": "ES256",
    }


def generate_private_jwk(kid: str = "key-1") -> Dict[str, Any]:
    """Fresh ES256 private key as a JWK dict."""
    return private_key_to_jwk(ec.generate_private_key(ec.SECP256R1()), kid=kid)


def public_jwk(private_jwk: Dict[str, Any]) -> Dict[str, Any]:
    """Public half of a private JWK, as published on the JWKS endpoint."""
    jwk = {k: v for k, v in private_jwk.items() if k not in PRIVATE_ONLY_MEMBERS}
    jwk["key_ops"] = ["verify"]
    return jwk


def env_line(jwk: Dict[str, Any], var: str = "OAUTH_PRIVATE_KEY") -> str:
    """``VAR='<single-line json>'`` ready to paste into .env.local."""
    return f"{var}='{json.dumps(jwk, separators=(',', ':'))}'"
