"""
Request signing for the Upbit exchange (private) API.

Every private request carries a fresh HS256 JWT::

    Authorization: Bearer <jwt({"access_key": ..., "nonce": <uuid4>})>

Tokens and nonces are never cached; each call builds new ones.
"""

import uuid
from dataclasses import asdict

import jwt

from src.core.models import AuthClaims
from src.exchanges.errors import ConfigurationError

_SIGNING_ALGORITHM = "HS256"


def build_claims(access_key: str) -> AuthClaims:
    """Compose the claim set for one request with a newly generated nonce."""
    return AuthClaims(access_key=access_key, nonce=str(uuid.uuid4()))


def sign_claims(claims: AuthClaims, secret_key: str) -> str:
    """Sign *claims* with *secret_key* and return the compact JWT string."""
    if not secret_key:
        raise ConfigurationError("UPBIT_SECRET_KEY is not configured")
    return jwt.encode(asdict(claims), secret_key, algorithm=_SIGNING_ALGORITHM)


def build_auth_headers(access_key: str, secret_key: str) -> dict[str, str]:
    """
    Build the headers for a private request.

    Raises
    ------
    ConfigurationError
        If either credential is missing. Nothing is sent in that case.
    """
    if not access_key or not secret_key:
        raise ConfigurationError(
            "API keys are not configured. Set UPBIT_ACCESS_KEY and UPBIT_SECRET_KEY."
        )

    token = sign_claims(build_claims(access_key), secret_key)
    return {
        "Authorization": f"Bearer {token}",
        "Accept": "application/json",
    }
