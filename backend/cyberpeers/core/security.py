"""
Shared-secret identity tokens (development, integration environments, tests).
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt

from cyberpeers.config import get_settings

DEFAULT_TOKEN_EXPIRE_MINUTES = 60


def create_identity_token(
    email: str,
    uid: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> str:
    """
    Create a signed identity token carrying an email claim.

    Args:
        email: Email address asserted by the token
        uid: Subject identifier, defaults to the email
        expires_delta: Optional custom expiration time
        secret_key: Signing key, defaults to JWT_SECRET_KEY
        algorithm: Signing algorithm, defaults to JWT_ALGORITHM

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()

    if expires_delta is None:
        expires_delta = timedelta(minutes=DEFAULT_TOKEN_EXPIRE_MINUTES)

    now = datetime.now(timezone.utc)
    payload = {
        "sub": uid or email,
        "email": email,
        "exp": now + expires_delta,
        "iat": now,
    }

    return jwt.encode(
        payload,
        secret_key or settings.jwt_secret_key,
        algorithm=algorithm or settings.jwt_algorithm,
    )


def decode_identity_token(token: str, secret_key: str, algorithm: str) -> dict[str, Any]:
    """
    Decode and validate an identity token.

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(token, secret_key, algorithms=[algorithm])


__all__ = ["JWTError", "create_identity_token", "decode_identity_token"]
