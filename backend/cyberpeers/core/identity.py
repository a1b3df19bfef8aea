"""
Identity verification.

Route protection only depends on the ``IdentityVerifier`` protocol, so the
identity provider can be swapped through configuration.
"""
import logging
from functools import lru_cache
from typing import Any, Optional, Protocol

import firebase_admin
from fastapi.concurrency import run_in_threadpool
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from pydantic import BaseModel, Field

from cyberpeers.config import get_settings
from cyberpeers.core.security import JWTError, decode_identity_token

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = "cyberpeers"


class InvalidTokenError(Exception):
    """Raised when a bearer credential is invalid, expired or revoked."""


class IdentityClaims(BaseModel):
    """Decoded, verified identity of the requester."""
    uid: Optional[str] = Field(None, description="Subject identifier")
    email: Optional[str] = Field(None, description="Verified email claim")
    claims: dict[str, Any] = Field(default_factory=dict, description="All decoded claims")

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "IdentityClaims":
        return cls(
            uid=claims.get("uid") or claims.get("sub"),
            email=claims.get("email"),
            claims=claims,
        )


class IdentityVerifier(Protocol):
    async def verify(self, token: str) -> IdentityClaims:
        ...


class FirebaseIdentityVerifier:
    """Verifies Firebase ID tokens with the Firebase Admin SDK."""

    def __init__(self, service_account: dict[str, Any], app_name: str = FIREBASE_APP_NAME):
        try:
            self.app = firebase_admin.get_app(app_name)
        except ValueError:
            self.app = firebase_admin.initialize_app(
                credentials.Certificate(service_account),
                name=app_name,
            )

    async def verify(self, token: str) -> IdentityClaims:
        # verify_id_token may fetch signing certificates over the network
        try:
            claims = await run_in_threadpool(
                firebase_auth.verify_id_token, token, app=self.app
            )
        except (
            firebase_auth.InvalidIdTokenError,
            firebase_auth.CertificateFetchError,
            ValueError,
        ) as e:
            logger.info("Firebase token rejected: %s", e)
            raise InvalidTokenError(str(e)) from e
        return IdentityClaims.from_claims(claims)


class JWTIdentityVerifier:
    """Verifies shared-secret JWTs minted by ``create_identity_token``."""

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    async def verify(self, token: str) -> IdentityClaims:
        try:
            claims = decode_identity_token(token, self.secret_key, self.algorithm)
        except JWTError as e:
            logger.info("JWT rejected: %s", e)
            raise InvalidTokenError(str(e)) from e
        return IdentityClaims.from_claims(claims)


@lru_cache
def get_identity_verifier() -> IdentityVerifier:
    """Build the configured identity verifier (cached)."""
    settings = get_settings()
    if settings.identity_provider == "jwt":
        return JWTIdentityVerifier(settings.jwt_secret_key, settings.jwt_algorithm)
    return FirebaseIdentityVerifier(settings.service_account_info())
