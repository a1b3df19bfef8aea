"""
Core module - identity verification, errors and time helpers.
"""
from cyberpeers.core.exceptions import (
    APIError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from cyberpeers.core.identity import (
    IdentityClaims,
    IdentityVerifier,
    InvalidTokenError,
    get_identity_verifier,
)
from cyberpeers.core.timeutils import days_since, utc_now_iso

__all__ = [
    "APIError",
    "BadRequestError",
    "ForbiddenError",
    "NotFoundError",
    "UnauthorizedError",
    "IdentityClaims",
    "IdentityVerifier",
    "InvalidTokenError",
    "get_identity_verifier",
    "days_since",
    "utc_now_iso",
]
