"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends, Header, Query, Request

from cyberpeers.core.exceptions import ForbiddenError, UnauthorizedError
from cyberpeers.core.identity import (
    IdentityClaims,
    IdentityVerifier,
    InvalidTokenError,
    get_identity_verifier,
)

BEARER_PREFIX = "Bearer "


async def verify_token(
    request: Request,
    verifier: Annotated[IdentityVerifier, Depends(get_identity_verifier)],
    authorization: Annotated[
        Optional[str], Header(description="Bearer identity token")
    ] = None,
) -> IdentityClaims:
    """
    Dependency that verifies the ``Authorization: Bearer <token>`` header.

    The decoded identity is also stored on ``request.state.identity``.

    Raises:
        UnauthorizedError 401: If the header is missing or malformed
        ForbiddenError 403: If the token is rejected by the identity provider
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("Unauthorized access")

    token = authorization.split(" ")[1]

    try:
        identity = await verifier.verify(token)
    except InvalidTokenError:
        raise ForbiddenError("Forbidden")

    request.state.identity = identity
    return identity


async def verify_email(
    identity: Annotated[IdentityClaims, Depends(verify_token)],
    email: Annotated[Optional[str], Query(description="Requester email")] = None,
) -> IdentityClaims:
    """
    Dependency that requires the ``email`` query parameter to equal the
    verified email claim.

    Raises:
        ForbiddenError 403: On mismatch or missing email
    """
    if identity is None or email is None or identity.email != email:
        raise ForbiddenError("Forbidden access")
    return identity


# Type alias for cleaner route signatures
VerifiedIdentity = Annotated[IdentityClaims, Depends(verify_email)]
