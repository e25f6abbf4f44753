"""
Identity extraction for FastAPI endpoints.
"""

import logging
from uuid import UUID

from fastapi import Depends
from pydantic import BaseModel, ConfigDict

from app.auth.jwt_handler import verify_jwt_token

logger = logging.getLogger(__name__)


class IdentityClaimError(ValueError):
    """Raised when a verified token carries no usable subject claim."""


class AuthenticatedIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject_id: UUID


def identity_from_claims(claims: dict) -> AuthenticatedIdentity:
    """
    Build the caller identity from the `sub` claim.

    Raises IdentityClaimError when the claim is absent or is not a UUID.
    The error is intentionally not mapped to an HTTP response.
    """
    subject = claims.get("sub")
    if not subject:
        raise IdentityClaimError("User id not found in JWT token")
    try:
        return AuthenticatedIdentity(subject_id=UUID(str(subject)))
    except ValueError as e:
        raise IdentityClaimError(f"Malformed user id in JWT token: {subject}") from e


def get_current_user(claims: dict = Depends(verify_jwt_token)) -> AuthenticatedIdentity:
    """
    Dependency resolving the authenticated caller.

    Example:
        @router.get("/")
        def read_mine(current_user: AuthenticatedIdentity = Depends(get_current_user)):
            return {"id": current_user.subject_id}
    """
    identity = identity_from_claims(claims)
    logger.debug(f"Authenticated user {identity.subject_id}")
    return identity
