"""
Authentication dependencies for FastAPI routes.

Only bearer tokens in the Authorization header are accepted.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..schemas import TokenClaims
from .jwt import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims:
    """
    Resolve the caller's identity from a bearer token.

    Steps:
    1) Require an ``Authorization: Bearer`` header.
    2) Verify signature and expiry.
    3) Require a subject claim.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")

    try:
        payload = decode_access_token(credentials.credentials)
    except ValueError:
        raise _unauthorized("Invalid authentication credentials") from None

    subject = payload.get("sub")
    if not subject:
        raise _unauthorized("Invalid authentication credentials")

    return TokenClaims(sub=str(subject), username=payload.get("username"))
