"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pokedex.core.errors import InvalidToken, Unauthenticated
from pokedex.core.security import decode_token
from pokedex.dependencies.database import require_database

bearer_scheme = HTTPBearer(auto_error=False, description="JWT from /auth/login or /auth/register")


async def get_current_user_id(
    _: Annotated[None, Depends(require_database)],
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> str:
    """
    Dependency resolving the authenticated user ID from the bearer token.

    Token is passed in the Authorization header: `Bearer <token>`.
    Runs after the availability guard. Only checks the token signature and
    expiry; handlers that need the user document load it themselves.

    Raises:
        Unauthenticated: If the header is missing or the token is invalid
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise Unauthenticated("No token, authorization denied")

    try:
        return decode_token(credentials.credentials)
    except InvalidToken as e:
        raise Unauthenticated("Token is not valid") from e


# Type alias for cleaner route signatures
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
