"""
API dependencies for dependency injection
"""

from typing import Optional

from fastapi import Depends, Header
from pymongo.database import Database

from adapters import mongo_adapter
from app.exceptions import UnauthorizedError
from domain.schemas.user_schemas import TokenClaims
from services.auth_service import AuthService

BEARER_PREFIX = "Bearer "


def get_db() -> Database:
    """
    Database handle dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Database = Depends(get_db)):
            # Use db["collection"] here
            pass
    """
    return mongo_adapter.get_db()


def get_token_claims(
    authorization: Optional[str] = Header(default=None),
) -> TokenClaims:
    """
    Bearer guard. A missing or non-Bearer header is 401; a token that fails
    verification is 403 (raised by AuthService.decode_token).
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("Unauthorized")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthorizedError("Unauthorized")
    return AuthService.decode_token(token)


def get_current_user(
    claims: TokenClaims = Depends(get_token_claims),
    db: Database = Depends(get_db),
) -> dict:
    """Stored user document for the verified token"""
    return AuthService.current_user(db, claims)
