"""Password hashing, bearer tokens, registration and login."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple
import logging

import jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from pymongo.database import Database
from pymongo.results import InsertOneResult

from app.config import settings
from app.exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from domain.schemas.user_schemas import TokenClaims, UserCreate
from repositories import UserRepository

logger = logging.getLogger("messledger.auth")

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.bcrypt_rounds
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    if not password or not password_hash:
        return False
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        # stored value is not a recognised hash
        return False


class AuthService:
    """Business logic for accounts and sessions"""

    @staticmethod
    def register(db: Database, payload: UserCreate) -> InsertOneResult:
        """Store a new member with the password replaced by its hash.

        Raises ConflictError when the email is already registered.
        """
        document = payload.model_dump(exclude_unset=True)
        document.setdefault("role", payload.role)
        document["password"] = hash_password(payload.password)

        result = UserRepository(db).create_user(document)
        logger.info(f"user_registered email={payload.email} role={document['role']}")
        return result

    @staticmethod
    def login(db: Database, email: str, password: str) -> Tuple[str, Dict[str, Any]]:
        """Check credentials and issue a token; returns (token, user document)."""
        user = UserRepository(db).get_by_email(email)
        if not user:
            logger.warning(f"login_unknown_email email={email}")
            raise NotFoundError("User not found")

        if not verify_password(password, user.get("password")):
            logger.warning(f"login_rejected email={email}")
            raise UnauthorizedError("Invalid credentials")

        token = AuthService.issue_token(user["email"], user.get("role"))
        logger.info(f"login_succeeded email={email}")
        return token, user

    @staticmethod
    def issue_token(email: str, role: Optional[str], now: Optional[datetime] = None) -> str:
        """Sign ``{email, role}`` with an expiry ``jwt_expires_days`` after ``now``."""
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "email": email,
            "role": role,
            "iat": issued_at,
            "exp": issued_at + timedelta(days=settings.jwt_expires_days),
        }
        return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    @staticmethod
    def decode_token(token: str) -> TokenClaims:
        """Verify signature and expiry; any failure is a ForbiddenError."""
        try:
            payload = jwt.decode(
                token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
            )
            return TokenClaims.model_validate(payload)
        except jwt.InvalidTokenError as exc:
            logger.warning(f"token_rejected reason={exc.__class__.__name__}")
            raise ForbiddenError("Forbidden")
        except ValidationError:
            logger.warning("token_rejected reason=MissingClaims")
            raise ForbiddenError("Forbidden")

    @staticmethod
    def current_user(db: Database, claims: TokenClaims) -> Dict[str, Any]:
        user = UserRepository(db).get_by_email(claims.email)
        if not user:
            raise NotFoundError("User not found")
        return user
