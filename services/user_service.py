from typing import Any, Dict, List
import logging

from pymongo.database import Database
from pymongo.results import UpdateResult

from app.exceptions import NotFoundError
from core.utils.helpers import parse_object_id
from domain.schemas.user_schemas import UserUpdate
from repositories import UserRepository
from services.auth_service import hash_password, verify_password

logger = logging.getLogger("messledger.users")

PROFILE_FIELDS = (
    "name",
    "email",
    "phone",
    "role",
    "rented_sit",
    "sit_rent",
    "joining_date",
)


class UserService:
    """Business logic for member profiles"""

    @staticmethod
    def get_all_users(db: Database) -> List[Dict[str, Any]]:
        """Return all users (no pagination)."""
        users = UserRepository(db).get_all()
        logger.info(f"users_listed count={len(users)}")
        return users

    @staticmethod
    def get_user_by_email(db: Database, email: str) -> Dict[str, Any]:
        user = UserRepository(db).get_by_email(email)
        if not user:
            logger.warning(f"user_not_found email={email}")
            raise NotFoundError(f"User {email} not found")
        return user

    @staticmethod
    def update_user(db: Database, user_id: str, payload: UserUpdate) -> UpdateResult:
        """
        Merge ``payload`` over the stored profile.

        Empty or missing fields keep their stored value. The password is
        re-hashed only when the supplied plaintext does not already match the
        stored hash; a client echoing the stored hash back changes nothing.
        """
        oid = parse_object_id(user_id)
        repo = UserRepository(db)
        current = repo.get_by_id(oid)
        if not current:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError("User not found")

        fields: Dict[str, Any] = {}
        for name in PROFILE_FIELDS:
            value = getattr(payload, name) or current.get(name)
            if value is not None:
                fields[name] = value

        password = payload.password
        stored = current.get("password")
        if password and password != stored and not verify_password(password, stored):
            fields["password"] = hash_password(password)

        result = repo.update_user(oid, fields)
        logger.info(
            f"user_updated user_id={user_id} modified={result.modified_count} "
            f"password_changed={'password' in fields}"
        )
        return result

    @staticmethod
    def delete_user(db: Database, user_id: str) -> bool:
        deleted = UserRepository(db).delete(parse_object_id(user_id))
        if not deleted:
            raise NotFoundError("User not found")
        logger.info(f"user_deleted user_id={user_id}")
        return deleted
