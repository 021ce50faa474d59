"""
User Repository - Data access layer for member accounts
"""

from typing import Optional
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
from pymongo.results import InsertOneResult, UpdateResult
from bson import ObjectId

from adapters.mongo_adapter import USERS
from repositories.base import BaseRepository, Document
from app.exceptions import ConflictError


class UserRepository(BaseRepository):
    """Repository for user data access"""

    collection_name = USERS

    def __init__(self, db: Database):
        super().__init__(db)

    def get_by_email(self, email: str) -> Optional[Document]:
        """Get user by email"""
        return self.collection.find_one({"email": email})

    def create_user(self, document: Document) -> InsertOneResult:
        """Insert a new user; the unique email index rejects duplicates"""
        try:
            return self.collection.insert_one(document)
        except DuplicateKeyError:
            raise ConflictError("User already exists")

    def update_user(self, user_id: ObjectId, fields: Document) -> UpdateResult:
        """Update user information"""
        try:
            return self.update(user_id, fields)
        except DuplicateKeyError:
            raise ConflictError(f"Email {fields.get('email')} is already in use")
