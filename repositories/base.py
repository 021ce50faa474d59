"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Any, Dict, List, Optional
from abc import ABC

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import InsertOneResult, UpdateResult

Document = Dict[str, Any]


class BaseRepository(ABC):
    """
    Base repository providing common CRUD operations over one collection.
    Subclasses set ``collection_name``; the database handle is passed in
    explicitly so nothing holds a process-wide collection.
    """

    collection_name: str = ""

    def __init__(self, db: Database):
        if not self.collection_name:
            raise NotImplementedError(
                f"{self.__class__.__name__} must define collection_name"
            )
        self.db = db
        self.collection: Collection = db[self.collection_name]

    def get_by_id(self, entity_id: ObjectId) -> Optional[Document]:
        """Get document by ``_id``"""
        return self.collection.find_one({"_id": entity_id})

    def get_all(self, query: Optional[Document] = None) -> List[Document]:
        """Get all documents matching ``query`` (all documents when omitted)"""
        return list(self.collection.find(query or {}))

    def create(self, document: Document) -> InsertOneResult:
        """Insert a new document"""
        return self.collection.insert_one(document)

    def update(self, entity_id: ObjectId, fields: Document) -> UpdateResult:
        """Set ``fields`` on the document with ``entity_id``"""
        return self.collection.update_one({"_id": entity_id}, {"$set": fields})

    def delete(self, entity_id: ObjectId) -> bool:
        """Delete document by ``_id``; False when nothing matched"""
        result = self.collection.delete_one({"_id": entity_id})
        return result.deleted_count > 0
