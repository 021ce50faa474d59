"""
Document mappers.
Turns raw MongoDB documents and write results into JSON-ready dicts.
"""

from typing import Any, Dict, Iterable, List, Optional

from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from core.utils.helpers import to_jsonable


class DocumentMapper:
    """Mapper for MongoDB documents and driver results."""

    @staticmethod
    def to_response(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """Convert a document to a dict with ``_id`` rendered as a hex string."""
        if document is None:
            return None
        return to_jsonable(document)

    @staticmethod
    def to_response_list(documents: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [DocumentMapper.to_response(d) for d in documents]

    @staticmethod
    def insert_result(result: InsertOneResult) -> Dict[str, Any]:
        return {
            "acknowledged": result.acknowledged,
            "insertedId": str(result.inserted_id),
        }

    @staticmethod
    def update_result(result: UpdateResult) -> Dict[str, Any]:
        return {
            "acknowledged": result.acknowledged,
            "matchedCount": result.matched_count,
            "modifiedCount": result.modified_count,
            "upsertedId": (
                str(result.upserted_id) if result.upserted_id is not None else None
            ),
        }

    @staticmethod
    def delete_result(result: DeleteResult) -> Dict[str, Any]:
        return {
            "acknowledged": result.acknowledged,
            "deletedCount": result.deleted_count,
        }
