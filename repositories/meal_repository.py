"""
Meal Repository - Data access layer for per-day meal logs
"""

import logging
from typing import Optional
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
from pymongo.results import UpdateResult

from adapters.mongo_adapter import MEALS
from repositories.base import BaseRepository, Document

logger = logging.getLogger("messledger.repositories.meals")

MEAL_FIELDS = ("breakfast", "lunch", "dinner")


class MealRepository(BaseRepository):
    """Repository for meal records keyed by (email, date)"""

    collection_name = MEALS

    def __init__(self, db: Database):
        super().__init__(db)

    def get_by_email_and_date(self, email: str, date: str) -> Optional[Document]:
        return self.collection.find_one({"email": email, "date": date})

    def upsert_meals(self, document: Document) -> UpdateResult:
        """Record breakfast/lunch/dinner for ``document``'s (email, date).

        An existing record only has its meal fields overwritten; a new record
        is inserted with every field of ``document``.
        """
        key = {"email": document["email"], "date": document["date"]}
        meals = {field: document.get(field) for field in MEAL_FIELDS}
        on_insert = {
            k: v
            for k, v in document.items()
            if k not in key and k not in meals and k != "_id"
        }
        update: Document = {"$set": meals}
        if on_insert:
            update["$setOnInsert"] = on_insert
        return self._upsert(key, update)

    def set_meal_count(self, email: str, date: str, meal_count) -> UpdateResult:
        """Set ``mealCount`` for (email, date), creating the record if needed"""
        return self._upsert(
            {"email": email, "date": date}, {"$set": {"mealCount": meal_count}}
        )

    def _upsert(self, key: Document, update: Document) -> UpdateResult:
        # Two concurrent upserts on the same key can both miss and one then
        # hits the unique index; the retry finds the winner's record.
        try:
            return self.collection.update_one(key, update, upsert=True)
        except DuplicateKeyError:
            logger.info("meal_upsert_retry email=%s date=%s", key["email"], key["date"])
            return self.collection.update_one(key, update, upsert=True)
