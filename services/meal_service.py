from typing import Any, Dict, List, Optional
import logging

from pymongo.database import Database
from pymongo.results import UpdateResult

from app.exceptions import ServiceValidationError
from core.utils.helpers import month_filter
from domain.schemas.meal_schemas import MealCountUpdate, MealCreate
from repositories import MealRepository

logger = logging.getLogger("messledger.meals")


class MealService:
    """Business logic for daily meal logs"""

    @staticmethod
    def record_meals(db: Database, payload: MealCreate) -> UpdateResult:
        """
        Record a member's meals for one day.

        If a record already exists for (email, date) its breakfast, lunch and
        dinner are overwritten; otherwise the whole payload becomes a new record.
        """
        if not payload.email or not payload.date:
            raise ServiceValidationError("Missing fields")

        result = MealRepository(db).upsert_meals(payload.model_dump(exclude_unset=True))
        logger.info(
            f"meals_recorded email={payload.email} date={payload.date} "
            f"created={result.upserted_id is not None}"
        )
        return result

    @staticmethod
    def update_meal_count(db: Database, payload: MealCountUpdate) -> UpdateResult:
        if not payload.email or not payload.date or payload.mealCount is None:
            raise ServiceValidationError("Missing fields")

        result = MealRepository(db).set_meal_count(
            payload.email, payload.date, payload.mealCount
        )
        logger.info(
            f"meal_count_set email={payload.email} date={payload.date} "
            f"meal_count={payload.mealCount}"
        )
        return result

    @staticmethod
    def list_meals(db: Database, month: Optional[str] = None) -> List[Dict[str, Any]]:
        """All meal records, restricted to ``month`` (YYYY-MM) when given."""
        meals = MealRepository(db).get_all(month_filter(month))
        logger.info(f"meals_listed month={month} count={len(meals)}")
        return meals

    @staticmethod
    def get_meal(db: Database, email: str, date: str) -> Dict[str, Any]:
        """The record for (email, date), or an empty dict when none exists."""
        return MealRepository(db).get_by_email_and_date(email, date) or {}
