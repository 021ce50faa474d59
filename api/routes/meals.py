"""Daily meal log routes"""

from fastapi import APIRouter, Depends, Query
from pymongo.database import Database
import logging
from typing import Optional

from api.dependencies import get_db
from domain.mappers import DocumentMapper
from domain.schemas.meal_schemas import MealCountUpdate, MealCreate
from services import MealService

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("messledger.api.meals")


@router.post("")
def record_meals(meal: MealCreate, db: Database = Depends(get_db)):
    """
    Record breakfast, lunch and dinner for a member on a date.

    Calling it again for the same email and date overwrites the three meal
    fields of the existing record instead of creating a second one.
    """
    result = MealService.record_meals(db, meal)
    created = result.upserted_id is not None
    return {
        "message": "Meal recorded" if created else "Meal updated",
        "data": DocumentMapper.update_result(result),
    }


@router.patch("")
def update_meal_count(update: MealCountUpdate, db: Database = Depends(get_db)):
    result = MealService.update_meal_count(db, update)
    return {"message": "Meal updated", "data": DocumentMapper.update_result(result)}


@router.get("")
def list_meals(
    month: Optional[str] = Query(None, description="Calendar month as YYYY-MM"),
    db: Database = Depends(get_db),
):
    return DocumentMapper.to_response_list(MealService.list_meals(db, month))


@router.get("/{email}/{date}")
def get_meal(email: str, date: str, db: Database = Depends(get_db)):
    """Meal record for a member on a date, or {} when nothing was logged."""
    return DocumentMapper.to_response(MealService.get_meal(db, email, date))
