"""Monthly meal-rate summary route"""

from fastapi import APIRouter, Depends, Query
from pymongo.database import Database

from api.dependencies import get_db
from domain.schemas.summary_schemas import MonthlySummary
from services import SummaryService

router = APIRouter(tags=["Summary"])


@router.get("/summary", response_model=MonthlySummary)
def monthly_summary(
    month: str = Query(..., description="Calendar month as YYYY-MM"),
    db: Database = Depends(get_db),
):
    """Meals per member, total shopping cost and bills, and the resulting meal rate."""
    return SummaryService.monthly_summary(db, month)
