from collections import defaultdict
from typing import Any, Dict
import logging

from pymongo.database import Database

from core.utils.helpers import as_number, month_filter
from domain.schemas.summary_schemas import MemberSummary, MonthlySummary
from repositories import BillRepository, CostRepository, MealRepository
from repositories.meal_repository import MEAL_FIELDS

logger = logging.getLogger("messledger.summary")


def meals_in_record(record: Dict[str, Any]) -> float:
    """``mealCount`` when recorded, otherwise breakfast + lunch + dinner."""
    if record.get("mealCount") is not None:
        return as_number(record["mealCount"])
    return sum(as_number(record.get(field)) for field in MEAL_FIELDS)


class SummaryService:
    """Month totals derived from meals, costs and bills"""

    @staticmethod
    def monthly_summary(db: Database, month: str) -> MonthlySummary:
        query = month_filter(month)
        meals = MealRepository(db).get_all(query)
        costs = CostRepository(db).get_all(query)
        bills = BillRepository(db).get_all(query)

        per_member: Dict[str, float] = defaultdict(float)
        for record in meals:
            per_member[record.get("email") or ""] += meals_in_record(record)

        total_meals = sum(per_member.values())
        total_cost = sum(as_number(c.get("amount")) for c in costs)
        total_bill = sum(as_number(b.get("amount")) for b in bills)
        meal_rate = total_cost / total_meals if total_meals else 0.0

        summary = MonthlySummary(
            month=month,
            total_meals=total_meals,
            total_cost=round(total_cost, 2),
            total_bill=round(total_bill, 2),
            meal_rate=round(meal_rate, 2),
            members=[
                MemberSummary(
                    email=email, meals=count, meal_cost=round(count * meal_rate, 2)
                )
                for email, count in sorted(per_member.items())
            ],
        )
        logger.info(
            f"summary_built month={month} meals={total_meals} "
            f"cost={summary.total_cost} bill={summary.total_bill}"
        )
        return summary
