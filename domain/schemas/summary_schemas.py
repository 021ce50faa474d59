from pydantic import BaseModel, Field
from typing import List


class MemberSummary(BaseModel):
    email: str
    meals: float = Field(..., description="Meals eaten in the month")
    meal_cost: float = Field(..., description="meals x meal_rate")


class MonthlySummary(BaseModel):
    """Month totals for meals, shared costs and bills"""

    month: str
    total_meals: float
    total_cost: float
    total_bill: float
    meal_rate: float = Field(..., description="total_cost / total_meals, 0 without meals")
    members: List[MemberSummary] = Field(default_factory=list)
