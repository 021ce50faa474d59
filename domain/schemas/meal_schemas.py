"""Pydantic schemas for per-day meal logs."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class MealCreate(BaseModel):
    """Meal log for one member on one day.

    ``email`` and ``date`` are the record key; their presence is checked by
    the service so a missing key answers 400 rather than 422.
    """

    email: Optional[str] = None
    date: Optional[str] = Field(None, description="Day of the meals (YYYY-MM-DD)")
    breakfast: Optional[float] = None
    lunch: Optional[float] = None
    dinner: Optional[float] = None
    mealCount: Optional[float] = None

    model_config = ConfigDict(extra="allow", allow_inf_nan=False)


class MealCountUpdate(BaseModel):
    email: Optional[str] = None
    date: Optional[str] = None
    mealCount: Optional[float] = None

    model_config = ConfigDict(allow_inf_nan=False)
