"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import (
    UserCreate,
    UserUpdate,
    LoginRequest,
    LoginResponse,
    TokenClaims,
)
from domain.schemas.meal_schemas import MealCreate, MealCountUpdate
from domain.schemas.ledger_schemas import (
    LedgerEntryCreate,
    LedgerEntryUpdate,
)
from domain.schemas.summary_schemas import MemberSummary, MonthlySummary

__all__ = [
    # User schemas
    "UserCreate",
    "UserUpdate",
    "LoginRequest",
    "LoginResponse",
    "TokenClaims",
    # Meal schemas
    "MealCreate",
    "MealCountUpdate",
    # Bill and cost schemas
    "LedgerEntryCreate",
    "LedgerEntryUpdate",
    # Summary schemas
    "MemberSummary",
    "MonthlySummary",
]
