"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.user_service import UserService
from services.meal_service import MealService
from services.ledger_service import LedgerService, bill_service, cost_service
from services.summary_service import SummaryService

__all__ = [
    "AuthService",
    "UserService",
    "MealService",
    "LedgerService",
    "bill_service",
    "cost_service",
    "SummaryService",
]
