"""API routes package"""

from . import users, meals, ledger, summary, health

__all__ = ["users", "meals", "ledger", "summary", "health"]
