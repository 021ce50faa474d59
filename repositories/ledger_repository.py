"""
Ledger Repositories - Data access layer for shared bills and costs
"""

from pymongo.database import Database

from adapters.mongo_adapter import BILLS, COSTS
from repositories.base import BaseRepository


class BillRepository(BaseRepository):
    """Repository for shared bills (rent, utilities, ...)"""

    collection_name = BILLS

    def __init__(self, db: Database):
        super().__init__(db)


class CostRepository(BaseRepository):
    """Repository for meal shopping costs"""

    collection_name = COSTS

    def __init__(self, db: Database):
        super().__init__(db)
