"""Shared business logic for bills and costs.

Both collections hold free-form dated entries with the same lifecycle, so one
service class is instantiated per collection.
"""

from typing import Any, Dict, List, Optional, Type
import logging

from pymongo.database import Database
from pymongo.results import InsertOneResult, UpdateResult

from app.exceptions import NotFoundError, ServiceValidationError
from core.utils.helpers import month_filter, parse_object_id
from domain.schemas.ledger_schemas import LedgerEntryCreate, LedgerEntryUpdate
from repositories import BaseRepository, BillRepository, CostRepository


class LedgerService:
    """Create, list, update and delete entries of one ledger collection"""

    def __init__(self, repository: Type[BaseRepository], label: str):
        self.repository = repository
        self.label = label
        self.logger = logging.getLogger(f"messledger.{repository.collection_name}")

    def create(self, db: Database, payload: LedgerEntryCreate) -> InsertOneResult:
        document = payload.model_dump(exclude_unset=True)
        document.pop("_id", None)
        result = self.repository(db).create(document)
        self.logger.info(
            f"{self.label.lower()}_created id={result.inserted_id} date={document.get('date')}"
        )
        return result

    def list(self, db: Database, month: Optional[str] = None) -> List[Dict[str, Any]]:
        entries = self.repository(db).get_all(month_filter(month))
        self.logger.info(
            f"{self.label.lower()}_listed month={month} count={len(entries)}"
        )
        return entries

    def update(
        self, db: Database, entry_id: str, payload: LedgerEntryUpdate
    ) -> UpdateResult:
        oid = parse_object_id(entry_id)
        fields = payload.model_dump(exclude_unset=True)
        fields.pop("_id", None)
        if not fields:
            raise ServiceValidationError("No fields to update")

        result = self.repository(db).update(oid, fields)
        if result.matched_count == 0:
            raise NotFoundError(f"{self.label} not found")
        self.logger.info(
            f"{self.label.lower()}_updated id={entry_id} fields={sorted(fields)}"
        )
        return result

    def delete(self, db: Database, entry_id: str) -> bool:
        if not self.repository(db).delete(parse_object_id(entry_id)):
            raise NotFoundError(f"{self.label} not found")
        self.logger.info(f"{self.label.lower()}_deleted id={entry_id}")
        return True


bill_service = LedgerService(BillRepository, "Bill")
cost_service = LedgerService(CostRepository, "Cost")
