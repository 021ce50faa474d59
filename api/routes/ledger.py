"""Bill and cost routes.

Both collections expose the same create/list/update/delete surface, so the
router is built once per collection from its service.
"""

from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database
from typing import Optional

from api.dependencies import get_db
from domain.mappers import DocumentMapper
from domain.schemas.ledger_schemas import LedgerEntryCreate, LedgerEntryUpdate
from services import LedgerService, bill_service, cost_service


def build_router(service: LedgerService, prefix: str, created_message: str) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[f"{service.label}s"])
    label = service.label

    @router.post("", status_code=status.HTTP_201_CREATED)
    def create_entry(entry: LedgerEntryCreate, db: Database = Depends(get_db)):
        result = service.create(db, entry)
        return {"message": created_message, "insertedId": str(result.inserted_id)}

    @router.get("")
    def list_entries(
        month: Optional[str] = Query(None, description="Calendar month as YYYY-MM"),
        db: Database = Depends(get_db),
    ):
        return DocumentMapper.to_response_list(service.list(db, month))

    @router.patch("/{entry_id}")
    def update_entry(
        entry_id: str, changes: LedgerEntryUpdate, db: Database = Depends(get_db)
    ):
        result = service.update(db, entry_id, changes)
        return {"message": f"{label} updated", "modifiedCount": result.modified_count}

    @router.delete("/{entry_id}")
    def delete_entry(entry_id: str, db: Database = Depends(get_db)):
        service.delete(db, entry_id)
        return {"message": f"{label} deleted"}

    return router


bills_router = build_router(bill_service, "/bills", "Bill created")
costs_router = build_router(cost_service, "/costs", "Cost added")
