"""Pydantic schemas shared by bills and costs.

Both collections hold caller-defined records. The commonly used fields are
declared; anything else is kept in the model's extra fields and stored as sent.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class LedgerEntryCreate(BaseModel):
    date: Optional[str] = Field(None, description="Day the bill or cost applies to (YYYY-MM-DD)")
    amount: Optional[float] = Field(None, description="Money spent")
    title: Optional[str] = None
    category: Optional[str] = None
    email: Optional[str] = Field(None, description="Member who paid or recorded it")
    note: Optional[str] = None

    model_config = ConfigDict(extra="allow", allow_inf_nan=False)


class LedgerEntryUpdate(LedgerEntryCreate):
    """Partial update; only fields present in the request body are written."""
