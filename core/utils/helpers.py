"""
MessLedger utility functions
"""

from __future__ import annotations
import re
from datetime import date, datetime
from typing import Any, Dict, Tuple

from bson import ObjectId
from bson.errors import InvalidId

from app.exceptions import ServiceValidationError


# Date utilities

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})$")


def month_range(month: str) -> Tuple[str, str]:
    """Return the ISO date strings bounding ``YYYY-MM`` as ``[start, end)``.

    >>> month_range("2024-12")
    ('2024-12-01', '2025-01-01')
    """
    match = MONTH_PATTERN.match((month or "").strip())
    if not match:
        raise ServiceValidationError(f"Invalid month '{month}', expected YYYY-MM")
    year, mon = int(match.group(1)), int(match.group(2))
    if not 1 <= mon <= 12 or year < 1:
        raise ServiceValidationError(f"Invalid month '{month}', expected YYYY-MM")

    try:
        start = date(year, mon, 1)
        end = date(year + 1, 1, 1) if mon == 12 else date(year, mon + 1, 1)
    except ValueError:
        raise ServiceValidationError(f"Month '{month}' is out of range")
    return start.isoformat(), end.isoformat()


def month_filter(month: str | None) -> Dict[str, Any]:
    """Mongo query restricting ``date`` to one calendar month, or {} for no month."""
    if not month:
        return {}
    start, end = month_range(month)
    return {"date": {"$gte": start, "$lt": end}}


# Identifier utilities

def parse_object_id(value: Any) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        raise ServiceValidationError(f"Invalid id '{value}'")


# Serialization utilities

def to_jsonable(obj: Any) -> Any:
    from pydantic import BaseModel

    if obj is None:
        return None
    if isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, ObjectId):
        return str(obj)
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, BaseModel):
        return to_jsonable(obj.model_dump())
    if isinstance(obj, dict):
        return {k: to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [to_jsonable(v) for v in obj]
    return str(obj)


def as_number(value: Any) -> float:
    """Coerce an amount-like value to float; non-numeric values count as 0."""
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return 0.0
