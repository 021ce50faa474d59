"""MongoDB adapter owning the client connection and collection indexes.
"""

from typing import Any, Dict, List, Optional
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.config import settings

logger = logging.getLogger("messledger.mongo")

USERS = "users"
MEALS = "meals"
BILLS = "bills"
COSTS = "costs"

COLLECTIONS = (USERS, MEALS, BILLS, COSTS)

_client: Optional[MongoClient] = None
_db: Optional[Database] = None


# ------------------ Connection ------------------
def connect(uri: str, db_name: str = "meal-managements") -> Database:
    """Open the client, ping the server and remember the database handle.

    Raises whatever pymongo raises when the server is unreachable; callers
    decide whether to retry.
    """
    global _client, _db
    client = MongoClient(uri, serverSelectionTimeoutMS=settings.mongo_timeout_ms)
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    _client = client
    _db = client[db_name]
    logger.info("Connected to MongoDB (database: %s)", db_name)
    return _db


def get_db() -> Database:
    """Return the connected database, connecting lazily from settings.

    The lazy path also ensures indexes, since it runs when the app is served
    without its lifespan.
    """
    if _db is not None:
        return _db
    db = connect(settings.mongodb_uri, settings.mongo_db_name)
    ensure_indexes(db)
    return db


def close():
    """Close MongoDB connection."""
    global _client, _db
    try:
        if _client is not None:
            _client.close()
            logger.info("MongoDB client closed")
    except Exception:
        logger.exception("Error closing MongoDB client")
    finally:
        _client = None
        _db = None


# ------------------ Indexes ------------------
def find_duplicates(collection: Collection, keys: List[str], limit: int = 5) -> List[Dict[str, Any]]:
    """Key values that occur on more than one document, with their counts."""
    pipeline = [
        {"$group": {"_id": {k: f"${k}" for k in keys}, "count": {"$sum": 1}}},
        {"$match": {"count": {"$gt": 1}}},
        {"$limit": limit},
    ]
    return [{**row["_id"], "count": row["count"]} for row in collection.aggregate(pipeline)]


def _create_unique_index(collection: Collection, keys: List[str], name: str) -> None:
    try:
        collection.create_index([(k, ASCENDING) for k in keys], unique=True, name=name)
    except DuplicateKeyError:
        logger.error(
            "Cannot create unique index %s on '%s': duplicate %s values exist, e.g. %s. "
            "Merge or delete the duplicates, then restart.",
            name,
            collection.name,
            "+".join(keys),
            find_duplicates(collection, keys),
        )
        raise


def ensure_indexes(db: Database) -> None:
    """Create the indexes the write paths rely on.

    ``users.email`` and ``meals.(email, date)`` are unique so that
    registration and meal upserts are insert-or-fail at the database.
    Data written before these indexes existed may hold duplicates; the
    unique index then cannot be built and the duplicates are logged.
    """
    _create_unique_index(db[USERS], ["email"], "email_unique")
    _create_unique_index(db[MEALS], ["email", "date"], "email_date_unique")
    db[MEALS].create_index([("date", ASCENDING)], name="date")
    db[BILLS].create_index([("date", ASCENDING)], name="date")
    db[COSTS].create_index([("date", ASCENDING)], name="date")
    logger.info("MongoDB indexes ensured on %s", ", ".join(COLLECTIONS))
