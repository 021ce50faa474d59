#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the MessLedger collections and indexes in MongoDB

Databases written by earlier versions may hold duplicate users (same email)
or duplicate meal logs (same email and date). The unique indexes cannot be
built until those are merged or removed; the failing collection and example
duplicates are logged.
"""

import logging
import sys
import os

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from adapters import mongo_adapter
from app.config import MONGODB_URI, MONGO_DB

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("messledger.init_db")


def main() -> int:
    try:
        db = mongo_adapter.connect(MONGODB_URI, MONGO_DB)
    except Exception as exc:
        logger.error("Could not connect to MongoDB: %s", exc)
        return 1

    try:
        existing = set(db.list_collection_names())
        for name in mongo_adapter.COLLECTIONS:
            if name not in existing:
                db.create_collection(name)
                logger.info("Created '%s' collection", name)
        mongo_adapter.ensure_indexes(db)
    except Exception:
        logger.exception("MongoDB initialization failed")
        return 1
    finally:
        mongo_adapter.close()
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("MessLedger Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    print("\n" + "=" * 60)
    print("SUCCESS! Collections and indexes are ready." if exit_code == 0 else "FAILED! Check the errors above.")
    print("=" * 60 + "\n")

    sys.exit(exit_code)
