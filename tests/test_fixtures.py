"""
Shared test fixtures and utilities for MessLedger test suite.

The MongoDB server is replaced by an in-memory mongomock database injected
through the ``get_db`` dependency, so route tests exercise the real services
and repositories.
"""

import uuid

import mongomock
import pytest
from fastapi.testclient import TestClient

from adapters import mongo_adapter
from api.dependencies import get_db
from main import app

# TestClient is used without a context manager so the lifespan (real MongoDB
# connection) never runs.
client = TestClient(app)


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


# Realistic default members
REALISTIC_USERS = {
    "default": {"name": "Sarah Martinez", "email_prefix": "sarah.martinez", "role": "member"},
    "manager": {"name": "Michael Chen", "email_prefix": "michael.chen", "role": "manager"},
    "casual": {"name": "Emma Johnson", "email_prefix": "emma.johnson", "role": "member"},
}


@pytest.fixture(scope="function")
def mongo_db():
    """
    Fresh in-memory database per test, wired into the app.

    Yields:
        mongomock Database with the production indexes applied
    """
    db = mongomock.MongoClient()["meal-managements-test"]
    mongo_adapter.ensure_indexes(db)
    app.dependency_overrides[get_db] = lambda: db
    try:
        yield db
    finally:
        app.dependency_overrides.pop(get_db, None)


def make_user_payload(profile_type="default", email=None, password="s3cret-pass", **extra):
    """
    Registration body for POST /Users with realistic data.

    Example:
        >>> body = make_user_payload(profile_type="manager")
        >>> body["role"]
        'manager'
    """
    profile = REALISTIC_USERS.get(profile_type, REALISTIC_USERS["default"])
    payload = {
        "email": email or unique_email(profile["email_prefix"]),
        "password": password,
        "name": profile["name"],
        "phone": "01700000000",
        "role": profile["role"],
        "rented_sit": 2,
        "sit_rent": 3500,
        "joining_date": "2024-01-05",
    }
    payload.update(extra)
    return payload


def register_user(**kwargs) -> dict:
    """Register through the API and return the payload used"""
    payload = make_user_payload(**kwargs)
    r = client.post("/Users", json=payload)
    assert r.status_code == 201, r.text
    payload["_id"] = r.json()["insertedId"]
    return payload


def login_token(email: str, password: str) -> str:
    r = client.post("/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["token"]


def make_meal(email=None, date="2024-03-10", breakfast=1, lunch=1, dinner=1, **extra):
    meal = {
        "email": email or unique_email("meal"),
        "date": date,
        "breakfast": breakfast,
        "lunch": lunch,
        "dinner": dinner,
    }
    meal.update(extra)
    return meal
