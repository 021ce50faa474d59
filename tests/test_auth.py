"""
Tests for registration, login and the bearer guard.

Flow:
    POST /Users   {email, password, ...profile}   -> 201 {insertedId}
    POST /login   {email, password}               -> 200 {token, user}
    GET  /auth    Authorization: Bearer <token>   -> 200 profile
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.config import settings
from services.auth_service import AuthService, hash_password, verify_password
from test_fixtures import client, mongo_db, login_token, make_user_payload, register_user


# =============================================================================
# PASSWORD HASHING
# =============================================================================


def test_hash_password_is_salted_bcrypt():
    first = hash_password("s3cret")
    second = hash_password("s3cret")

    assert first.startswith("$2")
    assert first != second
    assert verify_password("s3cret", first)
    assert not verify_password("wrong", first)


def test_verify_password_tolerates_bad_stored_values():
    assert not verify_password("s3cret", None)
    assert not verify_password("s3cret", "plain-text-not-a-hash")
    assert not verify_password("", hash_password("s3cret"))


# =============================================================================
# REGISTRATION
# =============================================================================


def test_register_stores_hash_and_profile(mongo_db):
    payload = make_user_payload(favourite_dish="khichuri")
    r = client.post("/Users", json=payload)

    assert r.status_code == 201
    assert r.json()["insertedId"]

    stored = mongo_db.users.find_one({"email": payload["email"]})
    assert stored["password"] != payload["password"]
    assert verify_password(payload["password"], stored["password"])
    assert stored["name"] == payload["name"]
    assert stored["sit_rent"] == 3500
    # unknown profile fields are kept
    assert stored["favourite_dish"] == "khichuri"


def test_register_defaults_role_to_member(mongo_db):
    payload = make_user_payload()
    del payload["role"]
    client.post("/Users", json=payload)

    assert mongo_db.users.find_one({"email": payload["email"]})["role"] == "member"


def test_register_same_email_twice_conflicts(mongo_db):
    payload = make_user_payload()
    assert client.post("/Users", json=payload).status_code == 201

    r = client.post("/Users", json=payload)
    assert r.status_code == 409
    assert r.json()["error"]["message"] == "User already exists"
    assert mongo_db.users.count_documents({"email": payload["email"]}) == 1


def test_register_requires_email_and_password(mongo_db):
    r = client.post("/Users", json={"email": "no-password@example.com"})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


# =============================================================================
# LOGIN
# =============================================================================


def test_login_returns_token_with_identity(mongo_db):
    user = register_user(profile_type="manager")
    r = client.post("/login", json={"email": user["email"], "password": user["password"]})

    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Login successful"

    claims = jwt.decode(body["token"], settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    assert claims["email"] == user["email"]
    assert claims["role"] == "manager"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


def test_login_response_never_contains_password_hash(mongo_db):
    user = register_user()
    r = client.post("/login", json={"email": user["email"], "password": user["password"]})

    returned = r.json()["user"]
    assert "password" not in returned
    assert returned["email"] == user["email"]
    assert returned["_id"] == user["_id"]


def test_login_wrong_password_is_unauthorized(mongo_db):
    user = register_user()
    r = client.post("/login", json={"email": user["email"], "password": "not-it"})

    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Invalid credentials"


def test_login_unknown_email_is_not_found(mongo_db):
    r = client.post("/login", json={"email": "nobody@example.com", "password": "x"})

    assert r.status_code == 404
    assert r.json()["error"]["message"] == "User not found"


# =============================================================================
# BEARER GUARD
# =============================================================================


def test_auth_route_returns_profile_for_valid_token(mongo_db):
    user = register_user()
    token = login_token(user["email"], user["password"])

    r = client.get("/auth", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["email"] == user["email"]
    assert "password" not in r.json()


@pytest.mark.parametrize(
    "headers",
    [{}, {"Authorization": "Basic dXNlcjpwYXNz"}, {"Authorization": "Bearer "}, {"Authorization": "token"}],
)
def test_auth_route_without_bearer_header_is_unauthorized(mongo_db, headers):
    r = client.get("/auth", headers=headers)
    assert r.status_code == 401


def test_auth_route_with_malformed_token_is_forbidden(mongo_db):
    r = client.get("/auth", headers={"Authorization": "Bearer not.a.jwt"})
    assert r.status_code == 403


def test_auth_route_with_foreign_signature_is_forbidden(mongo_db):
    user = register_user()
    forged = jwt.encode(
        {"email": user["email"], "role": "admin"},
        "some-other-secret-that-is-long-enough-0000",
        algorithm="HS256",
    )
    r = client.get("/auth", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 403


def test_auth_route_with_expired_token_is_forbidden(mongo_db):
    user = register_user()
    issued = datetime.now(timezone.utc) - timedelta(days=8)
    token = AuthService.issue_token(user["email"], "member", now=issued)

    r = client.get("/auth", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403


def test_auth_route_with_token_missing_email_is_forbidden(mongo_db):
    token = jwt.encode({"role": "member"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    r = client.get("/auth", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403


def test_auth_route_for_deleted_user_is_not_found(mongo_db):
    token = AuthService.issue_token("ghost@example.com", "member")

    r = client.get("/auth", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 404
