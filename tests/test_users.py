"""
Tests for member profile management.

- GET    /Users            list members (no password hashes)
- GET    /Users/{email}    one member
- PATCH  /users/{id}       merge supplied fields over stored values
- DELETE /users/{id}       remove member
"""

from bson import ObjectId

from services.auth_service import verify_password
from test_fixtures import client, mongo_db, login_token, make_user_payload, register_user


def test_list_users_hides_password_hashes(mongo_db):
    register_user()
    register_user(profile_type="manager")

    r = client.get("/Users")
    assert r.status_code == 200
    users = r.json()
    assert len(users) == 2
    assert all("password" not in u for u in users)
    assert all(isinstance(u["_id"], str) for u in users)


def test_lowercase_users_path_is_also_served(mongo_db):
    register_user()
    assert client.get("/users").status_code == 200


def test_get_user_by_email(mongo_db):
    user = register_user()

    r = client.get(f"/Users/{user['email']}")
    assert r.status_code == 200
    assert r.json()["name"] == user["name"]
    assert "password" not in r.json()


def test_get_unknown_user_by_email_is_not_found(mongo_db):
    assert client.get("/Users/missing@example.com").status_code == 404


def test_update_user_merges_fields(mongo_db):
    user = register_user()

    r = client.patch(f"/users/{user['_id']}", json={"phone": "01811111111", "name": ""})
    assert r.status_code == 200
    assert r.json() == {"message": "User updated", "modifiedCount": 1}

    stored = mongo_db.users.find_one({"_id": ObjectId(user["_id"])})
    assert stored["phone"] == "01811111111"
    # empty and absent fields keep their stored values
    assert stored["name"] == user["name"]
    assert stored["sit_rent"] == 3500
    assert stored["joining_date"] == "2024-01-05"


def test_update_user_without_password_keeps_hash(mongo_db):
    user = register_user()
    before = mongo_db.users.find_one({"email": user["email"]})["password"]

    client.patch(f"/users/{user['_id']}", json={"role": "manager"})

    after = mongo_db.users.find_one({"email": user["email"]})
    assert after["password"] == before
    assert after["role"] == "manager"


def test_update_user_with_same_password_keeps_hash(mongo_db):
    user = register_user()
    before = mongo_db.users.find_one({"email": user["email"]})["password"]

    client.patch(f"/users/{user['_id']}", json={"password": user["password"]})
    assert mongo_db.users.find_one({"email": user["email"]})["password"] == before

    # clients that echo the stored hash back change nothing either
    client.patch(f"/users/{user['_id']}", json={"password": before})
    assert mongo_db.users.find_one({"email": user["email"]})["password"] == before


def test_update_user_with_new_password_rehashes(mongo_db):
    user = register_user()

    client.patch(f"/users/{user['_id']}", json={"password": "brand-new-pass"})

    stored = mongo_db.users.find_one({"email": user["email"]})
    assert verify_password("brand-new-pass", stored["password"])
    assert login_token(user["email"], "brand-new-pass")
    r = client.post("/login", json={"email": user["email"], "password": user["password"]})
    assert r.status_code == 401


def test_update_unknown_user_is_not_found(mongo_db):
    r = client.patch(f"/users/{ObjectId()}", json={"name": "Nobody"})
    assert r.status_code == 404


def test_update_user_with_malformed_id_is_bad_request(mongo_db):
    r = client.patch("/users/12345", json={"name": "Nobody"})
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "SERVICE_VALIDATION_ERROR"


def test_delete_user(mongo_db):
    user = register_user()

    r = client.delete(f"/users/{user['_id']}")
    assert r.status_code == 200
    assert mongo_db.users.count_documents({}) == 0


def test_delete_unknown_user_is_not_found(mongo_db):
    r = client.delete(f"/users/{ObjectId()}")
    assert r.status_code == 404
    assert r.json()["success"] is False


def test_register_rejects_non_finite_rent(mongo_db):
    r = client.post("/Users", json=make_user_payload(sit_rent="NaN"))

    assert r.status_code == 422
    assert mongo_db.users.count_documents({}) == 0


def test_update_user_rejects_non_finite_rent(mongo_db):
    user = register_user()

    r = client.patch(f"/users/{user['_id']}", json={"sit_rent": "Infinity"})
    assert r.status_code == 422
    assert mongo_db.users.find_one({"email": user["email"]})["sit_rent"] == 3500


def test_update_user_to_taken_email_conflicts(mongo_db):
    first = register_user()
    second = register_user(profile_type="casual")

    r = client.patch(f"/users/{second['_id']}", json={"email": first["email"]})

    assert r.status_code == 409
    assert mongo_db.users.count_documents({"email": first["email"]}) == 1
    assert mongo_db.users.find_one({"_id": ObjectId(second["_id"])})["email"] == second["email"]
