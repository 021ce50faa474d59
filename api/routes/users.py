"""Account, session and member profile routes"""

from fastapi import APIRouter, Depends, status
from pymongo.database import Database
import logging
from typing import List

from api.dependencies import get_current_user, get_db
from domain.mappers import DocumentMapper, UserMapper
from domain.schemas.user_schemas import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserUpdate,
)
from services import AuthService, UserService

router = APIRouter(tags=["Users"])
logger = logging.getLogger("messledger.api.users")


@router.post("/Users", status_code=status.HTTP_201_CREATED)
@router.post("/users", status_code=status.HTTP_201_CREATED, include_in_schema=False)
def register_user(user: UserCreate, db: Database = Depends(get_db)):
    """Register a member; 409 when the email is already taken."""
    result = AuthService.register(db, user)
    return DocumentMapper.insert_result(result)


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Database = Depends(get_db)):
    """Exchange email and password for a bearer token."""
    token, user = AuthService.login(db, credentials.email, credentials.password)
    return LoginResponse(token=token, user=UserMapper.to_response(user))


@router.get("/Users", response_model=List[dict])
@router.get("/users", response_model=List[dict], include_in_schema=False)
def get_all_users(db: Database = Depends(get_db)):
    """Return all members without their password hashes."""
    return [UserMapper.to_response(u) for u in UserService.get_all_users(db)]


@router.get("/Users/{email}")
@router.get("/users/{email}", include_in_schema=False)
def get_user(email: str, db: Database = Depends(get_db)):
    return UserMapper.to_response(UserService.get_user_by_email(db, email))


@router.get("/auth")
def get_authenticated_user(user: dict = Depends(get_current_user)):
    """Profile of the member the bearer token was issued to."""
    return UserMapper.to_response(user)


@router.patch("/users/{user_id}")
@router.patch("/Users/{user_id}", include_in_schema=False)
def update_user(user_id: str, changes: UserUpdate, db: Database = Depends(get_db)):
    """Merge the supplied fields over the stored profile."""
    result = UserService.update_user(db, user_id, changes)
    return {"message": "User updated", "modifiedCount": result.modified_count}


@router.delete("/users/{user_id}")
@router.delete("/Users/{user_id}", include_in_schema=False)
def delete_user(user_id: str, db: Database = Depends(get_db)):
    UserService.delete_user(db, user_id)
    return {"message": "User deleted", "deletedCount": 1}
