"""Pydantic schemas for member accounts and sessions."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional, Union

from domain.enums import DEFAULT_ROLE


class UserCreate(BaseModel):
    """Registration payload. Unknown profile fields are stored as sent."""

    email: str = Field(..., min_length=1, description="Login email, unique per member")
    password: str = Field(..., min_length=1, description="Plaintext password, hashed before storage")
    name: Optional[str] = None
    phone: Optional[str] = None
    role: str = Field(default=DEFAULT_ROLE, description="Role embedded in session tokens")
    rented_sit: Optional[Union[int, str]] = Field(None, description="Seat rented by the member")
    sit_rent: Optional[float] = Field(None, description="Monthly rent for the seat")
    joining_date: Optional[str] = Field(None, description="Date the member joined (YYYY-MM-DD)")

    model_config = ConfigDict(extra="allow", allow_inf_nan=False)


class UserUpdate(BaseModel):
    """Partial profile update. Absent or empty fields keep the stored value."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    rented_sit: Optional[Union[int, str]] = None
    sit_rent: Optional[float] = None
    joining_date: Optional[str] = None

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenClaims(BaseModel):
    """Identity decoded from a verified bearer token"""

    email: str
    role: Optional[str] = None
    exp: Optional[int] = None
    iat: Optional[int] = None


class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str
    user: Dict[str, Any]
