from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class SignupRequest(BaseModel):
    """Request schema for account signup."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Either username or email identifies the account."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    token: str


class UserUpdateRequest(BaseModel):
    """Only the fields sent are updated; the password is always re-hashed."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    password: str
    created_at: datetime
    updated_at: datetime


class UserCountResponse(BaseModel):
    totalUsers: int
