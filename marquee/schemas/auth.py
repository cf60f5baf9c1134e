from pydantic import BaseModel, EmailStr, Field, field_validator, ConfigDict
from datetime import datetime
from typing import List, Optional
import re


def ensure_password_strength(password: str) -> str:
    """Validate password complexity requirements."""
    if len(password) > 72:
        raise ValueError('Password cannot be longer than 72 characters')
    if not re.search(r'[A-Z]', password):
        raise ValueError('Password must contain uppercase letter')
    if not re.search(r'[a-z]', password):
        raise ValueError('Password must contain lowercase letter')
    if not re.search(r'[0-9]', password):
        raise ValueError('Password must contain digit')
    return password


# Schema for user registration
class UserRegister(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    nickname: Optional[str] = Field(None, max_length=100)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        return ensure_password_strength(v)

    @field_validator('nickname')
    @classmethod
    def blank_nickname_is_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v


# Schema for user login
class UserLogin(BaseModel):
    email: EmailStr
    password: str


# Schema for user response
class UserResponse(BaseModel):
    id: str
    email: str
    nickname: Optional[str] = None
    display_name: str
    roles: List[str] = []
    is_active: bool
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse
