# File: authapi/schemas/user.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# bcrypt ignores everything past this many bytes
BCRYPT_MAX_PASSWORD_BYTES = 72


class UserBase(BaseModel):
    email: EmailStr


class UserCreate(UserBase):
    name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("password")
    @classmethod
    def check_password_length(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return v


class UserLogin(UserBase):
    password: str = Field(..., min_length=1)


class UserRead(UserBase):
    id: int
    name: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# -----------------------------
# Response envelopes
# -----------------------------

class RegisterResponse(BaseModel):
    success: bool = True
    message: str
    data: UserRead


class LoginResponse(BaseModel):
    success: bool = True
    token: str
