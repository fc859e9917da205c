"""User request/response schemas."""
import uuid
from pydantic import BaseModel, EmailStr, Field

from app.schemas.types import UtcDatetime


class RegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=100)


class UserResponse(BaseModel):
    id: uuid.UUID
    username: str
    email: str
    created_at: UtcDatetime
    updated_at: UtcDatetime

    class Config:
        from_attributes = True


class ProfileResponse(BaseModel):
    id: uuid.UUID
    email: str
    username: str

    class Config:
        from_attributes = True
