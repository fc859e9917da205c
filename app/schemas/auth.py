"""Authentication schemas."""
import uuid
from pydantic import BaseModel, EmailStr


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserIdentity(BaseModel):
    """Minimal identity returned by a successful credential check."""

    id: uuid.UUID
    email: str


class MessageResponse(BaseModel):
    message: str
