"""Board schemas."""
import uuid
from typing import Optional
from pydantic import BaseModel, Field

from app.schemas.types import UtcDatetime


class BoardCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    background_color: Optional[str] = Field(default=None, max_length=7)


class BoardUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    background_color: Optional[str] = Field(default=None, max_length=7)


class BoardResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: Optional[str]
    background_color: Optional[str]
    user_id: uuid.UUID
    created_at: UtcDatetime
    updated_at: UtcDatetime

    class Config:
        from_attributes = True
