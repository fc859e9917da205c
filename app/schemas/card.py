"""Card schemas.

``due_date`` stays a string on the way in; the position service parses it so
that a malformed date surfaces as ``InvalidDateError``.
"""
import uuid
from typing import Optional
from pydantic import BaseModel, Field

from app.schemas.types import UtcDatetime


class CardCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    position: Optional[int] = None
    due_date: Optional[str] = None
    cover_color: Optional[str] = Field(default=None, max_length=7)


class CardUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    position: Optional[int] = None
    due_date: Optional[str] = None
    cover_color: Optional[str] = Field(default=None, max_length=7)
    list_id: Optional[uuid.UUID] = None


class CardMove(BaseModel):
    list_id: uuid.UUID
    position: Optional[int] = None


class CardResponse(BaseModel):
    id: uuid.UUID
    title: str
    description: Optional[str]
    position: int
    due_date: Optional[UtcDatetime]
    cover_color: Optional[str]
    list_id: uuid.UUID
    created_at: UtcDatetime
    updated_at: UtcDatetime

    class Config:
        from_attributes = True
