"""List schemas."""
import uuid
from typing import List, Optional
from pydantic import BaseModel, Field

from app.schemas.card import CardResponse
from app.schemas.types import UtcDatetime


class ListCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    position: Optional[int] = None


class ListUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    position: Optional[int] = None


class ListResponse(BaseModel):
    id: uuid.UUID
    name: str
    position: int
    board_id: uuid.UUID
    created_at: UtcDatetime
    cards: List[CardResponse] = []

    class Config:
        from_attributes = True
