"""Card model."""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, Integer, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from app.db.base import Base


class Card(Base):
    """Leaf work item, ordered by ``position`` within its list."""

    __tablename__ = "cards"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    position = Column(Integer, nullable=False)
    due_date = Column(DateTime)
    cover_color = Column(String(7), default="#ffffff")
    list_id = Column(Uuid(as_uuid=True), ForeignKey("lists.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    list = relationship("BoardList", back_populates="cards")

    __table_args__ = (
        UniqueConstraint("list_id", "position", name="uq_cards_list_position"),
    )
