"""List model.

Named ``BoardList`` in Python so it does not shadow the builtin; the table is
still ``lists``.
"""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from app.db.base import Base


class BoardList(Base):
    __tablename__ = "lists"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(50), nullable=False)
    position = Column(Integer, nullable=False)
    board_id = Column(Uuid(as_uuid=True), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    board = relationship("Board", back_populates="lists")
    cards = relationship(
        "Card",
        back_populates="list",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Card.position",
    )

    __table_args__ = (
        UniqueConstraint("board_id", "position", name="uq_lists_board_position"),
    )
