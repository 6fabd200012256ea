# admin_dashboard/models/ticket.py
import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, func, text
from sqlalchemy.orm import relationship

from admin_dashboard.db.base_class import Base


class Ticket(Base):
    """A sold ticket. `created_at` is the sale timestamp."""
    __tablename__ = "tickets"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String, ForeignKey("events.id"), nullable=False, index=True)
    email = Column(String, nullable=False)
    name = Column(String, nullable=True)

    # 'standard' or 'vip'
    ticket_type = Column(String(20), nullable=False, default="standard", server_default="standard")
    scanned = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    scanned_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    event = relationship("Event", back_populates="sold_tickets")
