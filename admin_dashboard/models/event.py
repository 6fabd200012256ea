# admin_dashboard/models/event.py
import uuid

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func
from sqlalchemy.orm import relationship

from admin_dashboard.db.base_class import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    name = Column(String, nullable=True)
    desc = Column(Text, nullable=True)
    tagline = Column(String, nullable=True)
    capacity = Column(Integer, nullable=False, default=0)
    # Sold count. `tickets` is the newer column; older rows only have `reserved`.
    reserved = Column(Integer, nullable=True)
    tickets = Column(Integer, nullable=True)
    venue = Column(String, nullable=True)
    venue_link = Column(String, nullable=True)
    start_time_date = Column(DateTime(timezone=True), nullable=True)
    release_date = Column(DateTime(timezone=True), nullable=True)
    banner = Column(Boolean, nullable=True)
    route = Column(String, nullable=True)

    waitlist_entries = relationship("WaitlistEntry", back_populates="event")
    sold_tickets = relationship("Ticket", back_populates="event")
