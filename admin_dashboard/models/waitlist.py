import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import relationship

from admin_dashboard.db.base_class import Base


class WaitlistEntry(Base):
    __tablename__ = "waitlist"
    __table_args__ = (UniqueConstraint("event_id", "position", name="uq_waitlist_event_position"),)

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, nullable=False)
    referral = Column(String, nullable=True)
    position = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    # Nullable: legacy signups may have lost their event link
    event_id = Column(String, ForeignKey("events.id"), nullable=True, index=True)

    event = relationship("Event", back_populates="waitlist_entries")
