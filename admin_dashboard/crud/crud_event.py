# admin_dashboard/crud/crud_event.py
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from admin_dashboard.core.errors import FetchFailedError
from admin_dashboard.models.event import Event
from admin_dashboard.services.aggregation.types import EventSummary

logger = logging.getLogger(__name__)

# Columns exposed with a waitlist group
SUMMARY_FIELDS = ("id", "name", "capacity", "reserved", "tickets", "start_time_date", "venue")


def event_to_mapping(event: Optional[Event]) -> Optional[dict]:
    if event is None:
        return None
    return {field: getattr(event, field) for field in SUMMARY_FIELDS}


class CRUDEvent:

    def get_summary(self, db: Session, *, event_id: str) -> Optional[EventSummary]:
        """Returns the event's summary, or None if no such event exists."""
        try:
            obj = db.query(Event).filter(Event.id == event_id).first()
        except SQLAlchemyError as e:
            logger.exception(f"Event fetch failed for event {event_id}")
            raise FetchFailedError("Failed to fetch event", context={"event_id": event_id}) from e

        if obj is None:
            return None
        return EventSummary(**event_to_mapping(obj))

    def get_options(self, db: Session) -> List[Event]:
        """All events, newest start first, for filter selectors."""
        try:
            return (
                db.query(Event)
                .order_by(Event.start_time_date.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Events fetch failed")
            raise FetchFailedError("Failed to fetch events") from e


event = CRUDEvent()
