# admin_dashboard/crud/crud_waitlist.py
"""
Waitlist queries.

Joined rows are returned as plain mappings with the related event nested
under ``events``; the aggregation layer normalizes them.
"""
import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from admin_dashboard.core.errors import FetchFailedError
from admin_dashboard.crud.crud_event import event_to_mapping
from admin_dashboard.models.event import Event
from admin_dashboard.models.waitlist import WaitlistEntry
from admin_dashboard.services.aggregation.types import WaitlistItem

logger = logging.getLogger(__name__)


class CRUDWaitlist:

    def get_joined_rows(self, db: Session) -> List[dict]:
        """
        Every waitlist row with its event, ordered ``event_id`` desc then
        ``position`` asc. Rows whose event is gone come back with
        ``events`` set to None.
        """
        try:
            results = (
                db.query(WaitlistEntry, Event)
                .outerjoin(Event, Event.id == WaitlistEntry.event_id)
                .order_by(WaitlistEntry.event_id.desc(), WaitlistEntry.position.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Waitlist fetch failed")
            raise FetchFailedError("Failed to fetch waitlist") from e

        return [
            {
                "id": entry.id,
                "email": entry.email,
                "referral": entry.referral,
                "position": entry.position,
                "created_at": entry.created_at,
                "event_id": entry.event_id,
                "events": event_to_mapping(event_obj),
            }
            for entry, event_obj in results
        ]

    def get_for_event(self, db: Session, *, event_id: str) -> List[WaitlistItem]:
        """One event's waitlist in ascending position order."""
        try:
            entries = (
                db.query(WaitlistEntry)
                .filter(WaitlistEntry.event_id == event_id)
                .order_by(WaitlistEntry.position.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception(f"Waitlist fetch failed for event {event_id}")
            raise FetchFailedError("Failed to fetch waitlist", context={"event_id": event_id}) from e

        return [
            WaitlistItem(
                id=entry.id,
                email=entry.email,
                referral=entry.referral,
                position=entry.position,
                created_at=entry.created_at,
            )
            for entry in entries
        ]


waitlist = CRUDWaitlist()
