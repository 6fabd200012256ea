# admin_dashboard/crud/crud_ticket.py
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from admin_dashboard.core.errors import FetchFailedError
from admin_dashboard.models.ticket import Ticket

logger = logging.getLogger(__name__)


class CRUDTicket:

    def get_sale_timestamps(self, db: Session, *, event_id: str) -> List[datetime]:
        """Sale timestamps for one event, oldest first."""
        try:
            rows = (
                db.query(Ticket.created_at)
                .filter(Ticket.event_id == event_id)
                .order_by(Ticket.created_at.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception(f"Sales fetch failed for event {event_id}")
            raise FetchFailedError("Failed to fetch sales data", context={"event_id": event_id}) from e

        return [row[0] for row in rows if row[0] is not None]

    def get_filtered_with_stats(
        self,
        db: Session,
        *,
        event_id: str,
        scanned: Optional[bool] = None,
        ticket_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Tickets for one event matching the filters, plus event-wide counts.

        ``total`` and the per-status/per-type counts cover the whole event;
        ``filtered_count`` covers only the returned tickets.
        """
        try:
            stats = (
                db.query(
                    func.count(Ticket.id),
                    func.coalesce(func.sum(case((Ticket.scanned.is_(True), 1), else_=0)), 0),
                    func.coalesce(func.sum(case((Ticket.ticket_type == "vip", 1), else_=0)), 0),
                )
                .filter(Ticket.event_id == event_id)
                .one()
            )

            query = db.query(Ticket).filter(Ticket.event_id == event_id)
            if scanned is not None:
                query = query.filter(Ticket.scanned.is_(scanned))
            if ticket_type:
                query = query.filter(Ticket.ticket_type == ticket_type)
            tickets = query.order_by(Ticket.created_at.desc()).all()
        except SQLAlchemyError as e:
            logger.exception(f"Ticket fetch failed for event {event_id}")
            raise FetchFailedError("Failed to fetch tickets", context={"event_id": event_id}) from e

        total, scanned_count, vip_count = (int(value or 0) for value in stats)
        return {
            "tickets": tickets,
            "total": total,
            "scanned_count": scanned_count,
            "unscanned_count": total - scanned_count,
            "filtered_count": len(tickets),
            "standard_count": total - vip_count,
            "vip_count": vip_count,
        }


ticket = CRUDTicket()
