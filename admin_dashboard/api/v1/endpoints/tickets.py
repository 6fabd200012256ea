# admin_dashboard/api/v1/endpoints/tickets.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from admin_dashboard.api import deps
from admin_dashboard.core.config import settings
from admin_dashboard.core.errors import NotFoundError
from admin_dashboard.core.limiter import limiter
from admin_dashboard.crud import crud_event, crud_ticket
from admin_dashboard.db.session import get_db
from admin_dashboard.schemas.ticket import TicketListResponse, TicketResponse
from admin_dashboard.utils.validators import validate_event_id, validate_ticket_type

router = APIRouter(tags=["Tickets"])


@router.get("/tickets", response_model=TicketListResponse)
@limiter.limit(settings.RATE_LIMIT)
def read_tickets(
    request: Request,
    event_id: Optional[str] = Query(default=None, alias="eventId"),
    scanned: Optional[bool] = Query(default=None),
    ticket_type: Optional[str] = Query(default=None, alias="ticketType"),
    db: Session = Depends(get_db),
    admin: deps.AdminVerification = Depends(deps.require_admin),
):
    """
    **[ADMIN]** Tickets for one event, filterable by scan state and type.

    Nothing is listed until an event is selected.
    """
    if not event_id:
        return TicketListResponse()

    validate_event_id(event_id)
    if ticket_type:
        ticket_type = validate_ticket_type(ticket_type)

    if crud_event.event.get_summary(db, event_id=event_id) is None:
        raise NotFoundError("Event not found", context={"event_id": event_id})

    result = crud_ticket.ticket.get_filtered_with_stats(
        db, event_id=event_id, scanned=scanned, ticket_type=ticket_type
    )
    tickets = [TicketResponse.model_validate(obj) for obj in result.pop("tickets")]
    return TicketListResponse(tickets=tickets, **result)
