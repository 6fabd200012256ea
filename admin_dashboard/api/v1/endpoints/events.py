# admin_dashboard/api/v1/endpoints/events.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from admin_dashboard.api import deps
from admin_dashboard.core.config import settings
from admin_dashboard.core.errors import NotFoundError
from admin_dashboard.core.limiter import limiter
from admin_dashboard.crud import crud_event, crud_ticket
from admin_dashboard.db.session import get_db
from admin_dashboard.schemas.event import EventOption
from admin_dashboard.schemas.sales import SalesResponse
from admin_dashboard.services.aggregation import assemble_sales, bucket_sales
from admin_dashboard.utils.validators import validate_event_id

router = APIRouter(prefix="/events", tags=["Events"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[EventOption])
@limiter.limit(settings.RATE_LIMIT)
def list_event_options(
    request: Request,
    db: Session = Depends(get_db),
    admin: deps.AdminVerification = Depends(deps.require_admin),
):
    """**[ADMIN]** Event id/name pairs for filter selectors, newest first."""
    return crud_event.event.get_options(db)


@router.get("/{event_id}/sales", response_model=SalesResponse)
@limiter.limit(settings.RATE_LIMIT)
def read_ticket_sales(
    event_id: str,
    request: Request,
    db: Session = Depends(get_db),
    admin: deps.AdminVerification = Depends(deps.require_admin),
):
    """
    **[ADMIN]** Hourly ticket sales for one event.

    Every hour between the first and last sale is present (zero-filled),
    with a running cumulative total.
    """
    validate_event_id(event_id)

    if crud_event.event.get_summary(db, event_id=event_id) is None:
        raise NotFoundError("Event not found", context={"event_id": event_id})

    timestamps = crud_ticket.ticket.get_sale_timestamps(db, event_id=event_id)
    series = bucket_sales(timestamps)
    logger.info(
        f"Admin {admin.email} loaded sales for event {event_id}: "
        f"{series.total_tickets} tickets across {len(series.buckets)} hours"
    )
    return assemble_sales(series)
