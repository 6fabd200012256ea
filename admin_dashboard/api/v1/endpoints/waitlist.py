# admin_dashboard/api/v1/endpoints/waitlist.py
import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from admin_dashboard.api import deps
from admin_dashboard.core.config import settings
from admin_dashboard.core.errors import NotFoundError
from admin_dashboard.core.limiter import limiter
from admin_dashboard.crud import crud_event, crud_waitlist
from admin_dashboard.db.session import get_db
from admin_dashboard.schemas.waitlist import EventWaitlistResponse, GroupedWaitlistResponse
from admin_dashboard.services.aggregation import (
    assemble_event_waitlist,
    assemble_grouped_waitlist,
    group_waitlist_rows,
)
from admin_dashboard.utils.validators import validate_event_id

router = APIRouter(tags=["Waitlist"])
logger = logging.getLogger(__name__)


@router.get(
    "/waitlist",
    response_model=Union[EventWaitlistResponse, GroupedWaitlistResponse],
)
@limiter.limit(settings.RATE_LIMIT)
def read_waitlist(
    request: Request,
    event_id: Optional[str] = Query(default=None, alias="eventId"),
    db: Session = Depends(get_db),
    admin: deps.AdminVerification = Depends(deps.require_admin),
):
    """
    **[ADMIN]** Waitlist viewer data.

    - With `eventId`: that event's waitlist in position order (`grouped: false`)
    - Without: every waitlist grouped by event (`grouped: true`)

    **Errors**:
    - 400: Malformed `eventId`
    - 401: Not an admin
    - 404: No such event
    - 500: Fetch failed
    """
    if event_id:
        validate_event_id(event_id)

        event = crud_event.event.get_summary(db, event_id=event_id)
        if event is None:
            raise NotFoundError("Event not found", context={"event_id": event_id})

        entries = crud_waitlist.waitlist.get_for_event(db, event_id=event_id)
        logger.info(f"Admin {admin.email} loaded waitlist for event {event_id} ({len(entries)} entries)")
        return assemble_event_waitlist(event, entries)

    rows = crud_waitlist.waitlist.get_joined_rows(db)
    groups = group_waitlist_rows(rows)
    logger.info(f"Admin {admin.email} loaded grouped waitlist ({len(rows)} rows, {len(groups)} events)")
    return assemble_grouped_waitlist(groups)
