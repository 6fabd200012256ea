# admin_dashboard/services/dashboard.py
"""
Initial props for the server-rendered dashboard pages.

Unlike the JSON API these loaders never fail toward the user: a denied
admin check or a failed fetch yields the empty default props, and the
client-side viewer takes over from there.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from admin_dashboard.api.deps import AdminVerification
from admin_dashboard.core.errors import FetchFailedError
from admin_dashboard.crud import crud_event, crud_waitlist
from admin_dashboard.schemas.event import EventOption
from admin_dashboard.schemas.pages import TicketsPageProps, WaitlistPageProps
from admin_dashboard.services.aggregation import assemble_grouped_waitlist, group_waitlist_rows

logger = logging.getLogger(__name__)


def load_event_options(db: Session, verification: AdminVerification) -> List[EventOption]:
    if not verification.authorized:
        return []
    try:
        return [EventOption.model_validate(obj) for obj in crud_event.event.get_options(db)]
    except FetchFailedError:
        logger.error("Failed to load event options for page props")
        return []


def load_waitlist_page(db: Session, verification: AdminVerification) -> WaitlistPageProps:
    """Every waitlist grouped by event, plus the event selector options."""
    if not verification.authorized:
        logger.info(f"Waitlist page requested without admin access: {verification.error}")
        return WaitlistPageProps()

    events = load_event_options(db, verification)
    try:
        groups = group_waitlist_rows(crud_waitlist.waitlist.get_joined_rows(db))
    except FetchFailedError:
        logger.error("Failed to load initial waitlist for page props")
        return WaitlistPageProps(events=events)

    return WaitlistPageProps(
        waitlist=assemble_grouped_waitlist(groups).leaderboard,
        is_grouped=True,
        events=events,
    )


def load_tickets_page(db: Session, verification: AdminVerification) -> TicketsPageProps:
    # No tickets until an event is picked; only the selector is populated.
    return TicketsPageProps(events=load_event_options(db, verification))
