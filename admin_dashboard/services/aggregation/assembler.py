"""
Wraps aggregation output in the response envelopes the dashboard reads.

Collections default to empty lists and counts to zero so the presentation
layer never has to branch on a missing field.
"""

from collections.abc import Sequence
from typing import Optional

from admin_dashboard.schemas.sales import SalesBucketResponse, SalesResponse
from admin_dashboard.schemas.waitlist import (
    EventGroupResponse,
    EventSummaryResponse,
    EventWaitlistResponse,
    GroupedWaitlistResponse,
    WaitlistEntryResponse,
)
from admin_dashboard.services.aggregation.types import (
    EventGroup,
    EventSummary,
    SalesSeries,
    WaitlistItem,
)


def assemble_grouped_waitlist(groups: Optional[Sequence[EventGroup]]) -> GroupedWaitlistResponse:
    return GroupedWaitlistResponse(
        leaderboard=[EventGroupResponse.model_validate(group) for group in groups or []],
        grouped=True,
    )


def assemble_event_waitlist(
    event: EventSummary, entries: Optional[Sequence[WaitlistItem]]
) -> EventWaitlistResponse:
    entries = list(entries or [])
    return EventWaitlistResponse(
        event=EventSummaryResponse.model_validate(event),
        waitlist=[WaitlistEntryResponse.model_validate(entry) for entry in entries],
        total_count=len(entries),
        grouped=False,
    )


def assemble_sales(series: Optional[SalesSeries]) -> SalesResponse:
    if series is None:
        return SalesResponse()
    return SalesResponse(
        data=[SalesBucketResponse.model_validate(bucket) for bucket in series.buckets],
        total_tickets=series.total_tickets,
    )
