"""
Row normalization for joined waitlist rows.

The query layer hands back one mapping per waitlist row with the related
event nested under ``events``. Depending on how the join was resolved that
relation is a mapping, a one-element sequence holding the mapping, or
missing entirely. This module collapses all of those into one canonical
(entry, event) pair, or drops the row.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from admin_dashboard.services.aggregation.types import EventSummary, WaitlistItem

logger = logging.getLogger(__name__)

RELATION_KEY = "events"


def resolve_relation(value: Any) -> Optional[Mapping]:
    """Returns the single related record, or None when there isn't one."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if not value:
            return None
        first = value[0]
        return first if isinstance(first, Mapping) else None
    return None


def to_event_summary(record: Mapping) -> EventSummary:
    return EventSummary(
        id=record["id"],
        name=record.get("name"),
        capacity=record.get("capacity") or 0,
        reserved=record.get("reserved"),
        tickets=record.get("tickets"),
        start_time_date=record.get("start_time_date"),
        venue=record.get("venue"),
    )


def to_waitlist_item(row: Mapping) -> WaitlistItem:
    return WaitlistItem(
        id=row.get("id"),
        email=row.get("email"),
        referral=row.get("referral"),
        position=row.get("position"),
        created_at=row.get("created_at"),
    )


def normalize_waitlist_row(row: Mapping) -> Optional[tuple[WaitlistItem, EventSummary]]:
    """
    Canonicalize one joined waitlist row.

    Returns None (and logs at DEBUG) for rows without an ``event_id`` or
    without a usable related event. Skipping is not an error.
    """
    if not row.get("event_id"):
        logger.debug(f"Dropping waitlist row {row.get('id')}: no event_id")
        return None

    record = resolve_relation(row.get(RELATION_KEY))
    if record is None or not record.get("id"):
        logger.debug(f"Dropping waitlist row {row.get('id')}: related event missing")
        return None

    return to_waitlist_item(row), to_event_summary(record)
