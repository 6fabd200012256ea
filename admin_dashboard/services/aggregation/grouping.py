"""
Waitlist grouping: fold flat joined rows into one group per event.

Precondition: rows arrive sorted the way the query layer sorts them
(``event_id`` desc, ``position`` asc). Groups come out in first-seen order
and entries keep their input order within a group; nothing is re-sorted or
deduplicated.
"""

from collections.abc import Iterable, Mapping

from admin_dashboard.services.aggregation.normalizer import normalize_waitlist_row
from admin_dashboard.services.aggregation.types import EventGroup


def group_waitlist_rows(rows: Iterable[Mapping]) -> list[EventGroup]:
    groups: dict[str, EventGroup] = {}

    for row in rows:
        normalized = normalize_waitlist_row(row)
        if normalized is None:
            continue
        item, event = normalized

        event_id = row["event_id"]
        group = groups.get(event_id)
        if group is None:
            # First occurrence fixes both the position and the event summary
            group = groups[event_id] = EventGroup(event=event)
        group.append(item)

    return list(groups.values())
