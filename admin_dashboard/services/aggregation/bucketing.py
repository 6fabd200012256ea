"""
Hourly ticket-sales bucketing.

Bucket model:
- Every sale falls in the clock hour that contains it (UTC)
- Buckets are DENSE: every hour from the first sale's hour to the last
  sale's hour is present, with ``count = 0`` where nothing sold
- ``cumulative`` is a running integer sum in chronological order, so the
  last bucket's value is the total number of sales
"""

import logging
from collections import Counter
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from admin_dashboard.services.aggregation.types import SalesBucket, SalesSeries

logger = logging.getLogger(__name__)

BUCKET_WIDTH = timedelta(hours=1)

# Spans longer than this (about 90 days) are still filled, but logged
LARGE_SPAN_BUCKETS = 24 * 90


def to_utc(ts: datetime) -> datetime:
    """Naive timestamps are taken to be UTC already."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def truncate_to_hour(ts: datetime) -> datetime:
    return to_utc(ts).replace(minute=0, second=0, microsecond=0)


def bucket_sales(timestamps: Iterable[datetime]) -> SalesSeries:
    """
    Fold sale timestamps into a dense, chronological hourly series.

    Input order does not matter; it is sorted here even though the query
    layer already returns it ascending.
    """
    ordered = sorted(to_utc(ts) for ts in timestamps)
    if not ordered:
        return SalesSeries()

    counts = Counter(truncate_to_hour(ts) for ts in ordered)
    first = truncate_to_hour(ordered[0])
    last = truncate_to_hour(ordered[-1])

    span = int((last - first) / BUCKET_WIDTH) + 1
    if span > LARGE_SPAN_BUCKETS:
        logger.warning(
            f"Sales span of {span} hourly buckets from {first.isoformat()} to {last.isoformat()}; "
            "check for stray sale timestamps"
        )

    buckets: list[SalesBucket] = []
    running = 0
    hour = first
    while hour <= last:
        count = counts.get(hour, 0)
        running += count
        buckets.append(SalesBucket(time=hour, count=count, cumulative=running))
        hour += BUCKET_WIDTH

    return SalesSeries(buckets=buckets, total_tickets=running)
