"""
Per-request aggregate types produced by the aggregation engines.

None of these are persisted. They are built fresh for each request and
discarded with it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class EventSummary:
    id: str
    name: Optional[str] = None
    capacity: int = 0
    reserved: Optional[int] = None
    tickets: Optional[int] = None
    start_time_date: Optional[datetime] = None
    venue: Optional[str] = None

    @property
    def sold(self) -> int:
        """Sold count, preferring the newer `tickets` column over `reserved`."""
        if self.tickets is not None:
            return self.tickets
        return self.reserved or 0


@dataclass
class WaitlistItem:
    id: str
    email: str
    referral: Optional[str]
    position: int
    created_at: Optional[datetime]


@dataclass
class EventGroup:
    event: EventSummary
    waitlist: list[WaitlistItem] = field(default_factory=list)
    total_count: int = 0

    def append(self, item: WaitlistItem) -> None:
        self.waitlist.append(item)
        self.total_count += 1


@dataclass
class SalesBucket:
    time: datetime      # hour-aligned, UTC
    count: int          # sales in [time, time + 1h)
    cumulative: int     # running total up to and including this bucket


@dataclass
class SalesSeries:
    buckets: list[SalesBucket] = field(default_factory=list)
    total_tickets: int = 0
