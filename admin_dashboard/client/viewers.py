# admin_dashboard/client/viewers.py
"""
Client-side view state for the waitlist viewer and the sales graph.

Each fetch is tagged with a generation number when it starts. When it
finishes, its result is applied only if no newer fetch has started in the
meantime, so the last *requested* filter wins even when an older, slower
response arrives after a newer one.
"""

import logging
from typing import List, Optional, Union

from admin_dashboard.client.api_client import DashboardApiClient, DashboardApiError
from admin_dashboard.schemas.sales import SalesBucketResponse
from admin_dashboard.schemas.waitlist import (
    EventGroupResponse,
    EventSummaryResponse,
    GroupedWaitlistResponse,
    WaitlistEntryResponse,
)

logger = logging.getLogger(__name__)


class RequestGeneration:
    """Monotonic tag for in-flight requests; only the newest counts."""

    def __init__(self):
        self._current = 0

    def next(self) -> int:
        self._current += 1
        return self._current

    def is_current(self, generation: int) -> bool:
        return generation == self._current


class WaitlistViewer:
    """
    State behind the waitlist page.

    An empty ``selected_event_id`` means "all events", shown grouped.
    """

    def __init__(
        self,
        client: DashboardApiClient,
        initial_waitlist: Optional[List[Union[EventGroupResponse, WaitlistEntryResponse]]] = None,
        is_grouped: bool = True,
        initial_event_id: Optional[str] = None,
    ):
        self._client = client
        self._generation = RequestGeneration()
        self.selected_event_id: str = initial_event_id or ""
        self.waitlist: List[Union[EventGroupResponse, WaitlistEntryResponse]] = list(initial_waitlist or [])
        self.is_grouped = is_grouped
        self.event: Optional[EventSummaryResponse] = None
        self.total_count = 0
        self.is_loading = False
        self.error: Optional[str] = None

    async def select_event(self, event_id: Optional[str]) -> bool:
        self.selected_event_id = event_id or ""
        return await self._fetch()

    async def refresh(self) -> bool:
        """Re-runs the fetch for the current selection (the retry action)."""
        return await self._fetch()

    async def _fetch(self) -> bool:
        """Returns True if this fetch's result (or error) was applied."""
        generation = self._generation.next()
        event_id = self.selected_event_id
        self.is_loading = True
        self.error = None

        try:
            result = await self._client.fetch_waitlist(event_id or None)
        except DashboardApiError as e:
            if not self._generation.is_current(generation):
                return False
            logger.error(f"Error fetching waitlist: {e.message}")
            self.error = e.message
            self.is_loading = False
            return False

        if not self._generation.is_current(generation):
            logger.debug(f"Discarding stale waitlist response for event '{event_id}'")
            return False

        if isinstance(result, GroupedWaitlistResponse):
            self.waitlist = list(result.leaderboard)
            self.is_grouped = True
            self.event = None
            self.total_count = sum(group.total_count for group in result.leaderboard)
        else:
            self.waitlist = list(result.waitlist)
            self.is_grouped = False
            self.event = result.event
            self.total_count = result.total_count
        self.is_loading = False
        return True


class SalesGraphViewer:
    """State behind the hourly ticket-sales chart for one event."""

    def __init__(self, client: DashboardApiClient, event_id: Optional[str] = None):
        self._client = client
        self._generation = RequestGeneration()
        self.event_id = event_id
        self.data: List[SalesBucketResponse] = []
        self.total_tickets = 0
        self.is_loading = False
        self.error: Optional[str] = None

    async def set_event(self, event_id: str) -> bool:
        self.event_id = event_id
        return await self.load()

    async def refresh(self) -> bool:
        return await self.load()

    async def load(self) -> bool:
        if not self.event_id:
            return False

        generation = self._generation.next()
        event_id = self.event_id
        self.is_loading = True
        self.error = None

        try:
            result = await self._client.fetch_sales(event_id)
        except DashboardApiError as e:
            if not self._generation.is_current(generation):
                return False
            logger.error(f"Error fetching sales data for {event_id}: {e.message}")
            self.error = e.message
            self.is_loading = False
            return False

        if not self._generation.is_current(generation):
            logger.debug(f"Discarding stale sales response for event {event_id}")
            return False

        self.data = list(result.data)
        self.total_tickets = result.total_tickets
        self.is_loading = False
        return True
