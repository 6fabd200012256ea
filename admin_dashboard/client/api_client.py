# admin_dashboard/client/api_client.py
"""
Async HTTP client for the admin dashboard API.

Every non-2xx response, and every 2xx response that is not JSON, is raised
as DashboardApiError with a message fit to show inline. Nothing is retried
automatically.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import BaseModel, ValidationError

from admin_dashboard.core.config import settings
from admin_dashboard.schemas.event import EventOption
from admin_dashboard.schemas.sales import SalesResponse
from admin_dashboard.schemas.ticket import TicketListResponse
from admin_dashboard.schemas.waitlist import EventWaitlistResponse, GroupedWaitlistResponse

logger = logging.getLogger(__name__)

WaitlistResult = Union[GroupedWaitlistResponse, EventWaitlistResponse]


class DashboardApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _parse(model: type[BaseModel], data: Any):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DashboardApiError("Invalid response format from server") from e


class DashboardApiClient:
    """
    Args:
        base_url: Service root, defaults to settings.API_BASE_URL
        token: Admin bearer token
        transport: Optional httpx transport (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=(base_url or settings.API_BASE_URL).rstrip("/"),
            headers=headers,
            timeout=timeout or settings.CLIENT_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def __aenter__(self) -> "DashboardApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None, *, default_error: str) -> Any:
        try:
            response = await self._client.get(path, params=params)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout calling {path}")
            raise DashboardApiError("Request timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"Error calling {path}: {e}")
            raise DashboardApiError(default_error) from e

        if not response.is_success:
            try:
                body = response.json()
                message = (body.get("error") if isinstance(body, dict) else None) or default_error
            except ValueError:
                message = f"HTTP {response.status_code}: {response.reason_phrase}"
            raise DashboardApiError(message, status_code=response.status_code)

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            raise DashboardApiError("Invalid response format from server", status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Malformed JSON body from {path}")
            raise DashboardApiError("Invalid response format from server", status_code=response.status_code) from e

    async def fetch_waitlist(self, event_id: Optional[str] = None) -> WaitlistResult:
        params = {"eventId": event_id} if event_id else None
        data = await self._get_json("/api/waitlist", params, default_error="Failed to fetch waitlist")
        if isinstance(data, dict) and data.get("grouped"):
            return _parse(GroupedWaitlistResponse, data)
        return _parse(EventWaitlistResponse, data)

    async def fetch_sales(self, event_id: str) -> SalesResponse:
        data = await self._get_json(f"/api/events/{event_id}/sales", default_error="Failed to fetch sales data")
        return _parse(SalesResponse, data)

    async def fetch_events(self) -> List[EventOption]:
        data = await self._get_json("/api/events", default_error="Failed to fetch events")
        return [_parse(EventOption, item) for item in data or []]

    async def fetch_tickets(
        self,
        event_id: Optional[str] = None,
        scanned: Optional[bool] = None,
        ticket_type: Optional[str] = None,
    ) -> TicketListResponse:
        params: Dict[str, Any] = {}
        if event_id:
            params["eventId"] = event_id
        if scanned is not None:
            params["scanned"] = "true" if scanned else "false"
        if ticket_type:
            params["ticketType"] = ticket_type
        data = await self._get_json("/api/tickets", params or None, default_error="Failed to fetch tickets")
        return _parse(TicketListResponse, data)
