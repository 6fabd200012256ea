"""
Tests for the client-side viewers.

The key property is last-requested-wins: a slow response for an older
filter must never overwrite the result of a newer one.
"""

import asyncio

import httpx
import pytest

from admin_dashboard.client import DashboardApiClient, SalesGraphViewer, WaitlistViewer
from admin_dashboard.client.viewers import RequestGeneration

EVENT_A = "aaaaaaaa-0000-4000-8000-000000000000"
EVENT_B = "bbbbbbbb-0000-4000-8000-000000000000"


def single_event_body(event_id, positions):
    return {
        "event": {"id": event_id, "name": event_id[:4]},
        "waitlist": [
            {"id": f"{event_id[:4]}-{p}", "email": f"{p}@example.com", "referral": None, "position": p}
            for p in positions
        ],
        "totalCount": len(positions),
        "grouped": False,
    }


def grouped_body():
    return {
        "leaderboard": [
            {"event": {"id": EVENT_A}, "waitlist": [], "totalCount": 0},
            {
                "event": {"id": EVENT_B},
                "waitlist": [{"id": "b-1", "email": "b@example.com", "position": 1}],
                "totalCount": 1,
            },
        ],
        "grouped": True,
    }


def make_client(handler):
    return DashboardApiClient(base_url="http://dashboard.test", transport=httpx.MockTransport(handler))


class TestRequestGeneration:

    def test_only_latest_is_current(self):
        generation = RequestGeneration()
        first = generation.next()
        second = generation.next()

        assert not generation.is_current(first)
        assert generation.is_current(second)


@pytest.mark.asyncio
async def test_select_event_then_all_events():
    def handler(request: httpx.Request):
        event_id = request.url.params.get("eventId")
        if event_id:
            return httpx.Response(200, json=single_event_body(event_id, [1, 2]))
        return httpx.Response(200, json=grouped_body())

    async with make_client(handler) as client:
        viewer = WaitlistViewer(client)

        assert await viewer.select_event(EVENT_A) is True
        assert viewer.is_grouped is False
        assert viewer.event.id == EVENT_A
        assert viewer.total_count == 2
        assert [e.position for e in viewer.waitlist] == [1, 2]

        assert await viewer.select_event("") is True
        assert viewer.is_grouped is True
        assert viewer.event is None
        assert len(viewer.waitlist) == 2
        assert viewer.total_count == 1
        assert viewer.is_loading is False


@pytest.mark.asyncio
async def test_stale_response_does_not_overwrite_newer_selection():
    release_a = asyncio.Event()

    async def handler(request: httpx.Request):
        event_id = request.url.params.get("eventId")
        if event_id == EVENT_A:
            await release_a.wait()
        return httpx.Response(200, json=single_event_body(event_id, [1] if event_id == EVENT_A else [1, 2, 3]))

    async with make_client(handler) as client:
        viewer = WaitlistViewer(client)

        slow = asyncio.create_task(viewer.select_event(EVENT_A))
        await asyncio.sleep(0)  # let the first request go out

        assert await viewer.select_event(EVENT_B) is True
        release_a.set()
        assert await slow is False

    assert viewer.selected_event_id == EVENT_B
    assert viewer.event.id == EVENT_B
    assert viewer.total_count == 3
    assert viewer.is_loading is False


@pytest.mark.asyncio
async def test_stale_error_is_ignored():
    release_a = asyncio.Event()

    async def handler(request: httpx.Request):
        event_id = request.url.params.get("eventId")
        if event_id == EVENT_A:
            await release_a.wait()
            return httpx.Response(500, json={"error": "Failed to fetch waitlist"})
        return httpx.Response(200, json=single_event_body(event_id, [1]))

    async with make_client(handler) as client:
        viewer = WaitlistViewer(client)

        slow = asyncio.create_task(viewer.select_event(EVENT_A))
        await asyncio.sleep(0)
        await viewer.select_event(EVENT_B)
        release_a.set()
        await slow

    assert viewer.error is None
    assert viewer.event.id == EVENT_B


@pytest.mark.asyncio
async def test_error_is_shown_and_refresh_retries():
    calls = {"count": 0}

    def handler(request):
        calls["count"] += 1
        if calls["count"] == 1:
            return httpx.Response(500, json={"error": "Failed to fetch waitlist"})
        return httpx.Response(200, json=grouped_body())

    async with make_client(handler) as client:
        viewer = WaitlistViewer(client)

        assert await viewer.refresh() is False
        assert viewer.error == "Failed to fetch waitlist"
        assert viewer.is_loading is False

        assert await viewer.refresh() is True
        assert viewer.error is None
        assert viewer.is_grouped is True

    assert calls["count"] == 2


@pytest.mark.asyncio
async def test_malformed_body_becomes_inline_error():
    def handler(request):
        return httpx.Response(200, content=b"{not json", headers={"content-type": "application/json"})

    async with make_client(handler) as client:
        viewer = WaitlistViewer(client)
        sales = SalesGraphViewer(client, EVENT_A)

        assert await viewer.refresh() is False
        assert await sales.load() is False

    assert viewer.error == "Invalid response format from server"
    assert viewer.is_loading is False
    assert sales.error == "Invalid response format from server"
    assert sales.is_loading is False


@pytest.mark.asyncio
async def test_sales_viewer_last_requested_wins():
    release_a = asyncio.Event()

    async def handler(request: httpx.Request):
        if EVENT_A in request.url.path:
            await release_a.wait()
            return httpx.Response(200, json={"data": [], "totalTickets": 0})
        return httpx.Response(
            200,
            json={"data": [{"time": "2025-10-01T10:00:00Z", "count": 5, "cumulative": 5}], "totalTickets": 5},
        )

    async with make_client(handler) as client:
        viewer = SalesGraphViewer(client, EVENT_A)

        slow = asyncio.create_task(viewer.load())
        await asyncio.sleep(0)
        assert await viewer.set_event(EVENT_B) is True
        release_a.set()
        assert await slow is False

    assert viewer.total_tickets == 5
    assert viewer.data[0].cumulative == 5


@pytest.mark.asyncio
async def test_sales_viewer_without_event_does_nothing():
    def handler(request):
        raise AssertionError("no request expected")

    async with make_client(handler) as client:
        viewer = SalesGraphViewer(client)

        assert await viewer.load() is False
        assert viewer.data == []
