from fastapi.testclient import TestClient

from tests.utils.factories import create_event, create_waitlist_entry


def test_waitlist_page_props(client: TestClient, db_session):
    event = create_event(db_session, name="Gala")
    create_waitlist_entry(db_session, event.id, position=1)

    response = client.get("/api/pages/waitlist")

    assert response.status_code == 200
    data = response.json()
    assert data["isGrouped"] is True
    assert data["events"] == [{"id": event.id, "name": "Gala"}]
    assert data["waitlist"][0]["totalCount"] == 1


def test_waitlist_page_props_denied_are_empty(anonymous_client: TestClient, db_session):
    create_event(db_session)

    response = anonymous_client.get("/api/pages/waitlist")

    assert response.status_code == 200
    assert response.json() == {"waitlist": [], "isGrouped": True, "events": []}


def test_tickets_page_props(client: TestClient, db_session):
    event = create_event(db_session, name="Gala")

    response = client.get("/api/pages/tickets")

    assert response.status_code == 200
    data = response.json()
    assert data["tickets"] == []
    assert data["total"] == 0
    assert data["events"] == [{"id": event.id, "name": "Gala"}]


def test_tickets_page_props_denied_are_empty(anonymous_client: TestClient):
    response = anonymous_client.get("/api/pages/tickets")

    assert response.status_code == 200
    assert response.json()["events"] == []
