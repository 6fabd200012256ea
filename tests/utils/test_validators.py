import pytest

from admin_dashboard.core.errors import InvalidIdentifierError
from admin_dashboard.utils.validators import is_valid_uuid, validate_event_id, validate_ticket_type


@pytest.mark.parametrize(
    "value",
    [
        "3f1c2a9e-0b7d-4c1e-9a55-2d6f0e8b7c41",
        "3F1C2A9E-0B7D-4C1E-9A55-2D6F0E8B7C41",
    ],
)
def test_valid_uuids(value):
    assert is_valid_uuid(value)
    assert validate_event_id(value) == value


@pytest.mark.parametrize(
    "value",
    ["", None, "not-a-uuid", "3f1c2a9e0b7d4c1e9a552d6f0e8b7c41", "3f1c2a9e-0b7d-4c1e-9a55-2d6f0e8b7c41; DROP TABLE events"],
)
def test_invalid_uuids(value):
    assert not is_valid_uuid(value)


def test_validate_event_id_raises_400():
    with pytest.raises(InvalidIdentifierError) as exc_info:
        validate_event_id("evt_abc123")

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Invalid event ID format"


def test_validate_ticket_type():
    assert validate_ticket_type("VIP") == "vip"
    with pytest.raises(InvalidIdentifierError):
        validate_ticket_type("backstage")
