# admin_dashboard/utils/validators.py
"""
Input validation utilities for security and data integrity.

Identifiers are checked before any query is built, so a malformed id never
reaches the database.
"""

import re
from typing import Optional

from admin_dashboard.core.errors import InvalidIdentifierError

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)

VALID_TICKET_TYPES = {"standard", "vip"}


def is_valid_uuid(value: Optional[str]) -> bool:
    if not value:
        return False
    return UUID_PATTERN.fullmatch(value) is not None


def validate_event_id(event_id: str) -> str:
    """
    Validate event_id format.

    Expected format: canonical UUID, e.g. 3f1c2a9e-0b7d-4c1e-9a55-2d6f0e8b7c41

    Raises:
        InvalidIdentifierError: If format is invalid
    """
    if not is_valid_uuid(event_id):
        raise InvalidIdentifierError(
            "Invalid event ID format", context={"event_id": event_id}
        )
    return event_id


def validate_ticket_type(ticket_type: str) -> str:
    """Returns the lowercased ticket type, or raises InvalidIdentifierError."""
    normalized = ticket_type.lower()
    if normalized not in VALID_TICKET_TYPES:
        raise InvalidIdentifierError(
            f"Invalid ticket type. Must be one of: {', '.join(sorted(VALID_TICKET_TYPES))}"
        )
    return normalized
