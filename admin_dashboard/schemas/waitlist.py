# admin_dashboard/schemas/waitlist.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class EventSummaryResponse(BaseModel):
    id: str
    name: Optional[str] = None
    capacity: int = 0
    reserved: Optional[int] = None
    tickets: Optional[int] = None
    # Read from EventSummary.sold: `tickets`, falling back to `reserved`
    sold: int = 0
    start_time_date: Optional[datetime] = None
    venue: Optional[str] = None

    model_config = {"from_attributes": True}


class WaitlistEntryResponse(BaseModel):
    id: str
    email: str
    referral: Optional[str] = None
    position: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class EventGroupResponse(BaseModel):
    event: EventSummaryResponse
    waitlist: List[WaitlistEntryResponse] = Field(default_factory=list)
    total_count: int = Field(default=0, alias="totalCount")

    model_config = {"populate_by_name": True, "from_attributes": True}


class GroupedWaitlistResponse(BaseModel):
    """All waitlists, one group per event"""
    leaderboard: List[EventGroupResponse] = Field(default_factory=list)
    grouped: Literal[True] = True


class EventWaitlistResponse(BaseModel):
    """A single event's waitlist"""
    event: EventSummaryResponse
    waitlist: List[WaitlistEntryResponse] = Field(default_factory=list)
    total_count: int = Field(default=0, alias="totalCount")
    grouped: Literal[False] = False

    model_config = {"populate_by_name": True}
