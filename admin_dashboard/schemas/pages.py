"""Initial props for the server-rendered dashboard pages"""
from typing import List

from pydantic import BaseModel, Field

from admin_dashboard.schemas.event import EventOption
from admin_dashboard.schemas.ticket import TicketListResponse
from admin_dashboard.schemas.waitlist import EventGroupResponse


class WaitlistPageProps(BaseModel):
    waitlist: List[EventGroupResponse] = Field(default_factory=list)
    is_grouped: bool = Field(default=True, alias="isGrouped")
    events: List[EventOption] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class TicketsPageProps(TicketListResponse):
    events: List[EventOption] = Field(default_factory=list)
