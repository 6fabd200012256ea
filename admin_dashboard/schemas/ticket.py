# admin_dashboard/schemas/ticket.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

TicketType = Literal["standard", "vip"]


class TicketResponse(BaseModel):
    id: str
    event_id: str
    email: str
    name: Optional[str] = None
    ticket_type: str
    scanned: bool
    scanned_at: Optional[datetime] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class TicketListResponse(BaseModel):
    tickets: List[TicketResponse] = Field(default_factory=list)
    total: int = 0
    scanned_count: int = Field(default=0, alias="scannedCount")
    unscanned_count: int = Field(default=0, alias="unscannedCount")
    filtered_count: int = Field(default=0, alias="filteredCount")
    standard_count: int = Field(default=0, alias="standardCount")
    vip_count: int = Field(default=0, alias="vipCount")

    model_config = {"populate_by_name": True}
