from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class SalesBucketResponse(BaseModel):
    time: datetime
    count: int
    cumulative: int

    model_config = {"from_attributes": True}


class SalesResponse(BaseModel):
    data: List[SalesBucketResponse] = Field(default_factory=list)
    total_tickets: int = Field(default=0, alias="totalTickets")

    model_config = {"populate_by_name": True}
