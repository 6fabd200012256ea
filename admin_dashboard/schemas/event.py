from typing import Optional

from pydantic import BaseModel


class EventOption(BaseModel):
    """Minimal event shape for filter selectors"""
    id: str
    name: Optional[str] = None

    model_config = {"from_attributes": True}
