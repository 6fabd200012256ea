# admin_dashboard/schemas/token.py
from typing import Optional

from pydantic import BaseModel


class TokenPayload(BaseModel):
    sub: str  # standard subject claim (user ID)
    email: Optional[str] = None
    exp: int

    model_config = {"from_attributes": True}
