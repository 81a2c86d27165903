from pydantic import BaseModel
from typing import Literal

class PlayerResponse(BaseModel):
    id: int
    name: str
    score: int

class HealthResponse(BaseModel):
    status: Literal["healthy", "unavailable"]
    uptime: float
    store: str
    store_open: bool
