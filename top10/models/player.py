# --- Pydantic Models ---
from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, StrictInt, TypeAdapter, field_validator
from typing import List, Union

class PlayerRequest(BaseModel):
    name: str = Field(..., max_length=100)
    score: int = Field(0, ge=0)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('name not null')
        return v.strip()

class PlayerScoreEntry(BaseModel):
    """One leaderboard record as served by /players/find_score_top10.

    Unknown keys such as ``id`` are ignored. Scores must be JSON numbers:
    strings, booleans, NaN and Infinity are rejected.
    """
    model_config = ConfigDict(strict=True)

    name: str
    score: Union[StrictInt, FiniteFloat]

top10_adapter = TypeAdapter(List[PlayerScoreEntry])
