"""AI scorer output: one judgment per candidate of the batch."""

from pydantic import BaseModel, Field


class AIScore(BaseModel):
    """Model-produced score for one candidate.

    Not stable across calls with identical input.
    """
    candidate_id: str
    ai_score: float = Field(ge=0, le=100)
    match_reason: str = ""
