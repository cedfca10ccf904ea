"""Follow and score Pydantic schemas."""

from pydantic import BaseModel, Field


class FollowRequest(BaseModel):
    username: str = Field(..., min_length=1, description="User to follow")


class ScoreUpdate(BaseModel):
    score: float = Field(..., allow_inf_nan=False, description="New score value")
