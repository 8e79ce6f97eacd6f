from pydantic import BaseModel, ConfigDict, Field
from typing import List


class LeaderboardEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rank: int
    display_name: str = Field(alias="displayName")
    points: int
    uid: str


class LeaderboardResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    leaderboard: List[LeaderboardEntry]
    current_user_rank: int = Field(alias="currentUserRank")


class LeaderboardError(BaseModel):
    error: str
    details: str
