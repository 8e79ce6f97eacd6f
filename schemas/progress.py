from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List

from schemas.common import is_blank, require_object


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_attempt(data: dict):
    challenge_id = data.get("challengeId")
    if not isinstance(challenge_id, str) or is_blank(challenge_id):
        raise ValueError("challengeId is required and must be a non-empty string")


def check_retry(data: Any) -> dict:
    data = require_object(data)
    check_attempt(data)
    if not isinstance(data.get("answers"), list):
        raise ValueError("answers is required and must be an array")
    score = data.get("score")
    if not _is_number(score) or score < 0:
        raise ValueError("score is required and must be a non-negative number")
    return data


class RetryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    challenge_id: str = Field(alias="challengeId")
    answers: List[Any]
    score: float

    @model_validator(mode="before")
    @classmethod
    def check_fields(cls, data):
        return check_retry(data)


class CompletionRequest(RetryRequest):
    points: int

    @model_validator(mode="before")
    @classmethod
    def check_fields(cls, data):
        data = require_object(data)
        check_attempt(data)
        points = data.get("points")
        if not isinstance(points, int) or isinstance(points, bool) or points < 0:
            raise ValueError("points is required and must be a non-negative integer")
        return check_retry(data)


class ProgressResponse(BaseModel):
    Points: int = 0
    SolvedChallenges: List[str] = []
    retryCount: Dict[str, int] = {}
    challengeAttempts: Dict[str, Any] = {}
