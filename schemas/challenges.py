from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List

from helpers.challenges import validate_challenge
from schemas.common import require_fields, require_object


def check_challenge(data: Any) -> dict:
    data = require_object(data)
    validate_challenge(
        data.get("title"),
        data.get("category"),
        data.get("questions"),
        data.get("type"),
        data.get("difficulty"),
    )
    return data


class ChallengeCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    category: str
    questions: List[Dict[str, Any]]
    challenge_type: int = Field(alias="type")
    difficulty: str

    @model_validator(mode="before")
    @classmethod
    def check_rules(cls, data):
        return check_challenge(data)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ChallengeUpdate(ChallengeCreate):
    id: str

    @model_validator(mode="before")
    @classmethod
    def check_rules(cls, data):
        data = require_object(data)
        require_fields(data, ["id"], "Document ID is required")
        require_fields(data, ["title", "category", "type", "difficulty", "questions"])
        if not isinstance(data["questions"], list):
            raise ValueError("Questions must be an array")
        return check_challenge(data)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"id"})
