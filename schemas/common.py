from pydantic import BaseModel
from typing import Any, Iterable


def is_missing(value: Any) -> bool:
    """JavaScript falsiness: null, "", 0 and false are missing; [] and {} are present."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_object(data: Any) -> dict:
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def require_fields(data: dict, fields: Iterable[str], message: str = "All fields are required"):
    if any(is_missing(data.get(field)) for field in fields):
        raise ValueError(message)


def require_non_empty_list(data: dict, field: str, message: str):
    value = data.get(field)
    if not isinstance(value, list) or not value:
        raise ValueError(message)


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(BaseModel):
    message: str
    id: str
