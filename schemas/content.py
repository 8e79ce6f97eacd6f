from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, List

from schemas.common import require_fields, require_non_empty_list, require_object


class IdListRequest(BaseModel):
    id: List[str]

    @model_validator(mode="before")
    @classmethod
    def check_ids(cls, data):
        data = require_object(data)
        require_non_empty_list(data, "id", "id array is required")
        return data


def check_entry(data: Any, list_field: str, with_id: bool = False) -> dict:
    data = require_object(data)
    if with_id:
        require_fields(data, ["id"], "Document ID is required")
    require_fields(data, ["title", "category", "description", list_field])
    if not isinstance(data[list_field], list):
        raise ValueError(f"{list_field} must be an array")
    return data


class LibraryEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    category: str
    description: str
    code_data: List[Any] = Field(alias="codeData")

    @model_validator(mode="before")
    @classmethod
    def check_fields(cls, data):
        return check_entry(data, "codeData")


class LibraryUpdate(LibraryEntry):
    id: str

    @model_validator(mode="before")
    @classmethod
    def check_fields(cls, data):
        return check_entry(data, "codeData", with_id=True)


class ExampleEntry(BaseModel):
    title: str
    category: str
    description: str
    examples: List[Any]

    @model_validator(mode="before")
    @classmethod
    def check_fields(cls, data):
        return check_entry(data, "examples")


class ExampleUpdate(ExampleEntry):
    id: str

    @model_validator(mode="before")
    @classmethod
    def check_fields(cls, data):
        data = require_object(data)
        # Older clients send the list as exampleData
        if "examples" not in data and "exampleData" in data:
            data = {**data, "examples": data["exampleData"]}
        return check_entry(data, "examples", with_id=True)
