from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional

from schemas.common import require_non_empty_list, require_object


class UidListRequest(BaseModel):
    uid: List[str]

    @model_validator(mode="before")
    @classmethod
    def check_uids(cls, data):
        data = require_object(data)
        require_non_empty_list(data, "uid", "uid array is required")
        return data


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    disabled: bool = False
    photo_url: str = Field(alias="photoURL")
    admin: bool = False
