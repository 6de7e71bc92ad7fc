from typing import Any

from pydantic import model_validator
from pydantic.main import BaseModel


class BaseModelWithMethods(BaseModel):
    """Base model for API payloads.

    JSON ``null`` values are dropped before validation so that optional fields
    fall back to their empty defaults instead of failing validation.
    """

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_json(self, **kwargs: Any) -> str:
        return self.model_dump_json(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
