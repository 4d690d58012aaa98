from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class UploadBatchRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    images: list[Any] = []

    @field_validator("images", mode="before")
    @classmethod
    def _sequence_or_empty(cls, value: Any) -> list[Any]:
        return value if isinstance(value, list) else []
