from typing import Any

from pydantic import BaseModel, ConfigDict


# Fields stay untyped: upstream decides what a valid review request is.
class ReviewListRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    count: Any = None


class AddReviewRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    review: Any = None
