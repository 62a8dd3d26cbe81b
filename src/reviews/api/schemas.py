"""Pydantic request/response schemas for the Reviews API.

These are separate from Protean commands (anti-corruption pattern).
The API layer is the external contract; commands are internal domain concepts.
``ReviewInput`` is also the schema the storefront review form validates
against before it sends anything.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError
from shared.schemas import CamelModel


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class ReviewInput(CamelModel):
    product: str
    user: str
    user_name: str | None = Field(default=None, max_length=100)
    is_verified_purchase: bool = False
    title: str = Field(max_length=200)
    comment: str
    rating: int

    @field_validator("title")
    @classmethod
    def title_is_required(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("title_required", "Title is required")
        return value

    @field_validator("comment")
    @classmethod
    def comment_is_required(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("comment_required", "Comment is required")
        return value

    @field_validator("rating")
    @classmethod
    def rating_in_range(cls, value: int) -> int:
        if value < 1:
            raise PydanticCustomError("rating_too_low", "Rating must be at least 1")
        if value > 5:
            raise PydanticCustomError("rating_too_high", "Rating must be at most 5")
        return value


class CreateUpdateReviewRequest(CamelModel):
    data: ReviewInput
    path: str = "/"


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class SubmissionResult(CamelModel):
    success: bool
    message: str


class ReviewResponse(CamelModel):
    id: str
    product_id: str
    user_id: str
    user_name: str | None = None
    title: str
    comment: str
    rating: int
    is_verified_purchase: bool = False
    created_at: str | None = None
    updated_at: str | None = None


class ReviewPageResponse(CamelModel):
    data: list[ReviewResponse]
    total_pages: int
