"""FastAPI routes for the Reviews bounded context.

Each route translates between Pydantic schemas (external contract) and
Protean commands or queries (internal domain concepts).
"""

from fastapi import APIRouter, Query
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from reviews.api.schemas import (
    CreateUpdateReviewRequest,
    ReviewPageResponse,
    ReviewResponse,
    SubmissionResult,
)
from reviews.domain import logger
from reviews.review.queries import get_review_by_product_id, get_reviews
from reviews.review.upsert import CreateUpdateReview

review_router = APIRouter(prefix="/reviews", tags=["reviews"])


def format_error(exc: ValidationError) -> str:
    """Flatten field messages into one sentence-per-message string."""
    messages = exc.messages if isinstance(exc.messages, dict) else {"error": [str(exc.messages)]}
    return ". ".join(message for field_messages in messages.values() for message in field_messages)


@review_router.get("", response_model=ReviewPageResponse)
async def list_reviews(
    product_id: str,
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
) -> ReviewPageResponse:
    """One page of a product's reviews, newest first."""
    result = get_reviews(product_id=product_id, page=page, limit=limit)
    return ReviewPageResponse(
        data=[ReviewResponse(**review) for review in result["data"]],
        total_pages=result["total_pages"],
    )


@review_router.get("/mine", response_model=ReviewResponse | None)
async def my_review(product_id: str, user_id: str) -> ReviewResponse | None:
    """The review a user wrote for a product, or null."""
    review = get_review_by_product_id(product_id=product_id, user_id=user_id)
    return ReviewResponse(**review) if review else None


@review_router.post("", response_model=SubmissionResult)
async def create_update_review(body: CreateUpdateReviewRequest) -> SubmissionResult:
    """Create the user's review of a product, or update the one they wrote."""
    values = body.data
    try:
        command = CreateUpdateReview(
            product_id=values.product,
            user_id=values.user,
            user_name=values.user_name,
            rating=values.rating,
            title=values.title,
            comment=values.comment,
            is_verified_purchase=values.is_verified_purchase,
        )
        outcome = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        logger.warning("Review submission rejected", product_id=values.product, errors=exc.messages)
        return SubmissionResult(success=False, message=format_error(exc))

    logger.info("Product page invalidated", path=body.path)
    if outcome["created"]:
        return SubmissionResult(success=True, message="Review created successfully")
    return SubmissionResult(success=True, message="Review updated successfully")
