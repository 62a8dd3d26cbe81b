"""In-memory reviews gateway for development and testing.

Keeps reviews per product, pages them newest first like the Reviews API,
and upserts by (product, user). It can be configured to fail so callers'
error handling can be exercised:
- ``fail_with`` makes every call raise DataAccessError
- ``reject_with`` makes submissions return an unsuccessful result
"""

import math
from datetime import UTC, datetime
from uuid import uuid4

from storefront.exceptions import DataAccessError
from storefront.gateway.port import ReviewPage, ReviewsGateway, SubmissionResult

DEFAULT_PAGE_SIZE = 9


class FakeReviewsGateway(ReviewsGateway):
    """Configurable fake reviews gateway."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.page_size = page_size
        self.reviews: dict[str, list[dict]] = {}
        self.fail_with: str | None = None
        self.reject_with: str | None = None
        self.calls: list[dict] = []

    def configure(self, fail_with: str | None = None, reject_with: str | None = None) -> None:
        """Configure gateway behavior at runtime."""
        self.fail_with = fail_with
        self.reject_with = reject_with

    def seed(self, product_id: str, count: int, **overrides) -> list[dict]:
        """Store `count` reviews for a product and return them newest first."""
        for i in range(count):
            review = {
                "id": uuid4().hex,
                "product_id": product_id,
                "user_id": f"user-{i}",
                "user_name": f"User {i}",
                "title": f"Review {i}",
                "comment": f"Comment {i}",
                "rating": (i % 5) + 1,
                "is_verified_purchase": True,
                "created_at": datetime.now(UTC).isoformat(),
            }
            review.update(overrides)
            self.reviews.setdefault(product_id, []).insert(0, review)
        return list(self.reviews[product_id])

    def _record(self, method: str, **kwargs) -> None:
        self.calls.append({"method": method, **kwargs})
        if self.fail_with:
            raise DataAccessError(self.fail_with)

    def calls_to(self, method: str) -> list[dict]:
        return [call for call in self.calls if call["method"] == method]

    def get_reviews(self, product_id: str, page: int, limit: int | None = None) -> ReviewPage:
        self._record("get_reviews", product_id=product_id, page=page, limit=limit)
        limit = limit or self.page_size
        reviews = self.reviews.get(product_id, [])
        start = (page - 1) * limit
        return ReviewPage(
            data=[dict(review) for review in reviews[start : start + limit]],
            total_pages=1 if not reviews else math.ceil(len(reviews) / limit),
        )

    def get_review_by_product_id(self, product_id: str, user_id: str) -> dict | None:
        self._record("get_review_by_product_id", product_id=product_id, user_id=user_id)
        return next(
            (dict(review) for review in self.reviews.get(product_id, []) if review["user_id"] == user_id),
            None,
        )

    def create_update_review(self, data: dict, path: str) -> SubmissionResult:
        self._record("create_update_review", data=data, path=path)
        if self.reject_with:
            return SubmissionResult(success=False, message=self.reject_with)

        reviews = self.reviews.setdefault(data["product"], [])
        existing = next((review for review in reviews if review["user_id"] == data["user"]), None)
        fields = {
            "title": data["title"],
            "comment": data["comment"],
            "rating": data["rating"],
            "is_verified_purchase": data.get("isVerifiedPurchase", False),
        }
        if existing:
            existing.update(fields)
            return SubmissionResult(success=True, message="Review updated successfully")

        reviews.insert(
            0,
            {
                "id": uuid4().hex,
                "product_id": data["product"],
                "user_id": data["user"],
                "user_name": data.get("userName"),
                "created_at": datetime.now(UTC).isoformat(),
                **fields,
            },
        )
        return SubmissionResult(success=True, message="Review created successfully")
