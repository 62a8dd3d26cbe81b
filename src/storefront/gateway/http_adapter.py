"""Reviews gateway backed by the Reviews HTTP API.

Responses are validated against the API's own response schemas and handed
back as snake_case dictionaries.
"""

import os

import httpx
import structlog
from pydantic import ValidationError as SchemaError
from reviews.api.schemas import ReviewPageResponse, ReviewResponse
from reviews.api.schemas import SubmissionResult as SubmissionResponse

from storefront.exceptions import DataAccessError
from storefront.gateway.port import ReviewPage, ReviewsGateway, SubmissionResult

logger = structlog.get_logger(__name__)

DEFAULT_API_URL = "http://localhost:8000"


class HttpReviewsGateway(ReviewsGateway):
    """Calls the Reviews API through an httpx client."""

    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    @classmethod
    def from_env(cls) -> "HttpReviewsGateway":
        base_url = os.getenv("STOREFRONT_API_URL", DEFAULT_API_URL)
        return cls(httpx.Client(base_url=base_url, timeout=10.0))

    def _request(self, method: str, url: str, **kwargs):
        try:
            response = self.client.request(method, url, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise DataAccessError(
                f"{method} {url} returned {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise DataAccessError(f"{method} {url} failed: {exc}") from exc

    def get_reviews(self, product_id: str, page: int, limit: int | None = None) -> ReviewPage:
        params = {"product_id": product_id, "page": page}
        if limit is not None:
            params["limit"] = limit
        payload = self._request("GET", "/reviews", params=params)
        try:
            result = ReviewPageResponse.model_validate(payload)
        except SchemaError as exc:
            raise DataAccessError(f"Unexpected reviews payload: {exc}") from exc
        return ReviewPage(
            data=[review.model_dump() for review in result.data],
            total_pages=result.total_pages,
        )

    def get_review_by_product_id(self, product_id: str, user_id: str) -> dict | None:
        payload = self._request("GET", "/reviews/mine", params={"product_id": product_id, "user_id": user_id})
        if payload is None:
            return None
        try:
            return ReviewResponse.model_validate(payload).model_dump()
        except SchemaError as exc:
            raise DataAccessError(f"Unexpected review payload: {exc}") from exc

    def create_update_review(self, data: dict, path: str) -> SubmissionResult:
        payload = self._request("POST", "/reviews", json={"data": data, "path": path})
        try:
            result = SubmissionResponse.model_validate(payload)
        except SchemaError as exc:
            raise DataAccessError(f"Unexpected submission payload: {exc}") from exc
        logger.debug("Review submission answered", success=result.success, path=path)
        return SubmissionResult(success=result.success, message=result.message)
