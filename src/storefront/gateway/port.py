"""Reviews gateway port (abstract interface).

Defines the contract the review list island uses to reach review data.
This enables swapping between HttpReviewsGateway (talks to the Reviews API)
and FakeReviewsGateway (dev/test) without changing the island.

Every method raises DataAccessError when the call itself fails.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReviewPage:
    """One page of reviews plus the number of pages available."""

    data: list[dict] = field(default_factory=list)
    total_pages: int = 0


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a create-or-update review call."""

    success: bool
    message: str


class ReviewsGateway(ABC):
    """Abstract reviews data access interface."""

    @abstractmethod
    def get_reviews(self, product_id: str, page: int, limit: int | None = None) -> ReviewPage:
        """Fetch one page of a product's reviews."""
        ...

    @abstractmethod
    def get_review_by_product_id(self, product_id: str, user_id: str) -> dict | None:
        """Fetch the review `user_id` wrote for `product_id`, if any."""
        ...

    @abstractmethod
    def create_update_review(self, data: dict, path: str) -> SubmissionResult:
        """Create or update the review described by `data` and refresh `path`."""
        ...
