"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; no cross-user sharing.
State tracks entity IDs returned by creation endpoints so follow-up
operations can reference them.
"""

from dataclasses import dataclass


@dataclass
class ProductState:
    """Tracks the product a simulated user is looking at."""

    product_id: str | None = None
    slug: str | None = None
    category: str | None = None


@dataclass
class ReviewerState:
    """Tracks state for a single simulated reviewer."""

    user_id: str | None = None
    product_id: str | None = None
    slug: str | None = None
    reviews_written: int = 0
    total_pages: int = 0
