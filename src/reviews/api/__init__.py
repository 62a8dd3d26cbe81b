"""Reviews API router."""

from reviews.api.routes import review_router

__all__ = ["review_router"]
