"""Read operations behind the product page review list."""

import math
import os

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from reviews.review.review import Review

# Reviews per page
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "9"))


def serialize_review(review):
    return {
        "id": str(review.id),
        "product_id": str(review.product_id),
        "user_id": str(review.user_id),
        "user_name": review.user_name,
        "title": review.title,
        "comment": review.comment,
        "rating": review.rating.score,
        "is_verified_purchase": review.is_verified_purchase,
        "created_at": review.created_at.isoformat() if review.created_at else None,
        "updated_at": review.updated_at.isoformat() if review.updated_at else None,
    }


def get_reviews(product_id, page=1, limit=None):
    """One page of a product's reviews, newest first.

    An empty product still reports one (empty) page.
    """
    limit = limit or PAGE_SIZE
    if page < 1:
        raise ValidationError({"page": ["Page must be 1 or greater"]})

    results = (
        current_domain.repository_for(Review)
        ._dao.query.filter(product_id=str(product_id))
        .order_by("-created_at")
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "data": [serialize_review(review) for review in results.items],
        "total_pages": 1 if results.total == 0 else math.ceil(results.total / limit),
    }


def get_review_by_product_id(product_id, user_id):
    """The review `user_id` wrote for `product_id`, or None."""
    results = (
        current_domain.repository_for(Review)
        ._dao.query.filter(product_id=str(product_id), user_id=str(user_id))
        .all()
    )
    if not results.items:
        return None
    return serialize_review(results.items[0])
