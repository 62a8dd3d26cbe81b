"""Reviews bounded context: product reviews written by storefront users.

Each user keeps at most one review per product: submitting again updates
the existing review. Rating changes are published so the Catalogue domain
can keep product rating aggregates current.
"""

import structlog
from protean.domain import Domain

reviews = Domain(name="reviews")

logger = structlog.get_logger(__name__)
