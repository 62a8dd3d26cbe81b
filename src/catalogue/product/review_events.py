"""Inbound cross-domain event handler: Catalogue reacts to Reviews events.

Keeps each product's rating distribution, review count and average rating
in step with the reviews written against it.

Cross-domain events are imported from shared.events.reviews and registered
as external events via catalogue.register_external_event().
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.reviews import ReviewSubmitted, ReviewUpdated

from catalogue.domain import catalogue
from catalogue.product.product import Product

logger = structlog.get_logger(__name__)

# Register external events so Protean can deserialize them
catalogue.register_external_event(ReviewSubmitted, "Reviews.ReviewSubmitted.v1")
catalogue.register_external_event(ReviewUpdated, "Reviews.ReviewUpdated.v1")


@catalogue.event_handler(part_of=Product, stream_category="reviews::review")
class ReviewsEventsHandler:
    """Reacts to Reviews domain events to maintain product rating aggregates."""

    def _load(self, product_id):
        try:
            return current_domain.repository_for(Product).get(str(product_id))
        except ObjectNotFoundError:
            logger.warning("Review references an unknown product, skipping", product_id=str(product_id))
            return None

    @handle(ReviewSubmitted)
    def on_review_submitted(self, event: ReviewSubmitted) -> None:
        product = self._load(event.product_id)
        if product is None:
            return

        product.record_review_rating(event.rating)
        current_domain.repository_for(Product).add(product)

    @handle(ReviewUpdated)
    def on_review_updated(self, event: ReviewUpdated) -> None:
        if event.rating == event.previous_rating:
            return

        product = self._load(event.product_id)
        if product is None:
            return

        product.record_review_rating(event.rating, previous_rating=event.previous_rating)
        current_domain.repository_for(Product).add(product)
