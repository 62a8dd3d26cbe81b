"""Domain events for the Review aggregate.

Events are used for:
- Cross-domain communication via Redis Streams (Catalogue rating aggregates)
- Auditing review history
"""

from protean.fields import DateTime, Identifier, Integer, String

from reviews.domain import reviews


@reviews.event(part_of="Review")
class ReviewSubmitted:
    """A user reviewed a product for the first time."""

    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    is_verified_purchase = String(required=True)  # "True"/"False"
    submitted_at = DateTime(required=True)


@reviews.event(part_of="Review")
class ReviewUpdated:
    """A user changed their existing review of a product."""

    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    previous_rating = Integer(required=True)
    updated_at = DateTime(required=True)
