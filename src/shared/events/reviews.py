"""Cross-domain event contracts for Reviews domain events.

These classes define the event shape for consumption by other domains
(e.g., the Catalogue domain to keep product rating aggregates current).
They are registered as external events via domain.register_external_event()
with matching __type__ strings so Protean's stream deserialization works
correctly.

The source-of-truth events are in src/reviews/review/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, Integer, String


class ReviewSubmitted(BaseEvent):
    """A user reviewed a product for the first time."""

    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    is_verified_purchase = String(required=True)  # "True"/"False"
    submitted_at = DateTime(required=True)


class ReviewUpdated(BaseEvent):
    """A user changed their existing review of a product."""

    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    previous_rating = Integer(required=True)
    updated_at = DateTime(required=True)
