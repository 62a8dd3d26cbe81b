"""Review aggregate: a user's rating and comment on one product.

CQRS (not event sourced). A review is written once per (user, product) pair
and edited in place afterwards; there is no moderation step, so a review is
visible as soon as it is stored.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Identifier,
    Integer,
    String,
    Text,
    ValueObject,
)

from reviews.domain import reviews
from reviews.review.events import ReviewSubmitted, ReviewUpdated

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@reviews.value_object(part_of="Review")
class Rating:
    """A star rating from 1 to 5."""

    score = Integer(required=True)

    @invariant.post
    def score_must_be_in_range(self):
        if self.score is not None and (self.score < 1 or self.score > 5):
            raise ValidationError({"score": ["Rating must be between 1 and 5"]})


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@reviews.aggregate
class Review:
    """A user's review of a product."""

    # Core identifiers
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    user_name = String(max_length=100)

    # Content
    rating = ValueObject(Rating, required=True)
    title = String(required=True, max_length=200)
    comment = Text(required=True)

    # Verification
    is_verified_purchase = Boolean(default=False)

    # Timestamps
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def title_must_not_be_empty(self):
        if self.title is not None and len(self.title.strip()) == 0:
            raise ValidationError({"title": ["Title is required"]})

    @invariant.post
    def comment_must_not_be_empty(self):
        if self.comment is not None and len(self.comment.strip()) == 0:
            raise ValidationError({"comment": ["Comment is required"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def submit(
        cls,
        product_id,
        user_id,
        rating,
        title,
        comment,
        user_name=None,
        is_verified_purchase=False,
    ):
        """Submit a new review."""
        now = datetime.now(UTC)

        review = cls(
            product_id=product_id,
            user_id=user_id,
            user_name=user_name,
            rating=Rating(score=rating),
            title=title,
            comment=comment,
            is_verified_purchase=is_verified_purchase,
            created_at=now,
            updated_at=now,
        )

        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                product_id=str(product_id),
                user_id=str(user_id),
                rating=rating,
                is_verified_purchase=str(is_verified_purchase),
                submitted_at=now,
            )
        )

        return review

    # -------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------
    def update(
        self,
        title=_UNSET,
        comment=_UNSET,
        rating=_UNSET,
        is_verified_purchase=_UNSET,
        user_name=_UNSET,
    ):
        """Replace the content of the review. Omitted fields keep their value."""
        now = datetime.now(UTC)
        previous_rating = self.rating.score

        with atomic_change(self):
            if title is not _UNSET:
                self.title = title
            if comment is not _UNSET:
                self.comment = comment
            if rating is not _UNSET:
                self.rating = Rating(score=rating)
            if is_verified_purchase is not _UNSET:
                self.is_verified_purchase = is_verified_purchase
            if user_name is not _UNSET and user_name:
                self.user_name = user_name

            self.updated_at = now

        self.raise_(
            ReviewUpdated(
                review_id=str(self.id),
                product_id=str(self.product_id),
                user_id=str(self.user_id),
                rating=self.rating.score,
                previous_rating=previous_rating,
                updated_at=now,
            )
        )
