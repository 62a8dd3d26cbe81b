"""CreateUpdateReview: create a user's review of a product, or update it.

Enforces one-review-per-user-per-product at handler level (cross-instance
check requires repository query): a second submission for the same pair
edits the stored review instead of adding another.
"""

from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import logger, reviews
from reviews.review.review import Review


@reviews.command(part_of="Review")
class CreateUpdateReview:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    user_name = String(max_length=100)
    rating = Integer(required=True)
    title = String(required=True, max_length=200)
    comment = Text(required=True)
    is_verified_purchase = Boolean(default=False)


@reviews.command_handler(part_of=Review)
class CreateUpdateReviewHandler:
    @handle(CreateUpdateReview)
    def create_update_review(self, command):
        """Return the review id and whether a new review was created."""
        repo = current_domain.repository_for(Review)

        existing = repo._dao.query.filter(
            product_id=str(command.product_id),
            user_id=str(command.user_id),
        ).all()

        if existing.items:
            review = repo.get(existing.items[0].id)
            review.update(
                title=command.title,
                comment=command.comment,
                rating=command.rating,
                is_verified_purchase=command.is_verified_purchase,
                user_name=command.user_name,
            )
            repo.add(review)
            logger.info("Review updated", review_id=str(review.id), product_id=str(command.product_id))
            return {"review_id": str(review.id), "created": False}

        review = Review.submit(
            product_id=command.product_id,
            user_id=command.user_id,
            user_name=command.user_name,
            rating=command.rating,
            title=command.title,
            comment=command.comment,
            is_verified_purchase=command.is_verified_purchase,
        )
        repo.add(review)
        logger.info("Review created", review_id=str(review.id), product_id=str(command.product_id))
        return {"review_id": str(review.id), "created": True}
