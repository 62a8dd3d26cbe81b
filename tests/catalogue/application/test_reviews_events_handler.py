"""Application tests for the cross-domain Reviews event handler."""

from datetime import UTC, datetime

from catalogue.product.product import Product
from catalogue.product.review_events import ReviewsEventsHandler
from protean import current_domain
from shared.events.reviews import ReviewSubmitted, ReviewUpdated


def _submitted(product_id, rating, user_id="user-001"):
    return ReviewSubmitted(
        review_id=f"review-{user_id}",
        product_id=product_id,
        user_id=user_id,
        rating=rating,
        is_verified_purchase="True",
        submitted_at=datetime.now(UTC),
    )


def _updated(product_id, rating, previous_rating, user_id="user-001"):
    return ReviewUpdated(
        review_id=f"review-{user_id}",
        product_id=product_id,
        user_id=user_id,
        rating=rating,
        previous_rating=previous_rating,
        updated_at=datetime.now(UTC),
    )


class TestReviewSubmittedHandler:
    def test_counts_rating(self, make_product):
        product_id = make_product()

        ReviewsEventsHandler().on_review_submitted(_submitted(product_id, 4))

        product = current_domain.repository_for(Product).get(product_id)
        assert product.num_reviews == 1
        assert product.avg_rating == 4.0
        assert product.rating_counts()["4"] == 1

    def test_several_reviews_average(self, make_product):
        product_id = make_product()
        handler = ReviewsEventsHandler()
        handler.on_review_submitted(_submitted(product_id, 5, user_id="u1"))
        handler.on_review_submitted(_submitted(product_id, 2, user_id="u2"))

        product = current_domain.repository_for(Product).get(product_id)
        assert product.num_reviews == 2
        assert product.avg_rating == 3.5

    def test_unknown_product_skipped(self):
        # Should not raise, just log and skip
        ReviewsEventsHandler().on_review_submitted(_submitted("no-such-product", 3))


class TestReviewUpdatedHandler:
    def test_moves_rating(self, make_product):
        product_id = make_product()
        handler = ReviewsEventsHandler()
        handler.on_review_submitted(_submitted(product_id, 1))
        handler.on_review_updated(_updated(product_id, 5, previous_rating=1))

        product = current_domain.repository_for(Product).get(product_id)
        assert product.num_reviews == 1
        assert product.rating_counts()["1"] == 0
        assert product.rating_counts()["5"] == 1
        assert product.avg_rating == 5.0

    def test_same_rating_is_a_no_op(self, make_product):
        product_id = make_product()
        handler = ReviewsEventsHandler()
        handler.on_review_submitted(_submitted(product_id, 3))
        handler.on_review_updated(_updated(product_id, 3, previous_rating=3))

        product = current_domain.repository_for(Product).get(product_id)
        assert product.num_reviews == 1
        assert product.rating_counts()["3"] == 1

    def test_unknown_product_skipped(self):
        ReviewsEventsHandler().on_review_updated(_updated("no-such-product", 4, previous_rating=2))
