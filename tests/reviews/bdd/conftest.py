"""Shared BDD fixtures and step definitions for the Reviews domain."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from reviews.review.queries import get_review_by_product_id, get_reviews
from reviews.review.upsert import CreateUpdateReview


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


def _upsert_review(product_id, user_id, rating, title):
    return current_domain.process(
        CreateUpdateReview(
            product_id=product_id,
            user_id=user_id,
            rating=rating,
            title=title,
            comment="Written for a BDD scenario.",
        ),
        asynchronous=False,
    )


@pytest.fixture()
def upsert_review():
    """Create or update a review through the command handler."""
    return _upsert_review


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('user "{user_id}" has reviewed product "{product_id}" with rating {rating:d}'))
def user_has_reviewed(user_id, product_id, rating):
    _upsert_review(product_id, user_id, rating, "Earlier review")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the submission is reported as created")
def submission_created(outcome):
    assert outcome["created"] is True


@then("the submission is reported as updated")
def submission_updated(outcome):
    assert outcome["created"] is False


@then("the submission fails with a validation error")
def submission_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('product "{product_id}" has {count:d} review'))
@then(parsers.cfparse('product "{product_id}" has {count:d} reviews'))
def product_review_count(product_id, count):
    assert len(get_reviews(product_id)["data"]) == count


@then(parsers.cfparse('the review of "{user_id}" for "{product_id}" has rating {rating:d}'))
def review_has_rating(user_id, product_id, rating):
    assert get_review_by_product_id(product_id, user_id)["rating"] == rating
