import pytest
from storefront.gateway.fake_adapter import FakeReviewsGateway
from storefront.toast import Toaster


@pytest.fixture()
def fake_gateway():
    return FakeReviewsGateway(page_size=3)


@pytest.fixture()
def toaster():
    return Toaster()


@pytest.fixture()
def product():
    """A product as the catalogue queries serialize it."""
    return {
        "id": "prod-island-001",
        "name": "Classic Black T-Shirt",
        "slug": "classic-black-t-shirt",
        "category": "T-Shirts",
        "images": ["/images/p11-1.jpg"],
        "price": 21.99,
        "avg_rating": 4.5,
        "num_reviews": 2,
        "rating_distribution": [
            {"rating": 1, "count": 0},
            {"rating": 2, "count": 0},
            {"rating": 3, "count": 0},
            {"rating": 4, "count": 1},
            {"rating": 5, "count": 1},
        ],
    }
