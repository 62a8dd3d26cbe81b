import pytest


@pytest.fixture(scope="session")
def _catalogue_domain():
    """The catalogue domain, initialized once at session start."""
    from catalogue.domain import catalogue

    return catalogue


@pytest.fixture(autouse=True)
def run_around_tests(_catalogue_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _catalogue_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def make_product():
    """Create and persist a product through the CreateProduct command."""
    import json

    from catalogue.product.creation import CreateProduct
    from protean import current_domain

    def _make(**overrides):
        defaults = {
            "name": "Classic Black T-Shirt",
            "slug": "classic-black-t-shirt",
            "category": "T-Shirts",
            "brand": "Acme Apparel",
            "description": "Premium cotton crew-neck tee in black.",
            "tags": ["new-arrival"],
            "images": ["/images/p11-1.jpg", "/images/p11-2.jpg"],
            "price": 21.99,
            "list_price": 24.99,
            "count_in_stock": 54,
            "is_published": True,
        }
        defaults.update(overrides)
        defaults["tags"] = json.dumps(defaults["tags"])
        defaults["images"] = json.dumps(defaults["images"])
        return current_domain.process(CreateProduct(**defaults), asynchronous=False)

    return _make
