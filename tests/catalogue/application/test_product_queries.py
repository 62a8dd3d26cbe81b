"""Application tests for the storefront product queries."""

import pytest
from catalogue.product.product import Product
from catalogue.product.queries import (
    get_all_categories,
    get_product_by_slug,
    get_products_by_tag,
    get_products_for_card,
    get_related_products_by_category,
)
from catalogue.product.sales import RecordProductSale
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _sell(product_id, quantity):
    current_domain.process(RecordProductSale(product_id=product_id, quantity=quantity), asynchronous=False)


class TestGetAllCategories:
    def test_distinct_sorted_categories(self, make_product):
        make_product(slug="shirt-1", category="T-Shirts")
        make_product(slug="shirt-2", category="T-Shirts")
        make_product(slug="jeans-1", category="Jeans")
        make_product(slug="shoe-1", category="Shoes")
        assert get_all_categories() == ["Jeans", "Shoes", "T-Shirts"]

    def test_unpublished_categories_hidden(self, make_product):
        make_product(slug="wrist-1", category="Wrist Watches", is_published=False)
        make_product(slug="shirt-1", category="T-Shirts")
        assert get_all_categories() == ["T-Shirts"]

    def test_empty_catalogue(self):
        assert get_all_categories() == []


class TestGetProductsForCard:
    def test_card_projection(self, make_product):
        make_product(slug="shirt-1", name="Shirt", tags=["featured"], images=["/a.jpg", "/b.jpg"])
        assert get_products_for_card(tag="featured") == [
            {"name": "Shirt", "href": "/product/shirt-1", "image": "/a.jpg"}
        ]

    def test_newest_first_and_limited(self, make_product):
        for i in range(6):
            make_product(slug=f"shirt-{i}", name=f"Shirt {i}", tags=["featured"])
        cards = get_products_for_card(tag="featured")
        assert [card["name"] for card in cards] == ["Shirt 5", "Shirt 4", "Shirt 3", "Shirt 2"]

    def test_only_tagged_products(self, make_product):
        make_product(slug="shirt-1", tags=["featured"])
        make_product(slug="shirt-2", tags=["best-seller"])
        assert [card["href"] for card in get_products_for_card(tag="best-seller")] == ["/product/shirt-2"]

    def test_product_without_images(self, make_product):
        make_product(slug="shirt-1", tags=["featured"], images=[])
        assert get_products_for_card(tag="featured")[0]["image"] is None


class TestGetProductsByTag:
    def test_full_records(self, make_product):
        make_product(slug="deal-1", tags=["todays-deal"])
        products = get_products_by_tag(tag="todays-deal")
        assert len(products) == 1
        assert products[0]["slug"] == "deal-1"
        assert products[0]["rating_distribution"][0] == {"rating": 1, "count": 0}

    def test_default_limit_is_ten(self, make_product):
        for i in range(12):
            make_product(slug=f"deal-{i}", tags=["todays-deal"])
        assert len(get_products_by_tag(tag="todays-deal")) == 10

    def test_unpublished_excluded(self, make_product):
        make_product(slug="deal-1", tags=["todays-deal"], is_published=False)
        assert get_products_by_tag(tag="todays-deal") == []


class TestGetProductBySlug:
    def test_found(self, make_product):
        product_id = make_product(slug="shirt-1")
        product = get_product_by_slug("shirt-1")
        assert product["id"] == product_id
        assert product["images"] == ["/images/p11-1.jpg", "/images/p11-2.jpg"]

    def test_unknown_slug_raises_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            get_product_by_slug("no-such-product")

    def test_unpublished_product_not_found(self, make_product):
        make_product(slug="hidden", is_published=False)
        with pytest.raises(ObjectNotFoundError):
            get_product_by_slug("hidden")


class TestGetRelatedProductsByCategory:
    def test_excludes_product_and_other_categories(self, make_product):
        current = make_product(slug="shirt-0", category="T-Shirts")
        make_product(slug="shirt-1", category="T-Shirts")
        make_product(slug="jeans-1", category="Jeans")

        result = get_related_products_by_category(category="T-Shirts", product_id=current)
        assert [product["slug"] for product in result["data"]] == ["shirt-1"]
        assert result["total_pages"] == 1

    def test_sorted_by_sales_descending(self, make_product):
        current = make_product(slug="shirt-0")
        low = make_product(slug="shirt-low")
        high = make_product(slug="shirt-high")
        _sell(low, 1)
        _sell(high, 10)

        result = get_related_products_by_category(category="T-Shirts", product_id=current)
        assert [product["slug"] for product in result["data"]] == ["shirt-high", "shirt-low"]

    def test_pagination(self, make_product):
        current = make_product(slug="shirt-0")
        for i in range(1, 6):
            product_id = make_product(slug=f"shirt-{i}")
            _sell(product_id, i)

        first = get_related_products_by_category(category="T-Shirts", product_id=current, limit=2, page=1)
        third = get_related_products_by_category(category="T-Shirts", product_id=current, limit=2, page=3)

        assert first["total_pages"] == 3
        assert [product["slug"] for product in first["data"]] == ["shirt-5", "shirt-4"]
        assert [product["slug"] for product in third["data"]] == ["shirt-1"]

    def test_no_related_products(self, make_product):
        current = make_product(slug="only-one")
        result = get_related_products_by_category(category="T-Shirts", product_id=current)
        assert result == {"data": [], "total_pages": 0}

    @pytest.mark.parametrize("page, limit", [(0, 4), (1, 0)])
    def test_invalid_pagination_rejected(self, page, limit):
        with pytest.raises(ValidationError):
            get_related_products_by_category(category="T-Shirts", product_id="x", limit=limit, page=page)


class TestPublishedScope:
    def test_every_query_ignores_unpublished(self, make_product):
        product_id = make_product(slug="shirt-1", tags=["featured"])
        product = current_domain.repository_for(Product).get(product_id)
        product.unpublish()
        current_domain.repository_for(Product).add(product)

        assert get_all_categories() == []
        assert get_products_for_card(tag="featured") == []
        assert get_products_by_tag(tag="featured") == []
