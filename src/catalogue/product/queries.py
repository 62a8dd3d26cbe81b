"""Storefront read operations over the product collection.

Every query only sees published products. Results are plain dictionaries
so they can be handed to templates or JSON responses without touching the
aggregate.
"""

import math

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from catalogue.domain import logger
from catalogue.product.product import RATING_SCALE, Product

# Batch size when a query has to walk every published product
_SCAN_BATCH = 100


def _published():
    return current_domain.repository_for(Product)._dao.query.filter(is_published=True)


def _scan(queryset):
    """Yield every record of a queryset, fetching it in batches."""
    offset = 0
    while True:
        result = queryset.offset(offset).limit(_SCAN_BATCH).all()
        yield from result.items
        offset += _SCAN_BATCH
        if offset >= result.total:
            return


def _check_pagination(page, limit):
    errors = {}
    if page < 1:
        errors["page"] = ["Page must be 1 or greater"]
    if limit < 1:
        errors["limit"] = ["Limit must be 1 or greater"]
    if errors:
        raise ValidationError(errors)


def serialize_product(product):
    counts = product.rating_counts()
    return {
        "id": str(product.id),
        "name": product.name,
        "slug": product.slug,
        "category": product.category,
        "brand": product.brand,
        "description": product.description,
        "tags": product.tag_list(),
        "images": product.image_list(),
        "price": product.price,
        "list_price": product.list_price,
        "count_in_stock": product.count_in_stock,
        "is_published": product.is_published,
        "avg_rating": product.avg_rating,
        "num_reviews": product.num_reviews,
        "rating_distribution": [{"rating": star, "count": counts[str(star)]} for star in RATING_SCALE],
        "num_sales": product.num_sales,
        "created_at": product.created_at.isoformat() if product.created_at else None,
    }


def _tagged_newest_first(tag, limit):
    matches = []
    for product in _scan(_published().order_by("-created_at")):
        if tag in product.tag_list():
            matches.append(product)
            if len(matches) == limit:
                break
    return matches


def get_all_categories():
    """Distinct categories across published products."""
    return sorted({product.category for product in _scan(_published())})


def get_products_for_card(tag, limit=4):
    """Newest products carrying `tag`, reduced to what a product card shows."""
    cards = []
    for product in _tagged_newest_first(tag, limit):
        images = product.image_list()
        cards.append(
            {
                "name": product.name,
                "href": f"/product/{product.slug}",
                "image": images[0] if images else None,
            }
        )
    return cards


def get_products_by_tag(tag, limit=10):
    """Newest products carrying `tag`, as full records."""
    return [serialize_product(product) for product in _tagged_newest_first(tag, limit)]


def get_product_by_slug(slug):
    results = _published().filter(slug=slug).all()
    if not results.items:
        logger.info("Product lookup missed", slug=slug)
        raise ObjectNotFoundError(f"Product with slug `{slug}` was not found")
    return serialize_product(results.items[0])


def get_related_products_by_category(category, product_id, limit=4, page=1):
    """Best-selling products of the same category, excluding `product_id`."""
    _check_pagination(page, limit)

    skip = (page - 1) * limit
    queryset = _published().filter(category=category).exclude(id=str(product_id)).order_by("-num_sales")
    results = queryset.offset(skip).limit(limit).all()

    return {
        "data": [serialize_product(product) for product in results.items],
        "total_pages": math.ceil(results.total / limit),
    }
