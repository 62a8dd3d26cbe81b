"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue, unpublished unless stated otherwise."""

    __version__ = 1

    product_id: Identifier(required=True)
    slug: String(required=True)
    name: String(required=True)
    category: String(required=True)
    tags: Text()  # JSON array of strings
    is_published: String(required=True)  # "True"/"False"
    created_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductPublished:
    """A product became visible on the storefront."""

    __version__ = 1

    product_id: Identifier(required=True)
    slug: String(required=True)
    published_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductUnpublished:
    """A product was hidden from the storefront."""

    __version__ = 1

    product_id: Identifier(required=True)
    slug: String(required=True)
    unpublished_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductSaleRecorded:
    """Units of a product were sold."""

    __version__ = 1

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    num_sales: Integer(required=True)
    recorded_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductRatingChanged:
    """A product's rating aggregates were recalculated after a review change."""

    __version__ = 1

    product_id: Identifier(required=True)
    avg_rating: Float(required=True)
    num_reviews: Integer(required=True)
    rating_distribution: Text(required=True)  # JSON: {"1": 0, ..., "5": 0}
    changed_at: DateTime(required=True)
