"""Product aggregate root.

Products are the documents the storefront browses. Catalog fields and the
publication flag are maintained by admin tooling; the rating and sales
aggregates are kept current as reviews and sales are recorded.
"""

import json
import re
from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from catalogue.domain import catalogue

RATING_SCALE = (1, 2, 3, 4, 5)


def default_distribution():
    return json.dumps({str(star): 0 for star in RATING_SCALE})


def average_rating(distribution):
    """Weighted mean of a star distribution, rounded to one decimal."""
    total = sum(distribution.values())
    if total == 0:
        return 0.0
    weighted_sum = sum(int(star) * count for star, count in distribution.items())
    return round(weighted_sum / total, 1)


@catalogue.aggregate
class Product:
    """Product aggregate root."""

    name: String(required=True, max_length=255)
    slug: String(required=True, max_length=200)
    category: String(required=True, max_length=100)
    brand: String(max_length=100)
    description: Text()
    tags: Text(default="[]")  # JSON array of strings
    images: Text(default="[]")  # JSON array of URLs, first one is the card image
    price: Float(min_value=0.0, default=0.0)
    list_price: Float(min_value=0.0, default=0.0)
    count_in_stock: Integer(min_value=0, default=0)
    is_published: Boolean(default=False)
    avg_rating: Float(default=0.0)
    num_reviews: Integer(default=0)
    rating_distribution: Text(default=default_distribution)
    num_sales: Integer(default=0)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def slug_must_be_url_safe(self):
        slug = self.slug
        if not slug:
            return

        if not re.match(r"^[a-z0-9-]+$", slug):
            raise ValidationError({"slug": ["Slug must contain only lowercase alphanumeric characters and hyphens"]})

        if slug.startswith("-") or slug.endswith("-"):
            raise ValidationError({"slug": ["Slug must not start or end with a hyphen"]})

        if "--" in slug:
            raise ValidationError({"slug": ["Slug must not contain consecutive hyphens"]})

    @invariant.post
    def num_reviews_matches_distribution(self):
        if not self.rating_distribution:
            return
        if sum(self.rating_counts().values()) != (self.num_reviews or 0):
            raise ValidationError({"num_reviews": ["Review count must match the rating distribution"]})

    def tag_list(self):
        return json.loads(self.tags) if self.tags else []

    def image_list(self):
        return json.loads(self.images) if self.images else []

    def rating_counts(self):
        counts = json.loads(self.rating_distribution) if self.rating_distribution else {}
        return {str(star): int(counts.get(str(star), 0)) for star in RATING_SCALE}

    @classmethod
    def create(
        cls,
        name,
        slug,
        category,
        brand=None,
        description=None,
        tags=None,
        images=None,
        price=0.0,
        list_price=None,
        count_in_stock=0,
        is_published=False,
    ):
        from catalogue.product.events import ProductCreated

        now = datetime.now()
        tags_json = json.dumps(list(tags or []))

        product = cls(
            name=name,
            slug=slug,
            category=category,
            brand=brand,
            description=description,
            tags=tags_json,
            images=json.dumps(list(images or [])),
            price=price,
            list_price=list_price if list_price is not None else price,
            count_in_stock=count_in_stock,
            is_published=is_published,
            avg_rating=0.0,
            num_reviews=0,
            rating_distribution=default_distribution(),
            num_sales=0,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                slug=slug,
                name=name,
                category=category,
                tags=tags_json,
                is_published=str(is_published),
                created_at=now,
            )
        )
        return product

    def publish(self):
        from catalogue.product.events import ProductPublished

        if self.is_published:
            raise ValidationError({"is_published": ["Product is already published"]})

        now = datetime.now()
        self.is_published = True
        self.updated_at = now

        self.raise_(
            ProductPublished(
                product_id=self.id,
                slug=self.slug,
                published_at=now,
            )
        )

    def unpublish(self):
        from catalogue.product.events import ProductUnpublished

        if not self.is_published:
            raise ValidationError({"is_published": ["Product is not published"]})

        now = datetime.now()
        self.is_published = False
        self.updated_at = now

        self.raise_(
            ProductUnpublished(
                product_id=self.id,
                slug=self.slug,
                unpublished_at=now,
            )
        )

    def record_sale(self, quantity):
        from catalogue.product.events import ProductSaleRecorded

        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity sold must be at least 1"]})

        now = datetime.now()
        self.num_sales = (self.num_sales or 0) + quantity
        self.updated_at = now

        self.raise_(
            ProductSaleRecorded(
                product_id=self.id,
                quantity=quantity,
                num_sales=self.num_sales,
                recorded_at=now,
            )
        )

    def record_review_rating(self, rating, previous_rating=None):
        """Count a new review's rating, or move an edited review from its previous rating."""
        from catalogue.product.events import ProductRatingChanged

        if rating not in RATING_SCALE:
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})

        distribution = self.rating_counts()
        if previous_rating is not None:
            key = str(previous_rating)
            distribution[key] = max(0, distribution.get(key, 0) - 1)
        distribution[str(rating)] = distribution[str(rating)] + 1

        now = datetime.now()
        distribution_json = json.dumps(distribution)
        with atomic_change(self):
            self.rating_distribution = distribution_json
            self.num_reviews = sum(distribution.values())
            self.avg_rating = average_rating(distribution)
            self.updated_at = now

        self.raise_(
            ProductRatingChanged(
                product_id=self.id,
                avg_rating=self.avg_rating,
                num_reviews=self.num_reviews,
                rating_distribution=distribution_json,
                changed_at=now,
            )
        )
