"""Product creation: command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    slug: String(required=True, max_length=200)
    category: String(required=True, max_length=100)
    brand: String(max_length=100)
    description: Text()
    tags: Text()  # JSON array of strings
    images: Text()  # JSON array of URLs
    price: Float(min_value=0.0, default=0.0)
    list_price: Float(min_value=0.0)
    count_in_stock: Integer(min_value=0, default=0)
    is_published: Boolean(default=False)


@catalogue.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        repo = current_domain.repository_for(Product)

        # Slugs address product pages, so they must stay unique
        existing = repo._dao.query.filter(slug=command.slug).all()
        if existing.items:
            raise ValidationError({"slug": [f"A product with slug '{command.slug}' already exists"]})

        product = Product.create(
            name=command.name,
            slug=command.slug,
            category=command.category,
            brand=command.brand,
            description=command.description,
            tags=json.loads(command.tags) if command.tags else None,
            images=json.loads(command.images) if command.images else None,
            price=command.price,
            list_price=command.list_price,
            count_in_stock=command.count_in_stock,
            is_published=command.is_published,
        )
        repo.add(product)
        return str(product.id)
