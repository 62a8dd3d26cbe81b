"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import Field
from shared.schemas import CamelModel

# --- Product Request Schemas ---


class CreateProductRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Classic Black T-Shirt",
                    "slug": "classic-black-t-shirt",
                    "category": "T-Shirts",
                    "brand": "Acme Apparel",
                    "description": "Premium cotton crew-neck tee in black.",
                    "tags": ["new-arrival", "featured"],
                    "images": ["/images/p11-1.jpg", "/images/p11-2.jpg"],
                    "price": 21.99,
                    "listPrice": 24.99,
                    "countInStock": 54,
                    "isPublished": True,
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    slug: str = Field(..., max_length=200)
    category: str = Field(..., max_length=100)
    brand: str | None = Field(None, max_length=100)
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    price: float = Field(0.0, ge=0)
    list_price: float | None = Field(None, ge=0)
    count_in_stock: int = Field(0, ge=0)
    is_published: bool = False


class RecordSaleRequest(CamelModel):
    quantity: int = Field(..., ge=1)


# --- Product Response Schemas ---


class ProductIdResponse(CamelModel):
    product_id: str


class StatusResponse(CamelModel):
    status: str = "ok"


class RatingCount(CamelModel):
    rating: int
    count: int


class ProductResponse(CamelModel):
    id: str
    name: str
    slug: str
    category: str
    brand: str | None = None
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    price: float = 0.0
    list_price: float = 0.0
    count_in_stock: int = 0
    is_published: bool
    avg_rating: float = 0.0
    num_reviews: int = 0
    rating_distribution: list[RatingCount] = Field(default_factory=list)
    num_sales: int = 0
    created_at: str | None = None


class ProductCardResponse(CamelModel):
    name: str
    href: str
    image: str | None = None


class ProductPageResponse(CamelModel):
    data: list[ProductResponse]
    total_pages: int
